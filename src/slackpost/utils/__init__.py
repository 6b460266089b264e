"""通用工具模块

此包包含项目中使用的通用工具函数:
- logging: 结构化日志配置
- security: 敏感数据脱敏
"""

from slackpost.utils.logging import configure_logging, get_logger
from slackpost.utils.security import mask_secret, redact_url

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_secret",
    "redact_url",
]
