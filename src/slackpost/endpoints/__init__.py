"""远程端点模块

此包包含外部消息平台的端点客户端:
- slack: Slack Web API 客户端
"""

from slackpost.endpoints.base import BaseEndpointError

__all__ = ["BaseEndpointError"]
