"""Slack 客户端配置

使用 Pydantic Settings 从环境变量加载和验证配置。token 不属于配置,每次调用时传入。
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_API_BASE_URL = "https://slack.com/api"


class TimeoutConfig(BaseModel):
    """超时配置"""

    connect: float = Field(default=10, ge=1, le=60, description="连接超时(秒)")
    read: float = Field(default=30, ge=1, le=300, description="读取超时(秒)")


class LoggingConfig(BaseModel):
    """日志配置"""

    level: str = Field(default="WARNING", description="日志级别")
    json_format: bool = Field(default=False, description="是否输出 JSON 日志")


class SlackSettings(BaseSettings):
    """Slack 客户端完整配置

    环境变量示例::

        SLACK_POST_API_BASE_URL=https://slack.com/api
        SLACK_POST_TIMEOUT__READ=60
        SLACK_POST_LOGGING__LEVEL=DEBUG
    """

    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, description="Web API 基础 URL")
    timeout: TimeoutConfig = Field(default_factory=TimeoutConfig, description="超时配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")

    model_config = {
        "env_prefix": "SLACK_POST_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }
