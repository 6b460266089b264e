"""Slack Web API 端点

对外暴露客户端、配置和异常类型。
"""

from slackpost.endpoints.slack.client import SlackAPIClient
from slackpost.endpoints.slack.config import SlackSettings
from slackpost.endpoints.slack.exceptions import (
    InvalidResponseError,
    RemoteError,
    RequestTimeoutError,
    SlackAPIError,
    TransportError,
)

__all__ = [
    "SlackAPIClient",
    "SlackSettings",
    "SlackAPIError",
    "TransportError",
    "RequestTimeoutError",
    "InvalidResponseError",
    "RemoteError",
]
