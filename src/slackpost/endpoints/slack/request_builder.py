"""Slack API 请求构建器

负责拼接带 token 的请求 URL 和编码消息文本。
"""

from urllib.parse import quote

from slackpost.endpoints.slack.config import DEFAULT_API_BASE_URL
from slackpost.utils.logging import get_logger

logger = get_logger(__name__)

POST_MESSAGE_METHOD = "chat.postMessage"


def encode_text(text: str) -> str:
    """百分号编码消息文本

    非保留字符(字母、数字、``-._~``)之外的 UTF-8 字节全部编码,
    空格编码为 ``%20``,``&`` 编码为 ``%26``。无法编码时退化为空字符串。

    Args:
        text: 原始消息文本

    Returns:
        str: 编码后的文本
    """
    try:
        return quote(text, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        logger.warning("message_text_encoding_failed", error=str(e))
        return ""


class SlackRequestBuilder:
    """Slack API 请求构建器

    method 和 token 原样拼接,调用方保证其为安全字面量。
    """

    def __init__(self, api_base_url: str = DEFAULT_API_BASE_URL):
        """初始化请求构建器

        Args:
            api_base_url: Web API 基础 URL
        """
        self.api_base_url = api_base_url.rstrip("/")

    def build_url(self, method: str, token: str) -> str:
        """构建 API 请求 URL

        Args:
            method: API 方法,例如 ``channels.list``
            token: 认证 token

        Returns:
            str: ``<base>/<method>?token=<token>``
        """
        return f"{self.api_base_url}/{method}?token={token}"

    def build_post_message_url(self, channel_id: str, text: str, token: str) -> str:
        """构建 chat.postMessage 请求 URL

        Args:
            channel_id: 目标频道或群组 ID
            text: 消息文本
            token: 认证 token

        Returns:
            str: 完整请求 URL
        """
        base = self.build_url(POST_MESSAGE_METHOD, token)
        return f"{base}&channel={channel_id}&text={encode_text(text)}"
