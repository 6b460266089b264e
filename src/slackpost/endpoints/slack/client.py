"""Slack API 客户端

组合请求构建器、HTTP 客户端和响应解析器，提供列表和发消息两个操作。
"""

from typing import Any

from slackpost.endpoints.slack.config import SlackSettings
from slackpost.endpoints.slack.exceptions import SlackAPIError
from slackpost.endpoints.slack.http_client import SlackHTTPClient
from slackpost.endpoints.slack.models import APIResponse
from slackpost.endpoints.slack.protocols import HTTPClientProtocol
from slackpost.endpoints.slack.request_builder import (
    POST_MESSAGE_METHOD,
    SlackRequestBuilder,
)
from slackpost.endpoints.slack.response_parser import SlackResponseParser
from slackpost.models.community import CommunityKind
from slackpost.utils.logging import get_logger

logger = get_logger(__name__)


class SlackAPIClient:
    """Slack API 客户端

    同步、单次调用,不重试。所有失败先记录日志再抛出 SlackAPIError 子类。
    """

    def __init__(
        self,
        settings: SlackSettings | None = None,
        http_client: HTTPClientProtocol | None = None,
    ):
        """初始化客户端

        Args:
            settings: 客户端配置(可选,默认从环境变量加载)
            http_client: HTTP 客户端(可选,便于测试替换)
        """
        self.settings = settings or SlackSettings()
        self.request_builder = SlackRequestBuilder(self.settings.api_base_url)
        self.response_parser = SlackResponseParser()
        self.http_client = http_client or SlackHTTPClient(self.settings.timeout)

    def __enter__(self) -> "SlackAPIClient":
        """上下文管理器入口"""
        return self

    def __exit__(self, *args: Any) -> None:
        """上下文管理器出口"""
        self.close()

    def close(self) -> None:
        """关闭底层 HTTP 客户端"""
        self.http_client.close()

    def list_communities(self, kind: CommunityKind, token: str) -> list[Any]:
        """列出某类目的地

        Args:
            kind: 目的地类型
            token: 认证 token

        Returns:
            list[Any]: 原始记录列表(可能为空)

        Raises:
            TransportError: 网络错误
            InvalidResponseError: 响应无效或缺少集合键
            RemoteError: ok 为 false
        """
        method = kind.list_method
        url = self.request_builder.build_url(method, token)

        try:
            response = self._call(method, url)
            items = self.response_parser.extract_items(response, kind.collection_key, method)
        except SlackAPIError as e:
            logger.error("slack_api_call_failed", method=method, error=e.message)
            raise

        logger.info("communities_listed", method=method, count=len(items))
        return items

    def post_message(self, channel_id: str, text: str, token: str) -> None:
        """发送文本消息

        Args:
            channel_id: 目的地 ID
            text: 消息文本
            token: 认证 token

        Raises:
            TransportError: 网络错误
            InvalidResponseError: 响应无效
            RemoteError: ok 为 false
        """
        url = self.request_builder.build_post_message_url(channel_id, text, token)

        try:
            self._call(POST_MESSAGE_METHOD, url)
        except SlackAPIError as e:
            logger.error(
                "slack_api_call_failed",
                method=POST_MESSAGE_METHOD,
                channel=channel_id,
                error=e.message,
            )
            raise

        logger.info("message_posted", channel=channel_id)

    def _call(self, method: str, url: str) -> APIResponse:
        response_data = self.http_client.get(method, url)
        response = self.response_parser.parse(response_data, method)
        return self.response_parser.ensure_ok(response, method)
