"""Slack API 客户端协议接口

定义客户端各组件的协议接口，用于依赖注入和测试替换。
"""

from typing import Any, Protocol

from slackpost.models.community import CommunityKind


class HTTPClientProtocol(Protocol):
    """HTTP 客户端协议"""

    def get(self, method: str, url: str) -> Any:
        """发送 GET 请求并返回解码后的 JSON"""
        ...

    def close(self) -> None:
        """关闭 HTTP 客户端"""
        ...


class SlackClientProtocol(Protocol):
    """Slack API 客户端协议

    解析器和命令处理器只依赖这两个操作。
    """

    def list_communities(self, kind: CommunityKind, token: str) -> list[Any]:
        """列出某类目的地的原始记录

        Args:
            kind: 目的地类型
            token: 认证 token

        Returns:
            list[Any]: 原始记录列表
        """
        ...

    def post_message(self, channel_id: str, text: str, token: str) -> None:
        """向目的地发送消息

        Args:
            channel_id: 目的地 ID
            text: 消息文本
            token: 认证 token
        """
        ...
