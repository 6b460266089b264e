"""HTTP 客户端单元测试"""

import httpx
import pytest
from pytest_httpx import HTTPXMock

from slackpost.endpoints.slack.config import TimeoutConfig
from slackpost.endpoints.slack.exceptions import (
    InvalidResponseError,
    RequestTimeoutError,
    TransportError,
)
from slackpost.endpoints.slack.http_client import SlackHTTPClient

LIST_URL = "https://slack.com/api/channels.list?token=T1"


@pytest.fixture
def http_client() -> SlackHTTPClient:
    """创建 HTTP 客户端实例"""
    client = SlackHTTPClient(TimeoutConfig(connect=5, read=30))
    yield client
    client.close()


class TestGet:
    """GET 请求测试"""

    def test_get_returns_decoded_json(self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock):
        """成功时返回解码后的 JSON"""
        httpx_mock.add_response(url=LIST_URL, json={"ok": True, "channels": []})

        data = http_client.get("channels.list", LIST_URL)

        assert data == {"ok": True, "channels": []}

    def test_get_uses_http_get(self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock):
        """使用 GET 方法"""
        httpx_mock.add_response(json={"ok": True})

        http_client.get("channels.list", LIST_URL)

        request = httpx_mock.get_requests()[0]
        assert request.method == "GET"

    def test_get_non_object_json_is_returned_as_is(
        self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock
    ):
        """非对象 JSON 原样返回,由解析器判断"""
        httpx_mock.add_response(json=[1, 2, 3])

        assert http_client.get("channels.list", LIST_URL) == [1, 2, 3]

    def test_invalid_json_raises_invalid_response(
        self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock
    ):
        """响应体不是 JSON 应抛出 InvalidResponseError"""
        httpx_mock.add_response(text="<html>oops</html>")

        with pytest.raises(InvalidResponseError) as exc_info:
            http_client.get("channels.list", LIST_URL)

        assert exc_info.value.method == "channels.list"

    def test_empty_body_raises_invalid_response(
        self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock
    ):
        """空响应体应抛出 InvalidResponseError"""
        httpx_mock.add_response(text="")

        with pytest.raises(InvalidResponseError):
            http_client.get("channels.list", LIST_URL)

    def test_server_error_raises_transport_error(
        self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock
    ):
        """5xx 状态码应抛出 TransportError"""
        httpx_mock.add_response(status_code=503)

        with pytest.raises(TransportError) as exc_info:
            http_client.get("channels.list", LIST_URL)

        assert exc_info.value.status_code == 503
        assert "server error" in str(exc_info.value)

    def test_timeout_raises_request_timeout_error(
        self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock
    ):
        """超时应抛出 RequestTimeoutError"""
        httpx_mock.add_exception(httpx.ReadTimeout("Request timeout"))

        with pytest.raises(RequestTimeoutError) as exc_info:
            http_client.get("channels.list", LIST_URL)

        assert isinstance(exc_info.value, TransportError)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    def test_connect_error_raises_transport_error(
        self, http_client: SlackHTTPClient, httpx_mock: HTTPXMock
    ):
        """连接错误应抛出 TransportError 并保留原始异常"""
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with pytest.raises(TransportError) as exc_info:
            http_client.get("channels.list", LIST_URL)

        assert "connection failed" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestClientLifecycle:
    """客户端生命周期测试"""

    def test_close_client(self):
        """关闭客户端"""
        client = SlackHTTPClient()

        client.close()

        assert client._client.is_closed

    def test_context_manager(self):
        """上下文管理器"""
        with SlackHTTPClient() as client:
            assert not client._client.is_closed

        assert client._client.is_closed
