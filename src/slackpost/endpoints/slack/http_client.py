"""Slack API HTTP 客户端

负责发送同步 GET 请求和解码 JSON 响应。
"""

import time
from typing import Any

import httpx

from slackpost.endpoints.slack.config import TimeoutConfig
from slackpost.endpoints.slack.error_handler import SlackErrorHandler
from slackpost.endpoints.slack.exceptions import InvalidResponseError, SlackAPIError
from slackpost.endpoints.slack.models import RequestLog
from slackpost.utils.logging import get_logger
from slackpost.utils.security import redact_url

logger = get_logger(__name__)


class SlackHTTPClient:
    """Slack API HTTP 客户端

    实现 HTTPClientProtocol，负责 HTTP 请求发送和响应解码。不做重试。
    """

    def __init__(self, timeout: TimeoutConfig | None = None):
        """初始化 HTTP 客户端

        Args:
            timeout: 超时配置(可选)
        """
        timeout = timeout or TimeoutConfig()
        self.error_handler = SlackErrorHandler()

        self._client = httpx.Client(
            timeout=httpx.Timeout(
                connect=timeout.connect,
                read=timeout.read,
                write=timeout.read,
                pool=5.0,
            ),
            follow_redirects=True,
        )

        logger.debug("http_client_initialized")

    def __enter__(self) -> "SlackHTTPClient":
        """上下文管理器入口"""
        return self

    def __exit__(self, *args: Any) -> None:
        """上下文管理器出口"""
        self.close()

    def close(self) -> None:
        """关闭 HTTP 客户端"""
        self._client.close()
        logger.debug("http_client_closed")

    def get(self, method: str, url: str) -> Any:
        """发送 GET 请求并解码 JSON

        Args:
            method: API 方法名,仅用于日志和错误信息
            url: 完整请求 URL(含 token)

        Returns:
            Any: 解码后的 JSON 数据(可能是 dict / list / str / None)

        Raises:
            TransportError: 网络错误或 HTTP 错误状态
            InvalidResponseError: 响应体不是合法 JSON
        """
        start_time = time.time()
        safe_url = redact_url(url)

        logger.info("slack_api_request_sending", method=method, url=safe_url)

        try:
            response = self._client.get(url)
        except Exception as e:
            response_time_ms = int((time.time() - start_time) * 1000)
            error = self.error_handler.handle_request_exception(e, method)
            self._log_error(method, safe_url, 0, response_time_ms, str(e))
            raise error from e

        response_time_ms = int((time.time() - start_time) * 1000)

        if response.status_code != 200:
            http_error: SlackAPIError = self.error_handler.classify_http_error(response, method)
            self._log_error(
                method, safe_url, response.status_code, response_time_ms, str(http_error)
            )
            raise http_error

        try:
            response_data: Any = response.json()
        except ValueError as e:
            self._log_error(method, safe_url, response.status_code, response_time_ms, str(e))
            raise InvalidResponseError("response body is not valid JSON", method=method) from e

        request_log = RequestLog(
            method=method,
            request_params={"url": safe_url},
            response_status=response.status_code,
            response_time_ms=response_time_ms,
        )
        logger.info("slack_api_response_received", **request_log.to_json())

        return response_data

    def _log_error(
        self,
        method: str,
        safe_url: str,
        status_code: int,
        response_time_ms: int,
        error: str,
    ) -> None:
        """记录错误日志"""
        request_log = RequestLog(
            method=method,
            request_params={"url": safe_url},
            response_status=status_code,
            response_time_ms=response_time_ms,
            error=error,
        )

        logger.warning("slack_api_request_failed", **request_log.to_json())
