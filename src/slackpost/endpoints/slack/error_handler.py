"""Slack API 错误处理器

负责将 HTTP 错误和 httpx 异常转换为具体的 SlackAPIError 子类。
"""

import httpx

from slackpost.endpoints.slack.exceptions import (
    RequestTimeoutError,
    SlackAPIError,
    TransportError,
)


class SlackErrorHandler:
    """Slack API 错误处理器

    负责错误分类和异常转换。
    """

    def classify_http_error(self, response: httpx.Response, method: str) -> SlackAPIError:
        """根据 HTTP 响应分类错误

        Args:
            response: HTTP 响应对象
            method: API 方法

        Returns:
            SlackAPIError: 具体的错误类型
        """
        status_code = response.status_code

        if status_code == 429:
            return TransportError("rate limited: HTTP 429", method=method, status_code=429)

        if 500 <= status_code < 600:
            return TransportError(
                f"server error: HTTP {status_code}", method=method, status_code=status_code
            )

        return TransportError(f"HTTP error: {status_code}", method=method, status_code=status_code)

    def handle_request_exception(self, exc: Exception, method: str) -> SlackAPIError:
        """处理请求异常

        Args:
            exc: 原始异常
            method: API 方法

        Returns:
            SlackAPIError: 转换后的错误类型
        """
        if isinstance(exc, httpx.TimeoutException):
            return RequestTimeoutError(f"request timed out: {exc}", method=method)

        if isinstance(exc, httpx.ConnectError):
            return TransportError(f"connection failed: {exc}", method=method)

        if isinstance(exc, httpx.RequestError):
            return TransportError(f"request error: {exc}", method=method)

        return SlackAPIError(f"unexpected error: {exc}", method=method)
