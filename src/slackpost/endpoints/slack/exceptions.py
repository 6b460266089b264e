"""Slack API 自定义异常

定义 Slack 端点特定的异常类型,用于错误分类和处理。
"""

from slackpost.endpoints.base import BaseEndpointError

UNKNOWN_ERROR = "Unknown error"


class SlackAPIError(BaseEndpointError):
    """Slack API 错误基类

    所有 Slack API 相关的异常都继承此类。
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        status_code: int | None = None,
    ):
        """初始化 Slack API 错误

        Args:
            message: 错误信息
            method: 出错的 API 方法,例如 ``channels.list``(可选)
            status_code: HTTP 状态码(可选)
        """
        super().__init__(message)
        self.method = method
        self.status_code = status_code


class TransportError(SlackAPIError):
    """传输层错误

    DNS、连接失败、HTTP 错误状态等网络层面的问题。
    """

    def __init__(
        self,
        message: str = "request error",
        method: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, method=method, status_code=status_code)


class RequestTimeoutError(TransportError):
    """请求超时错误"""

    def __init__(self, message: str = "request timed out", method: str | None = None):
        super().__init__(message, method=method)


class InvalidResponseError(SlackAPIError):
    """无效响应错误

    响应体不是 JSON、不是对象,或缺少期望的字段。
    """

    def __init__(self, message: str = "invalid response", method: str | None = None):
        super().__init__(message, method=method, status_code=200)


class RemoteError(SlackAPIError):
    """远端业务错误

    响应格式正确但 ``ok`` 不为 true,携带远端返回的 ``error`` 原因。
    """

    def __init__(self, error: str = UNKNOWN_ERROR, method: str | None = None):
        super().__init__(error, method=method, status_code=200)
        self.error = error
