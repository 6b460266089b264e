"""Slack API 响应解析器

负责校验响应信封并提取结果集合。
"""

from typing import Any

from pydantic import ValidationError

from slackpost.endpoints.slack.exceptions import InvalidResponseError, RemoteError
from slackpost.endpoints.slack.models import APIResponse


class SlackResponseParser:
    """Slack API 响应解析器

    负责响应解析和结果提取。
    """

    def parse(self, response_data: Any, method: str | None = None) -> APIResponse:
        """解析响应数据

        Args:
            response_data: 解码后的 JSON 数据
            method: API 方法(可选,用于错误信息)

        Returns:
            APIResponse: 响应对象

        Raises:
            InvalidResponseError: 响应不是对象或 ok 字段格式错误
        """
        if not isinstance(response_data, dict):
            raise InvalidResponseError("response body is not a JSON object", method=method)

        try:
            return APIResponse.model_validate(response_data)
        except ValidationError as e:
            raise InvalidResponseError(f"malformed response envelope: {e}", method=method) from e

    def ensure_ok(self, response: APIResponse, method: str | None = None) -> APIResponse:
        """确认响应成功

        Raises:
            RemoteError: ok 不为 true,携带远端 error 或 "Unknown error"
        """
        if not response.is_success():
            raise RemoteError(response.get_error_msg(), method=method)
        return response

    def extract_items(
        self, response: APIResponse, key: str, method: str | None = None
    ) -> list[Any]:
        """提取结果集合

        空数组是合法的空结果;键缺失或不是数组则视为无效响应。

        Args:
            response: 成功的响应对象
            key: 集合键
            method: API 方法(可选)

        Returns:
            list[Any]: 原始记录列表,不做进一步校验

        Raises:
            InvalidResponseError: 集合键缺失或格式错误
        """
        items = response.get_items(key)
        if items is None:
            raise InvalidResponseError(f'response has no "{key}" list', method=method)
        return items
