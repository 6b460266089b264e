"""Slack API 数据模型

使用 Pydantic 定义响应信封和请求日志结构。
"""

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from slackpost.endpoints.slack.exceptions import UNKNOWN_ERROR


class APIResponse(BaseModel):
    """Slack Web API 响应信封

    形如 ``{"ok": true, "channels": [...]}`` 或 ``{"ok": false, "error": "invalid_auth"}``。
    结果集合的键随方法变化,作为额外字段保留。
    """

    ok: bool | None = Field(default=None, strict=True, description="是否成功")
    error: Any = Field(default=None, description="失败原因")

    model_config = {"extra": "allow"}

    def is_success(self) -> bool:
        """判断请求是否成功,缺失 ok 视为失败"""
        return self.ok is True

    def get_error_msg(self) -> str:
        """获取错误信息,缺失或非字符串时返回 "Unknown error" """
        if isinstance(self.error, str):
            return self.error
        return UNKNOWN_ERROR

    def get_items(self, key: str) -> list[Any] | None:
        """获取结果集合

        Args:
            key: 集合键,例如 ``channels``

        Returns:
            list[Any] | None: 原始记录列表;键缺失或不是数组时返回 None
        """
        value = (self.model_extra or {}).get(key)
        if isinstance(value, list):
            return value
        return None


class RequestLog(BaseModel):
    """API 请求日志模型

    记录一次 API 调用的详细信息,用于调试。
    """

    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="请求 ID")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="请求时间"
    )
    method: str = Field(..., description="API 方法")
    request_params: dict[str, Any] = Field(default_factory=dict, description="脱敏后的请求参数")
    response_status: int = Field(..., description="HTTP 状态码")
    response_time_ms: int = Field(..., ge=0, description="响应时间(毫秒)")
    error: str | None = Field(default=None, description="错误信息")

    def to_json(self) -> dict[str, Any]:
        """转换为 JSON 日志格式"""
        return self.model_dump(mode="json")
