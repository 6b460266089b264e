"""Community 数据模型

Slack 上可以接收消息的目的地:频道(channel)和群组(group)。
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class CommunityKind(str, Enum):
    """目的地类型

    成员声明顺序即前缀匹配时的优先顺序。
    """

    CHANNEL = "channel"
    GROUP = "group"

    @property
    def collection_key(self) -> str:
        """API 集合键,同时用于列表方法名和响应字段名"""
        return f"{self.value}s"

    @property
    def list_method(self) -> str:
        """列表 API 方法名,例如 ``channels.list``"""
        return f"{self.collection_key}.list"


class Community(BaseModel):
    """频道或群组

    由列表响应中的一条原始记录构建,构建后不可变。
    """

    id: str = Field(default="", description="远端不透明 ID")
    name: str = Field(default="", description="显示名称")
    kind: CommunityKind = Field(..., description="目的地类型")

    model_config = {"frozen": True}

    @classmethod
    def from_record(cls, kind: CommunityKind, record: Any) -> "Community":
        """从列表响应记录构建

        记录不是对象、字段缺失或不是字符串时,id 和 name 取空字符串。

        Args:
            kind: 目的地类型
            record: 列表响应中的一条原始记录

        Returns:
            Community: 目的地对象
        """
        data = record if isinstance(record, dict) else {}
        return cls(
            id=_string_field(data, "id"),
            name=_string_field(data, "name"),
            kind=kind,
        )

    def label(self) -> str:
        """展示标签:频道为 ``#<name>``,群组为 ``<name> group``"""
        if self.kind is CommunityKind.CHANNEL:
            return f"#{self.name}"
        return f"{self.name} {self.kind.value}"


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""
