"""post 命令异常定义

区分输入缺失、类型无法识别和目的地不存在三类命令层错误。
"""

from __future__ import annotations

from collections.abc import Sequence

from slackpost.models.community import CommunityKind


class PostCommandError(Exception):
    """post 命令基础异常"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingOptionError(PostCommandError):
    """必需参数缺失

    每个缺失字段对应一条独立的提示信息。
    """

    def __init__(self, fields: Sequence[str], messages: Sequence[str]):
        super().__init__(" ".join(messages))
        self.fields = list(fields)
        self.messages = list(messages)


class UnsupportedTypeError(PostCommandError):
    """类型前缀既不是 channels 也不是 groups 的前缀"""

    def __init__(self, type_prefix: str):
        super().__init__("Unsupported type.")
        self.type_prefix = type_prefix


class TargetNotFoundError(PostCommandError):
    """列表中没有名称完全匹配的目的地"""

    def __init__(self, kind: CommunityKind, name: str):
        super().__init__(f"Unknown {kind.value}.")
        self.kind = kind
        self.name = name
