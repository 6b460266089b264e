"""业务服务

- resolver: 目的地类型和名称解析
- post_handler: post 命令编排
"""

from slackpost.services.post_handler import PostCommandHandler, validate_options
from slackpost.services.resolver import CommunityResolver, find_by_name, resolve_kind

__all__ = [
    "CommunityResolver",
    "PostCommandHandler",
    "find_by_name",
    "resolve_kind",
    "validate_options",
]
