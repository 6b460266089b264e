"""数据模型"""

from slackpost.models.community import Community, CommunityKind
from slackpost.models.options import PostOptions

__all__ = ["Community", "CommunityKind", "PostOptions"]
