"""目的地解析

将类型前缀解析为 CommunityKind，再在列表结果中按名称精确查找。
"""

from __future__ import annotations

from collections.abc import Iterable

from slackpost.endpoints.slack.protocols import SlackClientProtocol
from slackpost.models.community import Community, CommunityKind
from slackpost.services.exceptions import TargetNotFoundError, UnsupportedTypeError
from slackpost.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_kind(type_prefix: str) -> CommunityKind | None:
    """按前缀解析目的地类型

    按声明顺序取第一个集合键以 ``type_prefix`` 开头的类型。
    空字符串是任何键的前缀,因此解析为 channel。
    没有前缀匹配时,再按缩写匹配(首字母相同,其余字母按顺序出现),
    例如 ``grp`` → groups。

    Args:
        type_prefix: 用户输入的类型前缀,例如 ``ch``、``grp``

    Returns:
        CommunityKind | None: 匹配的类型,无匹配时返回 None
    """
    for kind in CommunityKind:
        if kind.collection_key.startswith(type_prefix):
            return kind

    for kind in CommunityKind:
        if _is_abbreviation(type_prefix, kind.collection_key):
            logger.debug("community_type_abbreviation", type_prefix=type_prefix, kind=kind.value)
            return kind
    return None


def _is_abbreviation(abbreviation: str, word: str) -> bool:
    if not abbreviation or abbreviation[0] != word[0]:
        return False
    remaining = iter(word[1:])
    return all(char in remaining for char in abbreviation[1:])


def find_by_name(communities: Iterable[Community], name: str) -> Community | None:
    """按名称精确查找(区分大小写),返回列表中第一个匹配项"""
    for community in communities:
        if community.name == name:
            return community
    return None


class CommunityResolver:
    """目的地解析器

    调用列表接口并在结果中查找目标。列表失败时直接向上抛出 SlackAPIError。
    """

    def __init__(self, client: SlackClientProtocol):
        self.client = client

    def list_communities(self, kind: CommunityKind, token: str) -> list[Community]:
        """列出并构建某类目的地"""
        records = self.client.list_communities(kind, token)
        return [Community.from_record(kind, record) for record in records]

    def resolve(self, type_prefix: str, name: str, token: str) -> Community:
        """解析目的地

        Args:
            type_prefix: 类型前缀
            name: 目的地名称
            token: 认证 token

        Returns:
            Community: 匹配的目的地

        Raises:
            UnsupportedTypeError: 类型前缀无法识别
            SlackAPIError: 列表接口调用失败
            TargetNotFoundError: 没有名称匹配的目的地
        """
        kind = resolve_kind(type_prefix)
        if kind is None:
            logger.warning("unsupported_community_type", type_prefix=type_prefix)
            raise UnsupportedTypeError(type_prefix)

        communities = self.list_communities(kind, token)
        target = find_by_name(communities, name)
        if target is None:
            logger.warning(
                "community_not_found", kind=kind.value, name=name, candidates=len(communities)
            )
            raise TargetNotFoundError(kind, name)

        logger.info("community_resolved", kind=kind.value, name=name, id=target.id)
        return target
