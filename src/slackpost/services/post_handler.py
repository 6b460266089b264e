"""post 命令处理器

按固定顺序执行一次: 校验输入 → 解析类型 → 列表 → 名称匹配 → 发送消息。
任何一步失败都转换为一条面向用户的信息并结束,不重试,不向上抛出。
"""

from __future__ import annotations

from typing import Protocol

from pydantic import ValidationError

from slackpost.endpoints.slack.exceptions import SlackAPIError
from slackpost.endpoints.slack.protocols import SlackClientProtocol
from slackpost.models.community import Community
from slackpost.models.options import PostOptions
from slackpost.services.exceptions import (
    MissingOptionError,
    PostCommandError,
    TargetNotFoundError,
)
from slackpost.services.resolver import CommunityResolver, resolve_kind
from slackpost.utils.logging import get_logger

logger = get_logger(__name__)

# 字段声明顺序即提示顺序
MISSING_OPTION_MESSAGES: dict[str, str] = {
    "type_prefix": "Type not specified.",
    "name": "Name not specified.",
    "token": "Token not specified.",
    "message": "Empty message.",
}


class PostReporter(Protocol):
    """命令结果输出协议"""

    def input_missing(self, messages: list[str]) -> None: ...

    def failure(self, message: str) -> None: ...

    def posting(self, message: str, target: Community) -> None: ...

    def success(self, target: Community) -> None: ...


def validate_options(
    type_prefix: str | None,
    name: str | None,
    token: str | None,
    message: str | None,
) -> PostOptions:
    """一次性校验四个必需输入

    None 视为缺失;空字符串视为已提供。

    Raises:
        MissingOptionError: 列出每个缺失字段及其提示
    """
    provided = {
        key: value
        for key, value in {
            "type_prefix": type_prefix,
            "name": name,
            "token": token,
            "message": message,
        }.items()
        if value is not None
    }

    try:
        return PostOptions.model_validate(provided)
    except ValidationError as e:
        missing = {
            str(error["loc"][0]) for error in e.errors() if error["type"] == "missing"
        }
        fields = [field for field in MISSING_OPTION_MESSAGES if field in missing]
        raise MissingOptionError(
            fields, [MISSING_OPTION_MESSAGES[field] for field in fields]
        ) from e


class PostCommandHandler:
    """post 命令处理器"""

    def __init__(self, client: SlackClientProtocol, reporter: PostReporter):
        """初始化处理器

        Args:
            client: Slack API 客户端
            reporter: 结果输出
        """
        self.client = client
        self.reporter = reporter
        self.resolver = CommunityResolver(client)

    def run(
        self,
        type_prefix: str | None,
        name: str | None,
        token: str | None,
        message: str | None,
    ) -> bool:
        """执行一次 post 命令

        Returns:
            bool: 消息发送成功返回 True,其他情况返回 False
        """
        try:
            options = validate_options(type_prefix, name, token, message)
        except MissingOptionError as e:
            logger.debug("post_options_missing", fields=e.fields)
            self.reporter.input_missing(e.messages)
            return False

        try:
            target = self.resolver.resolve(options.type_prefix, options.name, options.token)
        except PostCommandError as e:
            self.reporter.failure(e.message)
            return False
        except SlackAPIError as e:
            # 列表失败后目标同样无法确认
            kind = resolve_kind(options.type_prefix)
            self.reporter.failure(_describe_api_failure(e))
            if kind is not None:
                self.reporter.failure(TargetNotFoundError(kind, options.name).message)
            return False

        self.reporter.posting(options.message, target)

        try:
            self.client.post_message(target.id, options.message, options.token)
        except SlackAPIError as e:
            self.reporter.failure(_describe_api_failure(e))
            return False

        self.reporter.success(target)
        return True


def _describe_api_failure(error: SlackAPIError) -> str:
    if error.method:
        return f'Failed from "{error.method}" with error message: {error.message}'
    return f"Request failed with error message: {error.message}"
