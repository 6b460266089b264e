"""结构化日志配置

使用 structlog 和 orjson 输出日志。日志统一写入 stderr，避免污染命令输出。
"""

import logging
import sys
from datetime import UTC, datetime
from typing import Any

import orjson
import structlog
from structlog.types import EventDict, Processor


def orjson_dumps(obj: Any, **kwargs: Any) -> str:
    """使用 orjson 序列化 JSON

    Args:
        obj: 要序列化的对象
        **kwargs: 传递给 JSONRenderer 的额外参数(被忽略)

    Returns:
        str: JSON 字符串
    """
    return orjson.dumps(obj, default=str).decode("utf-8")


def add_timestamp(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """添加 ISO 8601 格式的时间戳"""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """添加日志级别字段

    Args:
        logger: 日志记录器(未使用)
        method_name: 日志方法名称
        event_dict: 事件字典

    Returns:
        EventDict: 添加了 level 字段的事件字典
    """
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # 每次创建时读取当前的 sys.stderr，CliRunner 会替换它
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", json_format: bool = False) -> None:
    """配置全局日志系统

    Args:
        level: 日志级别(DEBUG/INFO/WARNING/ERROR/CRITICAL)
        json_format: 是否使用 JSON 格式(True)或人类可读格式(False)
    """
    from slackpost.utils.security import mask_sensitive_data

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_timestamp,
        add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        mask_sensitive_data,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(serializer=orjson_dumps))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    # 标准库 logging(httpx 等第三方库使用)
    logging.basicConfig(
        format="%(message)s",
        level=level.upper(),
        stream=sys.stderr,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """获取结构化日志记录器

    Args:
        name: 日志记录器名称(可选),通常使用模块名 __name__

    Returns:
        structlog.BoundLogger: 结构化日志记录器
    """
    return structlog.get_logger(name)
