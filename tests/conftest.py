"""Pytest 全局配置和 fixtures"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """每个测试后恢复 structlog 默认配置,避免日志写入已关闭的流"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def channel_records():
    """channels.list 返回的示例记录"""
    return [
        {"id": "C1", "name": "general"},
        {"id": "C2", "name": "random"},
    ]
