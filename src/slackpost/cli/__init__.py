"""
命令行工具模块

当前提供:
- post: 向频道或群组发送消息
"""

from slackpost.cli.main import cli, main

__all__ = ["cli", "main"]
