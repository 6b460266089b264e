#!/usr/bin/env python3
"""slack-post CLI 工具

用法:
    python cli.py post --type channel --name general --token xoxb-... --message "hi"
    python cli.py post --help   # 查看帮助
"""

from slackpost.cli.main import cli

if __name__ == "__main__":
    cli()
