"""slack-post 命令行入口

用法:
    slack-post post --type channel --name general --token xoxb-... --message "hi"
    slack-post --log-level DEBUG post ...
"""

import click

from slackpost import __version__
from slackpost.cli.post_commands import post
from slackpost.endpoints.slack.config import SlackSettings
from slackpost.utils.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="slack-post")
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="日志级别 (默认: WARNING，或 SLACK_POST_LOGGING__LEVEL)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="以 JSON 格式输出日志",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, json_logs: bool) -> None:
    """Slack 命令行工具: 按名称向频道或群组发送消息"""
    settings = SlackSettings()

    # 命令行参数覆盖环境变量
    if log_level:
        settings.logging.level = log_level.upper()
    if json_logs:
        settings.logging.json_format = True

    configure_logging(settings.logging.level, json_format=settings.logging.json_format)
    ctx.obj = settings


cli.add_command(post)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
