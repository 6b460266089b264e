import click

from slackpost.endpoints.slack.client import SlackAPIClient
from slackpost.endpoints.slack.config import SlackSettings
from slackpost.services.post_handler import PostCommandHandler

from .utils import ClickReporter


@click.command()
@click.option(
    "--type",
    "-t",
    "type_prefix",
    default=None,
    help="目的地类型: channels 或 groups 的前缀 (例如 ch, grp)",
)
@click.option(
    "--name",
    "-n",
    default=None,
    help="频道或群组名称（精确匹配，区分大小写）",
)
@click.option(
    "--token",
    default=None,
    help="Slack API token",
)
@click.option(
    "--message",
    "-m",
    default=None,
    help="消息内容",
)
@click.pass_obj
def post(
    settings: SlackSettings | None,
    type_prefix: str | None,
    name: str | None,
    token: str | None,
    message: str | None,
) -> None:
    """Post to a channel or group

    示例:
        slack-post post --type channel --name general --token xoxb-... --message "hi"
        slack-post post -t grp -n ops --token xoxb-... -m "deploy done"
    """
    with SlackAPIClient(settings or SlackSettings()) as client:
        handler = PostCommandHandler(client, ClickReporter())
        ok = handler.run(type_prefix, name, token, message)

    if not ok:
        raise SystemExit(1)
