import click

from slackpost.models.community import Community


class ClickReporter:
    """用 click 彩色输出命令结果,错误写入 stderr"""

    def input_missing(self, messages: list[str]) -> None:
        for message in messages:
            echo_error(message)

    def failure(self, message: str) -> None:
        echo_error(message)

    def posting(self, message: str, target: Community) -> None:
        click.secho(f'Posting "{message}" to {target.label()} ...', fg="blue")

    def success(self, target: Community) -> None:
        click.secho(f"Posted to {target.label()}.", fg="green")


def echo_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)
