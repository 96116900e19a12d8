"""Terminal console adapter backed by click."""

import click


class ClickConsole:
    """
    Console on stdin/stdout.

    Implements Console protocol.
    """

    def prompt(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False)

    def echo(self, line: str = "") -> None:
        click.echo(line)
