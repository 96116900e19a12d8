"""Console interface for the interactive search."""

from typing import Protocol


class Console(Protocol):
    """Line-oriented input/output, injectable so workflows run without a terminal."""

    def prompt(self, text: str) -> str:
        """Show a prompt and return the line the user entered."""
        ...

    def echo(self, line: str = "") -> None:
        """Write one line of output."""
        ...
