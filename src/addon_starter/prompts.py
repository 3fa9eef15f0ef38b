"""Interactive questions used when command line flags are missing."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

__all__ = ["Prompter"]


class Prompter:
    """Ask questions on a text stream pair, ``stdin``/``stdout`` by default."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def say(self, message: str = "") -> None:
        self._stdout.write(f"{message}\n")

    def prompt(self, question: str, default: str = "") -> str:
        """Ask ``question`` and return the trimmed answer or ``default``."""

        if default:
            question += f" [{default}]"
        self._stdout.write(f"{question}: ")
        self._stdout.flush()

        answer = self._stdin.readline().strip()
        return answer or default

    def choice(self, question: str, options: Sequence[str], default: int = 0) -> str:
        """Return one of ``options`` picked by index or by its text.

        Answers that match neither an index nor an option select the default
        option instead of asking again.
        """

        self.say(question)
        for index, option in enumerate(options):
            marker = " (default)" if index == default else ""
            self.say(f"  [{index}] {option}{marker}")

        answer = self.prompt("Enter choice", str(default))
        if answer.isdecimal():
            selected = int(answer)
            if selected < len(options):
                return options[selected]
        elif answer in options:
            return answer
        return options[default]
