"""Terminal input and output used by the interactive menus."""

from __future__ import annotations

import subprocess
import sys
from collections import deque
from typing import Callable, TextIO


def clear_console() -> None:
    """Clear the terminal screen with the platform's own command."""
    try:
        if sys.platform == "win32":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


class Console:
    """Reads whitespace separated answers and writes lines of text.

    Answers are read token by token, so several answers may be given on
    one line. End of input raises EOFError.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: Callable[[], None] | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear_screen = clear_screen if clear_screen is not None else clear_console
        self._tokens: deque[str] = deque()

    def _next_token(self) -> str:
        while not self._tokens:
            line = self._stdin.readline()
            if not line:
                raise EOFError("fin de l'entree")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def prompt(self, label: str) -> str:
        """Show a label and return the next word typed."""
        self._stdout.write(label)
        self._stdout.flush()
        return self._next_token()

    def prompt_int(self, label: str) -> int:
        token = self.prompt(label)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"entier attendu : {token!r}") from None

    def prompt_float(self, label: str) -> float:
        token = self.prompt(label)
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"nombre attendu : {token!r}") from None

    def write(self, text: str = "") -> None:
        """Write one line of text."""
        self._stdout.write(f"{text}\n")
        self._stdout.flush()

    def clear(self) -> None:
        self._clear_screen()