"""Line-oriented command script interpreter."""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Sequence

Handler = Callable[[List[str]], None]


def _print_command(args: Sequence[str]) -> None:
    print("".join(f"{arg} " for arg in args))


def _wait_command(args: Sequence[str]) -> None:
    if not args:
        raise ValueError("wait needs a duration in milliseconds")
    time.sleep(int(args[0]) / 1000.0)


class ScriptInterpreter:
    """Runs scripts of whitespace-separated commands, one per line."""

    def __init__(self) -> None:
        self._commands: Dict[str, Handler] = {
            "print": _print_command,
            "wait": _wait_command,
        }
        self._lines: List[str] = []

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def register(self, name: str, handler: Handler) -> None:
        """Add or replace a command; the handler receives the argument words."""
        self._commands[name] = handler

    def load_script(self, code: str) -> None:
        """Append the script's lines to those to run."""
        self._lines.extend(code.splitlines())

    def execute(self) -> None:
        """Run every loaded line, reporting unknown commands on stdout."""
        for line in self._lines:
            words = line.split()
            command = words[0] if words else ""
            handler = self._commands.get(command)
            if handler is None:
                print(f"[SCRIPT ERROR] Unknown command: {command}")
            else:
                handler(words[1:])