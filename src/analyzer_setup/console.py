from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Console:
    """
    Line-oriented operator channel.

    Defaults to the process streams; tests pass io.StringIO objects.
    """
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def ask(self, prompt: str) -> str:
        # Blocks until a full line arrives; end of input reads as "".
        self.stdout.write(prompt)
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except UnicodeDecodeError:
            self.error("Input could not be decoded as text.")
            return ""
        return line.rstrip("\r\n")

    def info(self, msg: str = "") -> None:
        print(msg, file=self.stdout)

    def error(self, msg: str) -> None:
        print(msg, file=self.stderr)
