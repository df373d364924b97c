# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal implementation of the probe's output channels."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO


class TerminalConsole:
    """
    Messages to stdout, warnings and errors to stderr, structured output as JSON.

    With ``json_lines`` each structured object is written compactly on its own line,
    so output for several hosts stays machine-readable as JSON Lines.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None, *, json_lines: bool = False):
        self._stdout = stdout
        self._stderr = stderr
        self.json_lines = json_lines

    # Resolved lazily so pytest's capsys sees the swapped streams.
    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def msg(self, message: str) -> None:
        print(message, file=self.stdout)

    def warn(self, message: str) -> None:
        print(f"WARNING: {message}", file=self.stderr)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=self.stderr)

    def output(self, data: Any) -> None:
        payload = data.to_dict() if hasattr(data, "to_dict") else data
        if self.json_lines:
            json.dump(payload, self.stdout, sort_keys=True)
        else:
            json.dump(payload, self.stdout, indent=2, sort_keys=True)
        self.stdout.write("\n")
