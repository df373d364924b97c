# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Verbosity-dependent presentation of probe reports."""

from typing import Any, Protocol

from ..models.report import ProbeReport


class Console(Protocol):
    """Output channels the probe writes to."""

    def msg(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def output(self, data: Any) -> None: ...


def present(report: ProbeReport, verbosity: int, console: Console) -> int:
    """
    Emit one report and return its exit code.

    verbosity 0 prints a message on success and a warning on failure; verbosity >= 1
    hands the structured report to ``console.output`` instead. The summary error line
    for failures is left to the caller so several targets share one.
    """
    if verbosity >= 1:
        console.output(report)
    elif report.ok:
        console.msg(f"Connected successfully to {report.target.host} at {report.target.endpoint}.")
    else:
        console.warn(f"Failed to connect to {report.target.host} at {report.target.endpoint}: {report.error_message}")
    return report.exit_code
