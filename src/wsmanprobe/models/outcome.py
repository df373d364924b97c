# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outcome of a single Identify POST."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ErrorCategory


@dataclass(frozen=True)
class TransportFailure:
    """No HTTP response was received; ``message`` is the transport error text, unmodified."""

    message: str
    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR


@dataclass(frozen=True)
class HttpStatus:
    """
    An HTTP response was received, whatever its status code.

    ``content`` holds the raw bytes so XML is decoded by its own declaration rather
    than the HTTP charset; ``truncated`` is set when the body hit the size cap.
    """

    code: int
    body: str = ""
    content: bytes = b""
    truncated: bool = False


TransportOutcome = TransportFailure | HttpStatus
