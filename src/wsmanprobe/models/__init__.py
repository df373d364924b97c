# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for wsmanprobe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .identify import IdentifyResult
from .outcome import HttpStatus, TransportFailure, TransportOutcome
from .report import ProbeReport
from .target import DEFAULT_PORTS, ProbeTarget, Scheme

__all__ = [
    "DEFAULT_PORTS",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpStatus",
    "IdentifyResult",
    "ProbeReport",
    "ProbeTarget",
    "Scheme",
    "TransportFailure",
    "TransportOutcome",
]
