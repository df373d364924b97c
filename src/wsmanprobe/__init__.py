# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
wsmanprobe package entrypoint.

Checks that a host exposes a reachable WS-Management (WinRM) endpoint by sending an
anonymous WS-Identify request and reading back the protocol version and product
details. HTTP behavior is abstracted behind an injectable client interface, and
domain objects are modeled with typed dataclasses.
"""

from .config import HttpSettings, load_http_settings
from .errors import ErrorCategory, IdentifyParseError, WsmanProbeError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    HttpStatus,
    IdentifyResult,
    ProbeReport,
    ProbeTarget,
    Scheme,
    TransportFailure,
    TransportOutcome,
)
from .runtime import WsmanProbe
from .version import __version__

__all__ = [
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpStatus",
    "HttpxClient",
    "IdentifyParseError",
    "IdentifyResult",
    "ProbeReport",
    "ProbeTarget",
    "Scheme",
    "StubHttpClient",
    "TransportFailure",
    "TransportOutcome",
    "WsmanProbe",
    "WsmanProbeError",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
