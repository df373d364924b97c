# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""WS-Management Identify: request building, transport and response interpretation."""

from .constants import IDENTIFY_REQUEST_BODY, NAMESPACES, SOAP_CONTENT_TYPE
from .presenter import Console, present
from .request import build_endpoint_url, build_identify_request
from .response import interpret, parse_identify_response
from .transport import send_identify

__all__ = [
    "Console",
    "IDENTIFY_REQUEST_BODY",
    "NAMESPACES",
    "SOAP_CONTENT_TYPE",
    "build_endpoint_url",
    "build_identify_request",
    "interpret",
    "parse_identify_response",
    "present",
    "send_identify",
]
