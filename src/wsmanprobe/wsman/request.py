# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Identify request builder."""

from ..http.models import HttpRequest
from ..models.target import ProbeTarget
from .constants import IDENTIFY_REQUEST_BODY, SOAP_CONTENT_TYPE


def build_endpoint_url(target: ProbeTarget) -> str:
    return target.endpoint


def build_identify_request(target: ProbeTarget, *, timeout: float | None = None) -> HttpRequest:
    """POST of the fixed Identify envelope to the target's /wsman endpoint."""
    return HttpRequest(
        url=build_endpoint_url(target),
        method="POST",
        headers={"Content-Type": SOAP_CONTENT_TYPE},
        body=IDENTIFY_REQUEST_BODY.encode("utf-8"),
        timeout=timeout,
    )
