# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport seam used to send the Identify POST, plus the default factory."""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Sends one request and reports what happened.

    Implementations return ``HttpResponse(ok=True, status_code=...)`` for any received
    response, whatever its status, and ``ok=False`` with ``error_message`` for transport
    failures. Raising is tolerated; the Identify transport converts it to a failure.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:
        """Release pooled connections; the probe calls this once when it is done."""
        ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """
    Build the httpx-backed client.

    Raises OSError / ssl.SSLError when ``settings.ca_trust_file`` cannot be loaded.
    """
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())
