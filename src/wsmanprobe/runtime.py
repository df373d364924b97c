# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade wiring the Identify builder, transport and interpreter together."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models import ProbeReport, ProbeTarget
from .wsman.presenter import Console, present
from .wsman.request import build_identify_request
from .wsman.response import interpret
from .wsman.transport import send_identify

logger = logging.getLogger(__name__)


class WsmanProbe:
    """
    Probe WSMAN endpoints with an anonymous Identify request.

    Holds no per-target state: probing the same target twice against an unchanged
    endpoint yields equal reports.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: HttpSettings | None = None):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)

    def probe(self, target: ProbeTarget) -> ProbeReport:
        logger.debug("Checking for WSMAN availability at %s", target.endpoint)
        request = build_identify_request(target)
        outcome = send_identify(self.http_client, request)
        return interpret(target, outcome)

    def run(self, targets: Iterable[ProbeTarget], *, verbosity: int, console: Console) -> int:
        """Probe targets one after another, report each, and return the process exit code."""
        failures = 0
        for target in targets:
            report = self.probe(target)
            if present(report, verbosity, console) != 0:
                failures += 1

        if failures:
            if verbosity < 1:
                noun = "node" if failures == 1 else "nodes"
                console.error(f"Failed to connect to {failures} {noun}.")
            return 1
        return 0

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> WsmanProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
