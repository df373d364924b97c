# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe target model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


# WinRM listener defaults.
DEFAULT_PORTS: dict[Scheme, int] = {
    Scheme.HTTP: 5985,
    Scheme.HTTPS: 5986,
}

WSMAN_PATH = "/wsman"


@dataclass(frozen=True)
class ProbeTarget:
    host: str
    port: int
    scheme: Scheme = Scheme.HTTP

    def __post_init__(self) -> None:
        object.__setattr__(self, "scheme", Scheme(self.scheme))

    @classmethod
    def for_host(cls, host: str, *, scheme: Scheme | str = Scheme.HTTP, port: int | None = None) -> ProbeTarget:
        """Build a target, falling back to the WinRM default port for the scheme."""
        scheme = Scheme(scheme)
        return cls(host=host, port=port if port is not None else DEFAULT_PORTS[scheme], scheme=scheme)

    @property
    def endpoint(self) -> str:
        host = self.host
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{self.scheme.value}://{host}:{self.port}{WSMAN_PATH}"
