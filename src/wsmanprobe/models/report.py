# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal result of probing one target."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .identify import IdentifyResult
from .target import ProbeTarget


@dataclass(frozen=True)
class ProbeReport:
    """
    Either a success carrying an IdentifyResult or a failure carrying an error message.

    Use ``ProbeReport.success`` / ``ProbeReport.failure`` rather than the constructor;
    a report holding both (or neither) is rejected.
    """

    target: ProbeTarget
    result: IdentifyResult | None = None
    error_message: str | None = None
    response_status_code: int | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error_message is None):
            raise ValueError("ProbeReport must carry exactly one of result or error_message")

    @classmethod
    def success(cls, target: ProbeTarget, result: IdentifyResult, *, status_code: int = 200) -> ProbeReport:
        return cls(target=target, result=result, response_status_code=status_code)

    @classmethod
    def failure(cls, target: ProbeTarget, error_message: str, *, status_code: int | None = None) -> ProbeReport:
        return cls(target=target, error_message=error_message, response_status_code=status_code)

    @property
    def ok(self) -> bool:
        return self.result is not None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    @property
    def protocol_version(self) -> str | None:
        return self.result.protocol_version if self.result else None

    @property
    def product_vendor(self) -> str | None:
        return self.result.product_vendor if self.result else None

    @property
    def product_version(self) -> str | None:
        return self.result.product_version if self.result else None

    def to_dict(self) -> dict[str, Any]:
        """Structured object printed in verbose mode."""
        payload: dict[str, Any] = {
            "host": self.target.host,
            "port": self.target.port,
            "endpoint": self.target.endpoint,
            "response_status_code": self.response_status_code,
        }
        if self.result is not None:
            payload.update(self.result.to_dict())
        else:
            payload["error_message"] = self.error_message
        return payload
