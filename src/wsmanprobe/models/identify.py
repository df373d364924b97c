# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Identify response model."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class IdentifyResult:
    """Fields read from a WS-Management IdentifyResponse."""

    protocol_version: str
    product_vendor: str
    product_version: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
