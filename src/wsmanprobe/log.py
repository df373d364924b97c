# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for wsmanprobe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("WSMANPROBE_LOG_LEVEL", "WARNING").upper()

# -V selects structured output; -VV and up also turn on probe debug logging.
DEBUG_VERBOSITY = 2


def level_for_verbosity(verbosity: int) -> str | None:
    """Log level implied by the CLI verbosity count, or None to keep the default."""
    return "DEBUG" if verbosity >= DEBUG_VERBOSITY else None


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    # httpx/httpcore chatter is not useful next to the probe's own debug lines.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(max(logging.getLogger().level, logging.INFO))


__all__ = ["level_for_verbosity", "setup_logging"]
