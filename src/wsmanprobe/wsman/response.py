# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Interpret Identify transport outcomes into probe reports."""

from __future__ import annotations

import logging
from xml.etree import ElementTree

from ..errors import IdentifyParseError
from ..models.identify import IdentifyResult
from ..models.outcome import HttpStatus, TransportFailure, TransportOutcome
from ..models.report import ProbeReport
from ..models.target import ProbeTarget
from .constants import IDENTIFY_FIELDS, NAMESPACES

logger = logging.getLogger(__name__)


def parse_identify_response(body: str | bytes) -> IdentifyResult:
    """
    Read ProtocolVersion, ProductVendor and ProductVersion from an Identify response.

    Element text is returned exactly as sent. Raises IdentifyParseError when the body
    is not well-formed XML, any of the three elements is missing, or ProtocolVersion is blank.
    """
    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise IdentifyParseError(f"not well-formed XML ({exc})") from exc

    values: dict[str, str] = {}
    missing: list[str] = []
    for element_name, field_name in IDENTIFY_FIELDS.items():
        element = root.find(f".//wsmid:{element_name}", namespaces=NAMESPACES)
        if element is None:
            missing.append(element_name)
            continue
        text = element.text or ""
        # A blank ProtocolVersion means the endpoint is not speaking WSMAN.
        if field_name == "protocol_version" and not text.strip():
            missing.append(element_name)
            continue
        values[field_name] = text

    if missing:
        raise IdentifyParseError(f"missing Identify field(s): {', '.join(missing)}")

    return IdentifyResult(**values)


def interpret(target: ProbeTarget, outcome: TransportOutcome) -> ProbeReport:
    """Map a TransportOutcome onto a success or failure ProbeReport."""
    if isinstance(outcome, TransportFailure):
        return ProbeReport.failure(target, f"connection error: {outcome.message}")

    if not isinstance(outcome, HttpStatus):
        raise TypeError(f"unsupported transport outcome: {outcome!r}")

    if outcome.code != 200:
        return ProbeReport.failure(target, f"unexpected status {outcome.code}", status_code=outcome.code)

    try:
        result = parse_identify_response(outcome.content or outcome.body)
    except IdentifyParseError as exc:
        logger.debug("Endpoint %s returned an unusable body: %r", target.endpoint, outcome.content or outcome.body)
        detail = f"{exc} (response body truncated at the size limit)" if outcome.truncated else str(exc)
        return ProbeReport.failure(target, f"invalid response body: {detail}", status_code=outcome.code)

    return ProbeReport.success(target, result, status_code=outcome.code)
