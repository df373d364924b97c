# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Send the Identify request and reduce the result to a TransportOutcome."""

from __future__ import annotations

import logging

from ..errors import ErrorCategory, categorize_exception, error_category_to_reason
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models.outcome import HttpStatus, TransportFailure, TransportOutcome

logger = logging.getLogger(__name__)


def _failure_from_response(response: HttpResponse) -> TransportFailure:
    category = categorize_exception(response.exception) if response.exception is not None else ErrorCategory.UNKNOWN_ERROR
    return TransportFailure(message=response.error_message or "", category=category)


def send_identify(client: HttpClient, request: HttpRequest) -> TransportOutcome:
    """
    Issue exactly one request and classify it.

    Any received response becomes ``HttpStatus`` whatever its code; everything else,
    including exceptions raised by the client itself, becomes ``TransportFailure``.
    """
    try:
        response = client.request(request)
    except Exception as exc:  # noqa: BLE001
        response = HttpResponse(
            ok=False,
            error_message=str(exc),
            error_type=exc.__class__.__name__,
            exception=exc,
        )

    if response.ok and response.status_code is not None:
        return HttpStatus(
            code=response.status_code,
            body=response.text,
            content=response.content,
            truncated=bool(response.meta.get("body_truncated")),
        )

    failure = _failure_from_response(response)
    logger.debug(
        "Transport failure for %s: %s [%s] %s",
        request.url,
        error_category_to_reason(failure.category),
        response.error_type or "-",
        failure.message,
    )
    return failure
