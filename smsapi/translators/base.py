"""First translation stage shared by the JSON providers."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from smsapi.transport import HttpError, RawBody, TransportFailure, TransportOutcome
from smsapi.types import ResultCode, SMSResult

logger = logging.getLogger(__name__)

PayloadParser = Callable[[Any], SMSResult]


def translate_outcome(outcome: TransportOutcome, parse: PayloadParser) -> SMSResult:
    """Turn a transport outcome into an ``SMSResult``.

    Transport failures and HTTP errors are mapped directly. An empty body and
    a body that is not JSON get distinct codes, everything else is passed to
    the provider-specific ``parse``.
    """
    if isinstance(outcome, TransportFailure):
        return SMSResult.fail(outcome.reason, code=ResultCode.TRANSPORT_FAILURE)
    if isinstance(outcome, HttpError):
        return SMSResult.fail(f"HTTP Error: {outcome.status_code}", code=outcome.status_code)

    assert isinstance(outcome, RawBody)
    body = outcome.text
    if not body or not body.strip():
        return SMSResult.fail("Empty response from API", code=ResultCode.EMPTY_BODY)

    try:
        payload = json.loads(body)
    except ValueError as exc:
        logger.error("Provider returned invalid JSON: %.200s", body)
        return SMSResult.fail(f"Invalid JSON response: {exc}", code=ResultCode.INVALID_JSON)

    return parse(payload)


def invalid_format(payload: Any) -> SMSResult:
    logger.error("Provider returned an unexpected payload: %.200r", payload)
    return SMSResult.fail("Invalid response format from API", code=ResultCode.INVALID_FORMAT)


def unknown_error_message(code: int) -> str:
    return f"خطای ناشناخته (کد: {code})"


def lookup_message(code: int, *tables: Mapping[int, str]) -> str | None:
    """Return the first message found for ``code`` in ``tables``."""
    for table in tables:
        message = table.get(code)
        if message:
            return message
    return None


def as_int(value: Any) -> int | None:
    """Coerce numeric payload values (``3``, ``"3"``, ``"3.0"``) to int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return None
    return None
