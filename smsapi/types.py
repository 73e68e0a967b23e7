"""Core types for the SMS gateway library."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

# Address-book entry: ``phone``, ``name`` and an optional ``groupId``.
Contact = Mapping[str, Any]


class ResultCode(IntEnum):
    """Codes reserved for failures produced by the library itself.

    Provider codes are never negative, so anything below zero originated
    locally. HTTP status errors are reported with the status code itself.
    """

    UNSUPPORTED = -1
    TRANSPORT_FAILURE = -2
    INVALID_JSON = -3
    INVALID_FORMAT = -4
    EMPTY_BODY = -5


@dataclass(frozen=True, slots=True)
class SMSResult:
    """Normalized result of a single provider operation."""

    succeeded: bool
    code: int
    data: Any = None

    @classmethod
    def ok(cls, data: Any = None, *, code: int = 0) -> SMSResult:
        return cls(succeeded=True, code=code, data=data)

    @classmethod
    def fail(cls, description: str, *, code: int = ResultCode.UNSUPPORTED) -> SMSResult:
        return cls(succeeded=False, code=int(code), data=description or f"Error (code {int(code)})")

    @classmethod
    def aggregate(cls, results: Sequence[SMSResult]) -> SMSResult:
        """Combine per-request results of a bulk operation.

        ``succeeded`` is true only when every sub-result succeeded. ``data``
        holds the sub-results in request order. ``code`` is taken from the
        first failed sub-result, or from the first sub-result when all passed.
        """
        if not results:
            raise ValueError("Cannot aggregate an empty list of results")
        results = list(results)
        failed = next((r for r in results if not r.succeeded), None)
        code = failed.code if failed is not None else results[0].code
        return cls(succeeded=failed is None, code=code, data=results)


# ── Provider configuration ────────────────────────────────────────────

MELIPAYAMAK_API_URL = "https://rest.payamak-panel.com/api/SendSMS/"
IPPANEL_API_URL = "https://ippanel.com/services.jspd"
IPPANEL_PATTERN_URL = "https://ippanel.com/patterns/pattern"
SMSIR_API_URL = "https://api.sms.ir/v1/"
ELANAK_WSDL_BASE_URL = "http://158.58.186.243/webservice/"


@dataclass(frozen=True, slots=True)
class MelipayamakConfig:
    """Configuration for the Melipayamak REST API.

    ``api_key`` is the key from the panel's developer settings, not the
    account password. It is sent in the ``password`` field.
    """

    username: str
    api_key: str
    from_number: str
    base_url: str = MELIPAYAMAK_API_URL


@dataclass(frozen=True, slots=True)
class FaraPayamakConfig:
    """Configuration for the FaraPayamak REST API (payamak-panel)."""

    username: str
    password: str
    from_number: str
    base_url: str = MELIPAYAMAK_API_URL


@dataclass(frozen=True, slots=True)
class IPPanelConfig:
    """Configuration for ippanel-based providers (FarazSMS, MedianaSMS)."""

    username: str
    password: str
    from_number: str
    base_url: str = IPPANEL_API_URL
    pattern_url: str = IPPANEL_PATTERN_URL


@dataclass(frozen=True, slots=True)
class SMSirConfig:
    """Configuration for the sms.ir v1 REST API."""

    api_key: str
    line_number: str
    base_url: str = SMSIR_API_URL


@dataclass(frozen=True, slots=True)
class ElanakConfig:
    """Configuration for the Elanak SOAP web service."""

    username: str
    password: str
    from_number: str
    wsdl_base_url: str = ELANAK_WSDL_BASE_URL
    message_type: str = "0"
