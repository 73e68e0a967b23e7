"""sms.ir v1 REST provider."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from smsapi.phone import normalize_phone_numbers, recipients_list
from smsapi.translators import smsir
from smsapi.translators.base import as_int
from smsapi.transport import HttpTransport
from smsapi.types import Contact, SMSirConfig, SMSResult

from .base import UNKNOWN_STATUS, HttpProviderBase, credit_from, send_in_chunks, unsupported

logger = logging.getLogger(__name__)

MAX_RECIPIENTS = 100
RECEIVE_COUNT = 100


class SMSirProvider(HttpProviderBase):
    """Sends SMS via the sms.ir v1 REST API.

    Requests carry JSON bodies and authenticate with the ``X-API-KEY``
    header. Bulk and like-to-like sends accept at most 100 mobiles per call,
    larger inputs are split into batches of 100.
    """

    name = "SMS.ir"

    def __init__(self, config: SMSirConfig, transport: HttpTransport | None = None) -> None:
        if not config.api_key:
            raise ValueError("api_key is required")
        if not config.api_key.isascii():
            raise ValueError("api_key must contain only ASCII characters")
        if not config.line_number:
            raise ValueError("line_number is required")
        super().__init__(transport)
        self._config = config
        self._base_url = config.base_url if config.base_url.endswith("/") else f"{config.base_url}/"

    # ── Public API ────────────────────────────────────────────────

    def send_sms(
        self,
        to: str | Sequence[str],
        message: str,
        send_date_time: int | None = None,
    ) -> SMSResult:
        """Send a message, optionally scheduled at ``send_date_time`` (Unix time)."""
        if not message:
            return SMSResult.fail(smsir.ERRORS[smsir.EMPTY_MESSAGE], code=smsir.EMPTY_MESSAGE)
        recipients = recipients_list(to)
        if not recipients:
            return SMSResult.fail(smsir.ERRORS[smsir.NO_RECIPIENTS], code=smsir.NO_RECIPIENTS)

        payload: dict[str, Any] = {
            "lineNumber": self._config.line_number,
            "messageText": message,
            "mobiles": recipients,
        }
        if send_date_time is not None:
            payload["sendDateTime"] = send_date_time

        result = self._request("POST", "send/bulk", json=payload)
        if result.succeeded:
            pack_id = result.data.get("packId") if isinstance(result.data, dict) else None
            logger.info("SMS sent via sms.ir to %d recipient(s), packId=%s", len(recipients), pack_id)
        return result

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        payload = {
            "mobile": normalize_phone_numbers(to),
            "templateId": template_id,
            "parameters": [{"name": name, "value": str(value)} for name, value in parameters.items()],
        }
        return self._request("POST", "send/verify", json=payload)

    def send_one_sms_to_multi_number(
        self,
        to: Sequence[str],
        message: str,
        send_date_time: int | None = None,
    ) -> SMSResult:
        if not message:
            return SMSResult.fail(smsir.ERRORS[smsir.EMPTY_MESSAGE], code=smsir.EMPTY_MESSAGE)
        if not to:
            return SMSResult.fail(smsir.ERRORS[smsir.NO_RECIPIENTS], code=smsir.NO_RECIPIENTS)
        return send_in_chunks(
            list(to),
            MAX_RECIPIENTS,
            lambda chunk: self.send_sms(chunk, message, send_date_time),
        )

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        if not messages:
            return SMSResult.fail(smsir.ERRORS[smsir.NO_RECIPIENTS], code=smsir.NO_RECIPIENTS)
        return send_in_chunks(list(messages.items()), MAX_RECIPIENTS, self._send_like_to_like)

    def receive_sms(self) -> SMSResult:
        return self._request("GET", "receive/latest", params={"count": RECEIVE_COUNT})

    def get_sms_status(self, message_id: Any) -> str:
        result = self._request("GET", f"send/{quote(str(message_id), safe='')}")
        if not result.succeeded:
            logger.warning("sms.ir status lookup failed for %s: %s", message_id, result.data)
            return UNKNOWN_STATUS

        report = result.data if isinstance(result.data, dict) else {}
        state = as_int(report.get("deliveryState"))
        status = smsir.delivery_state(state) if state is not None else None
        if status is None:
            logger.warning("sms.ir returned unrecognized delivery state %r for %s", report.get("deliveryState"), message_id)
            return UNKNOWN_STATUS
        return status

    def get_credit(self) -> int:
        return credit_from(self._request("GET", "credit"), self.name)

    def add_contact(self, contact_info: Contact) -> SMSResult:
        return unsupported(self.name, "add_contact")

    # ── HTTP helpers ──────────────────────────────────────────────

    def _headers(self) -> dict[str, str]:
        return {"X-API-KEY": self._config.api_key, "Accept": "application/json"}

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> SMSResult:
        outcome = self._transport.execute(
            f"{self._base_url}{path}",
            method=method,
            headers=self._headers(),
            json=json,
            params=params,
        )
        return smsir.translate(outcome)

    def _send_like_to_like(self, pairs: list[tuple[str, str]]) -> SMSResult:
        """Send one ``likeToLike`` batch: parallel lists of mobiles and texts."""
        for _, text in pairs:
            if not text:
                return SMSResult.fail(smsir.ERRORS[smsir.EMPTY_MESSAGE], code=smsir.EMPTY_MESSAGE)
        payload = {
            "lineNumber": self._config.line_number,
            "messageTexts": [text for _, text in pairs],
            "mobiles": [normalize_phone_numbers(number) for number, _ in pairs],
        }
        return self._request("POST", "send/likeToLike", json=payload)
