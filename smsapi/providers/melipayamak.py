"""Melipayamak REST provider (rest.payamak-panel.com)."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from smsapi.phone import normalize_phone_numbers, recipients_list
from smsapi.translators import payamak
from smsapi.translators.base import as_int
from smsapi.transport import HttpTransport
from smsapi.types import Contact, MelipayamakConfig, ResultCode, SMSResult

from .base import (
    UNKNOWN_STATUS,
    HttpProviderBase,
    credit_from,
    send_in_chunks,
    unsupported,
)

logger = logging.getLogger(__name__)

MAX_RECIPIENTS = 100

ENDPOINT_SEND_SMS = "SendSMS"
ENDPOINT_SEND_MULTIPLE_SMS = "SendMultipleSMS"
ENDPOINT_BASE_SERVICE_NUMBER = "BaseServiceNumber"
ENDPOINT_GET_DELIVERIES_2 = "GetDeliveries2"
ENDPOINT_GET_MESSAGES = "GetMessages"
ENDPOINT_GET_CREDIT = "GetCredit"

INBOX_LOCATION = 1
RECEIVE_PAGE_SIZE = 100


class MelipayamakProvider(HttpProviderBase):
    """Sends SMS through the Melipayamak REST API.

    Authentication is the panel username plus the ApiKey from the panel's
    developer menu, sent as form fields on every request. ``SendSMS`` accepts
    at most 100 recipients; ``send_one_sms_to_multi_number`` splits larger
    lists into batches of 100.
    """

    name = "Melipayamak"

    def __init__(self, config: MelipayamakConfig, transport: HttpTransport | None = None) -> None:
        if not config.username:
            raise ValueError("username is required")
        if not config.api_key:
            raise ValueError("api_key is required")
        if not config.from_number:
            raise ValueError("from_number is required")
        super().__init__(transport)
        self._config = config
        self._base_url = config.base_url if config.base_url.endswith("/") else f"{config.base_url}/"

    # ── Public API ────────────────────────────────────────────────

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        if not message:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.EMPTY_MESSAGE], code=payamak.EMPTY_MESSAGE)

        recipients = recipients_list(to)
        if not recipients:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.NO_RECIPIENTS], code=payamak.NO_RECIPIENTS)
        if len(recipients) > MAX_RECIPIENTS:
            return SMSResult.fail(
                f"Maximum {MAX_RECIPIENTS} recipients allowed per request. "
                "Use send_one_sms_to_multi_number for larger batches.",
                code=ResultCode.UNSUPPORTED,
            )

        result = self._post(
            ENDPOINT_SEND_SMS,
            {
                "from": self._config.from_number,
                "to": ",".join(recipients),
                "text": message,
                "isFlash": "false",
            },
        )
        if result.succeeded:
            logger.info("SMS sent via Melipayamak to %d recipient(s), recId=%s", len(recipients), result.data)
        return result

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        # BaseServiceNumber takes the pattern variables in order, separated by ";".
        return self._post(
            ENDPOINT_BASE_SERVICE_NUMBER,
            {
                "to": normalize_phone_numbers(to),
                "bodyId": template_id,
                "text": ";".join(str(value) for value in parameters.values()),
            },
        )

    def send_one_sms_to_multi_number(self, to: Sequence[str], message: str) -> SMSResult:
        if not message:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.EMPTY_MESSAGE], code=payamak.EMPTY_MESSAGE)
        if not to:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.NO_RECIPIENTS], code=payamak.NO_RECIPIENTS)
        return send_in_chunks(list(to), MAX_RECIPIENTS, lambda chunk: self.send_sms(chunk, message))

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        if not messages:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.NO_RECIPIENTS], code=payamak.NO_RECIPIENTS)
        pairs = list(messages.items())
        return send_in_chunks(pairs, MAX_RECIPIENTS, self._send_multiple)

    def receive_sms(self) -> SMSResult:
        return self._post(
            ENDPOINT_GET_MESSAGES,
            {
                "location": INBOX_LOCATION,
                "from": "",
                "index": 0,
                "count": RECEIVE_PAGE_SIZE,
            },
        )

    def get_sms_status(self, message_id: Any) -> str:
        result = self._post(ENDPOINT_GET_DELIVERIES_2, {"recId": message_id})
        if not result.succeeded:
            logger.warning("Melipayamak status lookup failed for %s: %s", message_id, result.data)
            return UNKNOWN_STATUS

        status_code = as_int(result.data)
        status = payamak.delivery_status(status_code) if status_code is not None else None
        if status is None:
            logger.warning("Melipayamak returned unrecognized delivery status %r for %s", result.data, message_id)
            return UNKNOWN_STATUS
        return status

    def get_credit(self) -> int:
        return credit_from(self._post(ENDPOINT_GET_CREDIT, {}), self.name)

    def add_contact(self, contact_info: Contact) -> SMSResult:
        return unsupported(self.name, "add_contact")

    # ── HTTP helpers ──────────────────────────────────────────────

    def _auth(self) -> dict[str, str]:
        return {"username": self._config.username, "password": self._config.api_key}

    def _post(self, endpoint: str, params: dict[str, Any]) -> SMSResult:
        outcome = self._transport.execute(
            f"{self._base_url}{endpoint}",
            data={**self._auth(), **params},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        return payamak.translate(outcome)

    def _send_multiple(self, pairs: list[tuple[str, str]]) -> SMSResult:
        """Send one ``SendMultipleSMS`` batch as a JSON body of parallel lists."""
        payload = {
            **self._auth(),
            "from": self._config.from_number,
            "to": [normalize_phone_numbers(number) for number, _ in pairs],
            "text": [text for _, text in pairs],
            "isFlash": False,
        }
        outcome = self._transport.execute(
            f"{self._base_url}{ENDPOINT_SEND_MULTIPLE_SMS}",
            json=payload,
            headers={"Accept": "application/json"},
        )
        return payamak.translate(outcome)

