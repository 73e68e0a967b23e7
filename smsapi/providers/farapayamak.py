"""FaraPayamak REST provider (payamak-panel, password authentication)."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from smsapi.phone import recipients_list
from smsapi.translators import payamak
from smsapi.transport import HttpTransport
from smsapi.types import Contact, FaraPayamakConfig, SMSResult

from .base import UNKNOWN_STATUS, HttpProviderBase, credit_from, send_each, send_in_chunks, unsupported

logger = logging.getLogger(__name__)

MAX_RECIPIENTS = 100


class FaraPayamakProvider(HttpProviderBase):
    """Sends SMS through FaraPayamak's payamak-panel REST endpoints.

    Only ``SendSMS`` and ``GetCredit`` are available to FaraPayamak accounts.
    Distinct messages are sent one request per recipient.
    """

    name = "FaraPayamak"

    def __init__(self, config: FaraPayamakConfig, transport: HttpTransport | None = None) -> None:
        if not config.username:
            raise ValueError("username is required")
        if not config.password:
            raise ValueError("password is required")
        if not config.from_number:
            raise ValueError("from_number is required")
        super().__init__(transport)
        self._config = config
        self._base_url = config.base_url if config.base_url.endswith("/") else f"{config.base_url}/"

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        if not message:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.EMPTY_MESSAGE], code=payamak.EMPTY_MESSAGE)
        recipients = recipients_list(to)
        if not recipients:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.NO_RECIPIENTS], code=payamak.NO_RECIPIENTS)

        result = self._post(
            "SendSMS",
            {"to": ",".join(recipients), "from": self._config.from_number, "text": message},
        )
        if result.succeeded:
            logger.info("SMS sent via FaraPayamak to %d recipient(s), recId=%s", len(recipients), result.data)
        return result

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        return unsupported(self.name, "send_sms_by_pattern")

    def send_one_sms_to_multi_number(self, to: Sequence[str], message: str) -> SMSResult:
        if not message:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.EMPTY_MESSAGE], code=payamak.EMPTY_MESSAGE)
        if not to:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.NO_RECIPIENTS], code=payamak.NO_RECIPIENTS)
        return send_in_chunks(list(to), MAX_RECIPIENTS, lambda chunk: self.send_sms(chunk, message))

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        if not messages:
            return SMSResult.fail(payamak.SEND_ERRORS[payamak.NO_RECIPIENTS], code=payamak.NO_RECIPIENTS)
        return send_each(messages, self.send_sms)

    def receive_sms(self) -> SMSResult:
        return unsupported(self.name, "receive_sms")

    def get_sms_status(self, message_id: Any) -> str:
        return UNKNOWN_STATUS

    def get_credit(self) -> int:
        return credit_from(self._post("GetCredit", {}), self.name)

    def add_contact(self, contact_info: Contact) -> SMSResult:
        return unsupported(self.name, "add_contact")

    def _post(self, endpoint: str, params: dict[str, Any]) -> SMSResult:
        outcome = self._transport.execute(
            f"{self._base_url}{endpoint}",
            data={"username": self._config.username, "password": self._config.password, **params},
        )
        return payamak.translate(outcome)
