"""ippanel providers: FarazSMS and MedianaSMS.

Both panels are white labels of the same ``services.jspd`` endpoint. Every
operation is a form POST selecting the action with ``op``, and every answer
is a ``[code, payload]`` JSON array.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from smsapi.phone import normalize_phone_numbers, recipients_list
from smsapi.translators import ippanel
from smsapi.transport import HttpTransport
from smsapi.types import Contact, IPPanelConfig, SMSResult

from .base import UNKNOWN_STATUS, HttpProviderBase, credit_from, send_each, unsupported

logger = logging.getLogger(__name__)

# ``phoneBookAdd`` answers 102 ("saved") on success.
CONTACT_SUCCESS_CODES = (ippanel.SUCCESS_CODE, ippanel.CONTACT_SAVED)
INVALID_CONTACT_NUMBER = 100


class IPPanelProvider(HttpProviderBase):
    """Sends SMS through an ippanel ``services.jspd`` endpoint."""

    name = "ippanel"

    def __init__(self, config: IPPanelConfig, transport: HttpTransport | None = None) -> None:
        if not config.username:
            raise ValueError("username is required")
        if not config.password:
            raise ValueError("password is required")
        if not config.from_number:
            raise ValueError("from_number is required")
        super().__init__(transport)
        self._config = config

    # ── Public API ────────────────────────────────────────────────

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        if not message:
            return SMSResult.fail(ippanel.ERRORS[ippanel.EMPTY_MESSAGE], code=ippanel.EMPTY_MESSAGE)
        recipients = recipients_list(to)
        if not recipients:
            return SMSResult.fail(ippanel.ERRORS[ippanel.NO_RECIPIENTS], code=ippanel.NO_RECIPIENTS)

        result = self._op(
            "send",
            {
                "from": self._config.from_number,
                "message": message,
                "to": json.dumps(recipients),
            },
        )
        if result.succeeded:
            logger.info("SMS sent via %s to %d recipient(s), bulk_id=%s", self.name, len(recipients), result.data)
        return result

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        params = {
            "username": self._config.username,
            "password": self._config.password,
            "from": self._config.from_number,
            "to": json.dumps([normalize_phone_numbers(to)]),
            "input_data": json.dumps(dict(parameters), ensure_ascii=False),
            "pattern_code": template_id,
        }
        outcome = self._transport.execute(self._config.pattern_url, params=params)
        return ippanel.translate(outcome)

    def send_one_sms_to_multi_number(self, to: Sequence[str], message: str) -> SMSResult:
        # services.jspd takes the whole recipient list in a single call.
        return self.send_sms(list(to), message)

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        if not messages:
            return SMSResult.fail(ippanel.ERRORS[ippanel.NO_RECIPIENTS], code=ippanel.NO_RECIPIENTS)
        return send_each(messages, self.send_sms)

    def receive_sms(self) -> SMSResult:
        return unsupported(self.name, "receive_sms")

    def get_sms_status(self, message_id: Any) -> str:
        return UNKNOWN_STATUS

    def get_credit(self) -> int:
        return credit_from(self._op("credit", {}), self.name)

    def add_contact(self, contact_info: Contact) -> SMSResult:
        phone = contact_info.get("phone")
        if not phone:
            return SMSResult.fail(ippanel.ERRORS[INVALID_CONTACT_NUMBER], code=INVALID_CONTACT_NUMBER)

        params = {
            "mobileNumber": normalize_phone_numbers(str(phone)),
            "firstName": contact_info.get("name", ""),
        }
        if contact_info.get("groupId") is not None:
            params["phoneBookId"] = contact_info["groupId"]
        return self._op("phoneBookAdd", params, success_codes=CONTACT_SUCCESS_CODES)

    # ── HTTP helpers ──────────────────────────────────────────────

    def _op(
        self,
        op: str,
        params: dict[str, Any],
        *,
        success_codes: Sequence[int] = (ippanel.SUCCESS_CODE,),
    ) -> SMSResult:
        outcome = self._transport.execute(
            self._config.base_url,
            data={"uname": self._config.username, "pass": self._config.password, "op": op, **params},
        )
        return ippanel.translate(outcome, success_codes)


class FarazSMSProvider(IPPanelProvider):
    """FarazSMS (farazsms.com) on ippanel."""

    name = "FarazSMS"


class MedianaSMSProvider(IPPanelProvider):
    """MedianaSMS (mediana.ir) on ippanel."""

    name = "MedianaSMS"
