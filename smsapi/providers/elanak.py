"""Elanak SOAP provider."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import requests
import zeep
from zeep.transports import Transport

from smsapi.phone import recipients_list
from smsapi.translators.soap import call_soap
from smsapi.transport import DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS
from smsapi.types import Contact, ElanakConfig, ResultCode, SMSResult

from .base import UNKNOWN_STATUS, send_each, unsupported

logger = logging.getLogger(__name__)

SEND_WSDL = "send.php?wsdl"

_TIMEOUT = (DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS)


class ElanakProvider:
    """Sends SMS via the Elanak SOAP web service.

    The WSDL is fetched on first use, so constructing the provider never
    touches the network. Credentials can be rotated with the ``set_*``
    methods; each one swaps in a new immutable config.
    """

    name = "Elanak"

    def __init__(self, config: ElanakConfig, session: requests.Session | None = None) -> None:
        _validate(config)
        self._config = config
        self._session = session or requests.Session()
        self._send_client: zeep.Client | None = None

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> ElanakProvider:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ── Credential rotation ───────────────────────────────────────

    def set_message_type(self, message_type: str) -> None:
        self._replace_config(message_type=message_type)

    def set_username(self, username: str) -> None:
        self._replace_config(username=username)

    def set_password(self, password: str) -> None:
        self._replace_config(password=password)

    def set_from_number(self, from_number: str) -> None:
        self._replace_config(from_number=from_number)

    # ── Public API ────────────────────────────────────────────────

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        if not message:
            return SMSResult.fail("Message text is empty", code=ResultCode.UNSUPPORTED)
        recipients = recipients_list(to)
        if not recipients:
            return SMSResult.fail("No recipients provided", code=ResultCode.UNSUPPORTED)

        result = call_soap(self._call_send, recipients, message)
        if result.succeeded:
            logger.info("SMS sent via Elanak to %d recipient(s): %s", len(recipients), result.data)
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
        # SendSMS takes an array of recipients.
        return self.send_sms(list(to), message)

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        if not messages:
            return SMSResult.fail("No recipients provided", code=ResultCode.UNSUPPORTED)
        return send_each(messages, self.send_sms)

    def receive_sms(self) -> SMSResult:
        return unsupported(self.name, "receive_sms")

    def get_sms_status(self, message_id: Any) -> str:
        return UNKNOWN_STATUS

    def get_credit(self) -> int:
        logger.warning("Elanak does not report account credit, returning 0")
        return 0

    def add_contact(self, contact_info: Contact) -> SMSResult:
        return unsupported(self.name, "add_contact")

    # ── SOAP helpers ──────────────────────────────────────────────

    def _send_service(self) -> Any:
        if self._send_client is None:
            transport = Transport(session=self._session, timeout=_TIMEOUT, operation_timeout=_TIMEOUT)
            self._send_client = zeep.Client(f"{self._config.wsdl_base_url}{SEND_WSDL}", transport=transport)
        return self._send_client.service

    def _call_send(self, recipients: list[str], message: str) -> Any:
        config = self._config
        return self._send_service().SendSMS(
            config.from_number,
            recipients,
            message,
            config.message_type,
            config.username,
            config.password,
        )

    def _replace_config(self, **changes: str) -> None:
        config = dataclasses.replace(self._config, **changes)
        _validate(config)
        self._config = config


def _validate(config: ElanakConfig) -> None:
    if not config.username:
        raise ValueError("username is required")
    if not config.password:
        raise ValueError("password is required")
    if not config.from_number:
        raise ValueError("from_number is required")
