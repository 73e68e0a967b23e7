"""Base protocol and shared helpers for SMS providers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, TypeVar

from smsapi.translators.base import as_int
from smsapi.transport import HttpTransport
from smsapi.types import Contact, ResultCode, SMSResult

logger = logging.getLogger(__name__)

UNKNOWN_STATUS = "unknown"

T = TypeVar("T")


class SMSProvider(Protocol):
    """Interface that all SMS providers must implement.

    The interface is total: a provider that lacks a capability still
    implements the method and returns a failure result without touching
    the network.
    """

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        """Send one message to one or more recipients."""
        ...

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        """Send a message through a provider-side template."""
        ...

    def send_one_sms_to_multi_number(self, to: Sequence[str], message: str) -> SMSResult:
        """Send the same message to many recipients."""
        ...

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        """Send a distinct message to each recipient (``{number: text}``)."""
        ...

    def receive_sms(self) -> SMSResult:
        """Fetch inbound messages."""
        ...

    def get_sms_status(self, message_id: Any) -> str:
        """Return the delivery status text, or ``"unknown"``. Never raises."""
        ...

    def get_credit(self) -> int:
        """Return the account balance, or 0 on any failure."""
        ...

    def add_contact(self, contact_info: Contact) -> SMSResult:
        """Add an entry to the provider's address book."""
        ...


class HttpProviderBase:
    """Owns the ``HttpTransport`` of a REST provider."""

    name = "provider"

    def __init__(self, transport: HttpTransport | None = None) -> None:
        self._transport = transport or HttpTransport()

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self._transport.close()

    def __enter__(self) -> HttpProviderBase:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def unsupported(provider_name: str, operation: str) -> SMSResult:
    """Static failure for an operation the provider cannot perform."""
    return SMSResult.fail(
        f"{operation} is not supported by the {provider_name} gateway",
        code=ResultCode.UNSUPPORTED,
    )


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def send_in_chunks(items: Sequence[T], size: int | None, send_chunk: Callable[[list[T]], SMSResult]) -> SMSResult:
    """Split ``items`` into groups of ``size`` and send each group in order.

    A single group returns that call's result unchanged, several groups are
    combined with ``SMSResult.aggregate``.
    """
    chunks = [list(items)] if size is None else chunked(items, size)
    results = [send_chunk(chunk) for chunk in chunks]
    if len(results) == 1:
        return results[0]
    logger.info("Sent %d items in %d chunks", len(items), len(results))
    return SMSResult.aggregate(results)


def send_each(messages: Mapping[str, str], send: Callable[[str, str], SMSResult]) -> SMSResult:
    """Send every ``{number: text}`` pair on its own and aggregate."""
    return SMSResult.aggregate([send(number, text) for number, text in messages.items()])


def credit_from(result: SMSResult, provider_name: str) -> int:
    """Extract an integer balance, falling back to 0 on any failure."""
    if result.succeeded:
        balance = as_int(result.data)
        if balance is not None:
            return balance
        logger.warning("%s returned a non-numeric credit value: %r", provider_name, result.data)
        return 0
    logger.warning("%s credit lookup failed (code %s): %s", provider_name, result.code, result.data)
    return 0

