"""SMS gateway, the main entry point for calling code.

The gateway wraps one provider and exposes the same operations whatever the
provider's wire format is. It adds no behavior of its own.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .providers.base import SMSProvider
    from .types import Contact, SMSResult


class SMSGateway:
    """Forwards every operation to the provider it was built with.

    Usage::

        from smsapi import MelipayamakConfig, MelipayamakProvider, SMSGateway

        provider = MelipayamakProvider(MelipayamakConfig(username="...", api_key="...", from_number="5000..."))
        gateway = SMSGateway(provider)
        result = gateway.send_sms("09124118355", "Hello")
        if result.succeeded:
            print(f"Sent: {result.data}")
    """

    def __init__(self, provider: SMSProvider) -> None:
        self.provider = provider

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        return self.provider.send_sms(to, message)

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        return self.provider.send_sms_by_pattern(to, message, template_id, parameters)

    def send_one_sms_to_multi_number(self, to: Sequence[str], message: str) -> SMSResult:
        return self.provider.send_one_sms_to_multi_number(to, message)

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        return self.provider.send_multi_sms_to_multi_number(messages)

    def receive_sms(self) -> SMSResult:
        return self.provider.receive_sms()

    def get_sms_status(self, message_id: Any) -> str:
        return self.provider.get_sms_status(message_id)

    def get_credit(self) -> int:
        """Return the balance. 0 also means the lookup failed, see the logs."""
        return self.provider.get_credit()

    def add_contact(self, contact_info: Contact) -> SMSResult:
        return self.provider.add_contact(contact_info)

    async def send_sms_async(self, to: str | Sequence[str], message: str) -> SMSResult:
        """Send an SMS asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send_sms, to, message)

    async def send_one_sms_to_multi_number_async(self, to: Sequence[str], message: str) -> SMSResult:
        """Bulk-send asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send_one_sms_to_multi_number, to, message)
