"""Mock SMS provider for testing.

Records every call and returns configurable results. Useful for unit
testing code that depends on the gateway without hitting real providers.
"""

from __future__ import annotations

import random
import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .phone import normalize_phone_numbers
from .types import Contact, ResultCode, SMSResult


@dataclass
class RecordedCall:
    """Record of an operation invoked on the MockProvider."""

    operation: str
    args: tuple[Any, ...] = ()
    result: Any = None


class MockProvider:
    """Test provider that records calls and returns configurable results.

    Usage::

        provider = MockProvider()
        result = provider.send_sms("09124118355", "hi")
        assert result.succeeded
        assert provider.sent[0].args == ("09124118355", "hi")

    Configure failures::

        provider = MockProvider(failure_rate=0.5)
        # ~50% of sends will fail

    Or provide a fixed result::

        provider = MockProvider(fixed_result=SMSResult.fail("insufficient credit", code=2))
    """

    def __init__(
        self,
        *,
        failure_rate: float = 0.0,
        fixed_result: SMSResult | None = None,
        credit: int = 0,
        statuses: Mapping[str, str] | None = None,
    ) -> None:
        self.failure_rate = failure_rate
        self.fixed_result = fixed_result
        self.credit = credit
        self.statuses: dict[str, str] = dict(statuses or {})
        self.calls: list[RecordedCall] = []

    @property
    def sent(self) -> list[RecordedCall]:
        """Calls of the send operations only."""
        return [call for call in self.calls if call.operation.startswith("send_")]

    def send_sms(self, to: str | Sequence[str], message: str) -> SMSResult:
        to = normalize_phone_numbers(to)
        if not message:
            return self._record("send_sms", (to, message), SMSResult.fail("Empty message", code=ResultCode.UNSUPPORTED))
        return self._record("send_sms", (to, message), self._next_result())

    def send_sms_by_pattern(
        self,
        to: str,
        message: str,
        template_id: int | str,
        parameters: Mapping[str, Any],
    ) -> SMSResult:
        args = (normalize_phone_numbers(to), message, template_id, dict(parameters))
        return self._record("send_sms_by_pattern", args, self._next_result())

    def send_one_sms_to_multi_number(self, to: Sequence[str], message: str) -> SMSResult:
        return self._record("send_one_sms_to_multi_number", (list(to), message), self._next_result())

    def send_multi_sms_to_multi_number(self, messages: Mapping[str, str]) -> SMSResult:
        if not messages:
            result = SMSResult.fail("No recipients provided", code=ResultCode.UNSUPPORTED)
            return self._record("send_multi_sms_to_multi_number", (dict(messages),), result)
        result = SMSResult.aggregate([self._next_result() for _ in messages])
        return self._record("send_multi_sms_to_multi_number", (dict(messages),), result)

    def receive_sms(self) -> SMSResult:
        return self._record("receive_sms", (), SMSResult.ok([]))

    def get_sms_status(self, message_id: Any) -> str:
        return self._record("get_sms_status", (message_id,), self.statuses.get(str(message_id), "unknown"))

    def get_credit(self) -> int:
        return self._record("get_credit", (), self.credit)

    def add_contact(self, contact_info: Contact) -> SMSResult:
        return self._record("add_contact", (dict(contact_info),), SMSResult.ok(dict(contact_info)))

    def reset(self) -> None:
        """Clear all recorded calls."""
        self.calls.clear()

    def _next_result(self) -> SMSResult:
        if self.fixed_result is not None:
            return self.fixed_result
        if self.failure_rate > 0 and random.random() < self.failure_rate:  # noqa: S311
            return SMSResult.fail("Simulated failure")
        return SMSResult.ok(f"mock_{uuid.uuid4().hex[:12]}")

    def _record(self, operation: str, args: tuple[Any, ...], result: Any) -> Any:
        self.calls.append(RecordedCall(operation=operation, args=args, result=result))
        return result
