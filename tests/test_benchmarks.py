"""Benchmark tests for SMS providers.

Measures the overhead of the library's send path with the network mocked
out. Useful for catching regressions in hot paths (phone normalization,
payload construction, response translation and bulk splitting).

Run with:
    pytest tests/test_benchmarks.py --benchmark-only -v
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from smsapi import (
    IPPanelConfig,
    MelipayamakConfig,
    MockProvider,
    SMSGateway,
    SMSirConfig,
)
from smsapi.phone import normalize_phone_numbers
from smsapi.providers.ippanel import FarazSMSProvider
from smsapi.providers.melipayamak import MelipayamakProvider
from smsapi.providers.smsir import SMSirProvider
from smsapi.translators import payamak
from smsapi.transport import RawBody

NUMBERS = [f"+98912{i:07d}" for i in range(1000)]


# ── Helpers ────────────────────────────────────────────────────────────


def _transport(body: str) -> MagicMock:
    transport = MagicMock()
    transport.execute.return_value = RawBody(body)
    return transport


# ── Phone normalization ──────────────────────────────────────────────


class TestPhoneBenchmarks:
    def test_normalize_1000_numbers(self, benchmark):
        result = benchmark(normalize_phone_numbers, NUMBERS)
        assert len(result) == 1000


# ── Translators ──────────────────────────────────────────────────────


class TestTranslatorBenchmarks:
    def test_payamak_success(self, benchmark):
        body = RawBody('{"Value": "5012345", "RetStatus": 1, "StrRetStatus": "Ok"}')
        assert benchmark(payamak.translate, body).succeeded

    def test_payamak_error(self, benchmark):
        body = RawBody('{"Value": "2", "RetStatus": 0, "StrRetStatus": "Error"}')
        assert benchmark(payamak.translate, body).code == 2


# ── Providers ────────────────────────────────────────────────────────


class TestProviderBenchmarks:
    @pytest.fixture(autouse=True)
    def _setup(self):
        self.melipayamak = MelipayamakProvider(
            MelipayamakConfig(username="bench", api_key="bench", from_number="5000"),
            transport=_transport('{"Value": "1", "RetStatus": 1}'),
        )
        self.faraz = FarazSMSProvider(
            IPPanelConfig(username="bench", password="bench", from_number="3000"),
            transport=_transport('[0, "1"]'),
        )
        self.smsir = SMSirProvider(
            SMSirConfig(api_key="bench", line_number="3000"),
            transport=_transport('{"status": 1, "message": "", "data": {"packId": "p"}}'),
        )
        yield

    def test_melipayamak_send(self, benchmark):
        assert benchmark(self.melipayamak.send_sms, "09124118355", "Benchmark").succeeded

    def test_melipayamak_bulk_1000(self, benchmark):
        result = benchmark(self.melipayamak.send_one_sms_to_multi_number, NUMBERS, "Benchmark")
        assert result.succeeded
        assert len(result.data) == 10

    def test_faraz_send(self, benchmark):
        assert benchmark(self.faraz.send_sms, NUMBERS[:50], "Benchmark").succeeded

    def test_smsir_like_to_like_1000(self, benchmark):
        messages = {number: f"msg {i}" for i, number in enumerate(NUMBERS)}
        assert benchmark(self.smsir.send_multi_sms_to_multi_number, messages).succeeded


# ── Gateway ──────────────────────────────────────────────────────────


class TestGatewayBenchmarks:
    def test_gateway_send_mock(self, benchmark):
        gateway = SMSGateway(MockProvider())
        assert benchmark(gateway.send_sms, "09124118355", "Benchmark").succeeded
