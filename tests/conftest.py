"""Shared test fixtures for the smsapi library."""

import pytest

from smsapi import (
    ElanakConfig,
    FaraPayamakConfig,
    IPPanelConfig,
    MelipayamakConfig,
    MockProvider,
    SMSirConfig,
)


@pytest.fixture
def melipayamak_config() -> MelipayamakConfig:
    return MelipayamakConfig(username="test_user", api_key="test_api_key", from_number="50002710000000")


@pytest.fixture
def farapayamak_config() -> FaraPayamakConfig:
    return FaraPayamakConfig(username="test_user", password="test_pass", from_number="30001234")


@pytest.fixture
def ippanel_config() -> IPPanelConfig:
    return IPPanelConfig(username="09120000000", password="test_pass", from_number="3000505")


@pytest.fixture
def smsir_config() -> SMSirConfig:
    return SMSirConfig(api_key="smsir_test_key", line_number="30007732000000")


@pytest.fixture
def elanak_config() -> ElanakConfig:
    return ElanakConfig(username="elanak_user", password="elanak_pass", from_number="1000123")


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()
