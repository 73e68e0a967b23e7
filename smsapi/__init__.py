"""
smsapi: one client interface for Iranian SMS providers.

Calling code sends messages, checks delivery status, reads account credit
and manages contacts through ``SMSGateway`` without depending on any single
provider's wire format (REST/form, REST/JSON or SOAP). Every operation
returns an ``SMSResult(succeeded, code, data)``; failures are values, not
exceptions.

Quick start, Melipayamak::

    from smsapi import MelipayamakConfig, MelipayamakProvider, SMSGateway

    provider = MelipayamakProvider(MelipayamakConfig(
        username="panel-user",
        api_key="...",          # ApiKey from the panel's developer menu
        from_number="50002710000000",
    ))
    gateway = SMSGateway(provider)
    result = gateway.send_sms("+98 912 411 8355", "Hello!")
    if result.succeeded:
        print(f"recId: {result.data}")

Quick start, pattern (template) send via sms.ir::

    from smsapi import SMSGateway, SMSirConfig, SMSirProvider

    gateway = SMSGateway(SMSirProvider(SMSirConfig(api_key="...", line_number="30007732000000")))
    result = gateway.send_sms_by_pattern("09124118355", "", 123456, {"CODE": "4821"})

Bulk sends::

    result = gateway.send_one_sms_to_multi_number(numbers, "Sale starts today")
    # Providers with a per-call cap split the list; result.data then holds
    # one SMSResult per batch, in order, and result.succeeded is their AND.

For testing::

    from smsapi import MockProvider, SMSGateway

    provider = MockProvider()
    SMSGateway(provider).send_sms("09124118355", "test")
    assert len(provider.sent) == 1

Module overview
---------------
- ``types``         SMSResult, ResultCode, provider configs
- ``gateway``       SMSGateway facade
- ``transport``     HttpTransport (httpx) and its outcome values
- ``translators/``  provider payload to SMSResult (payamak, ippanel, sms.ir, SOAP)
- ``providers/``    Melipayamak, FaraPayamak, FarazSMS, MedianaSMS, SMS.ir, Elanak
- ``phone/``        Iranian mobile normalization (09XXXXXXXXX)
- ``mock``          MockProvider

What this library does NOT own (stays in the consuming app):
- Loading credentials from the environment or config files
- Retries, queuing and delivery guarantees
- Persisting message ids or delivery reports
"""

from .gateway import SMSGateway
from .mock import MockProvider
from .phone import is_valid_iran_mobile, normalize_iran_mobile, normalize_phone_numbers
from .providers import (
    ElanakProvider,
    FaraPayamakProvider,
    FarazSMSProvider,
    IPPanelProvider,
    MedianaSMSProvider,
    MelipayamakProvider,
    SMSirProvider,
    SMSProvider,
)
from .transport import HttpError, HttpTransport, RawBody, TransportFailure
from .types import (
    Contact,
    ElanakConfig,
    FaraPayamakConfig,
    IPPanelConfig,
    MelipayamakConfig,
    ResultCode,
    SMSirConfig,
    SMSResult,
)

__all__ = [
    # Gateway
    "SMSGateway",
    # Providers
    "SMSProvider",
    "ElanakProvider",
    "FaraPayamakProvider",
    "FarazSMSProvider",
    "IPPanelProvider",
    "MedianaSMSProvider",
    "MelipayamakProvider",
    "SMSirProvider",
    "MockProvider",
    # Types
    "Contact",
    "ResultCode",
    "SMSResult",
    # Configs
    "ElanakConfig",
    "FaraPayamakConfig",
    "IPPanelConfig",
    "MelipayamakConfig",
    "SMSirConfig",
    # Transport
    "HttpError",
    "HttpTransport",
    "RawBody",
    "TransportFailure",
    # Phone
    "is_valid_iran_mobile",
    "normalize_iran_mobile",
    "normalize_phone_numbers",
]
