"""Error boundary for SOAP providers.

SOAP services report failure by raising a fault instead of returning an
error code. ``call_soap`` is the single place a remote procedure is invoked,
so faults and transport errors never escape the provider.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import requests
from zeep.exceptions import Error, Fault, TransportError

from smsapi.types import ResultCode, SMSResult

logger = logging.getLogger(__name__)

SUCCESS_CODE = 0


def call_soap(operation: Callable[..., Any], *args: Any) -> SMSResult:
    """Invoke ``operation`` and wrap its return value or failure.

    ``operation`` may also resolve the SOAP client lazily, a WSDL that cannot
    be fetched is reported like any other transport error.
    """
    try:
        value = operation(*args)
    except Fault as fault:
        logger.error("SOAP fault: %s", fault.message)
        return SMSResult.fail(fault.message or "SOAP fault", code=ResultCode.UNSUPPORTED)
    except TransportError as exc:
        logger.error("SOAP transport error: HTTP %s", exc.status_code)
        code = exc.status_code or ResultCode.TRANSPORT_FAILURE
        return SMSResult.fail(f"HTTP Error: {exc.status_code}" if exc.status_code else str(exc), code=code)
    except requests.RequestException as exc:
        logger.error("SOAP request failed: %s", exc)
        return SMSResult.fail(f"Request error: {exc}", code=ResultCode.TRANSPORT_FAILURE)
    except Error as exc:
        logger.exception("SOAP call failed")
        return SMSResult.fail(f"SOAP error: {exc}", code=ResultCode.UNSUPPORTED)
    except (AttributeError, TypeError) as exc:
        # Raised by zeep when the WSDL lacks the operation or its signature differs.
        logger.exception("SOAP operation does not match the service description")
        return SMSResult.fail(f"SOAP error: {exc}", code=ResultCode.UNSUPPORTED)

    return SMSResult.ok(value, code=SUCCESS_CODE)
