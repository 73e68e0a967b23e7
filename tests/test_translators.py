"""Tests for provider response translators."""

from unittest.mock import MagicMock

import pytest
import requests
from zeep.exceptions import Fault, TransportError, ValidationError

from smsapi.translators import ippanel, payamak, smsir
from smsapi.translators.base import as_int, translate_outcome, unknown_error_message
from smsapi.translators.soap import call_soap
from smsapi.transport import HttpError, RawBody, TransportFailure
from smsapi.types import ResultCode, SMSResult


class TestTranslateOutcome:
    def _parse(self, payload):
        return SMSResult.ok(payload)

    def test_transport_failure(self):
        result = translate_outcome(TransportFailure("Request error: refused"), self._parse)
        assert not result.succeeded
        assert result.code == ResultCode.TRANSPORT_FAILURE
        assert result.data == "Request error: refused"

    def test_http_error_uses_status_as_code(self):
        result = translate_outcome(HttpError(503), self._parse)
        assert not result.succeeded
        assert result.code == 503
        assert result.data == "HTTP Error: 503"

    @pytest.mark.parametrize("body", ["", "   ", "\n"])
    def test_empty_body(self, body):
        result = translate_outcome(RawBody(body), self._parse)
        assert not result.succeeded
        assert result.code == ResultCode.EMPTY_BODY
        assert result.data == "Empty response from API"

    def test_invalid_json(self):
        result = translate_outcome(RawBody("<html>502</html>"), self._parse)
        assert not result.succeeded
        assert result.code == ResultCode.INVALID_JSON
        assert result.data.startswith("Invalid JSON response:")

    def test_valid_json_is_parsed(self):
        assert translate_outcome(RawBody('{"a": 1}'), self._parse).data == {"a": 1}


class TestAsInt:
    @pytest.mark.parametrize(("value", "expected"), [(3, 3), ("3", 3), ("3.0", 3), (2.9, 2), (" 12 ", 12)])
    def test_numeric(self, value, expected):
        assert as_int(value) == expected

    @pytest.mark.parametrize("value", [None, "abc", True, "inf", "nan", [], {}])
    def test_non_numeric(self, value):
        assert as_int(value) is None


class TestPayamakTranslator:
    def test_success(self):
        result = payamak.translate(RawBody('{"Value": "5012345", "RetStatus": 1, "StrRetStatus": "Ok"}'))
        assert result == SMSResult.ok("5012345", code=1)

    def test_success_with_string_status(self):
        assert payamak.translate(RawBody('{"Value": "7", "RetStatus": "1"}')).succeeded

    def test_known_error_code(self):
        result = payamak.translate(RawBody('{"Value": "2", "RetStatus": 0, "StrRetStatus": "Error"}'))
        assert not result.succeeded
        assert result.code == 2
        assert result.data == payamak.SEND_ERRORS[2]

    def test_security_error_code(self):
        result = payamak.translate(RawBody('{"Value": "110", "RetStatus": 0, "StrRetStatus": "Error"}'))
        assert result.code == 110
        assert result.data == payamak.SECURITY_ERRORS[110]

    def test_unknown_code_uses_provider_text(self):
        result = payamak.translate(RawBody('{"Value": "4242", "RetStatus": 0, "StrRetStatus": "Quota exceeded"}'))
        assert result.code == 4242
        assert result.data == "Quota exceeded"

    def test_unknown_code_generic_message(self):
        result = payamak.translate(RawBody('{"Value": "4242", "RetStatus": 0, "StrRetStatus": "Error"}'))
        assert result.data == unknown_error_message(4242)
        assert "4242" in result.data

    def test_non_numeric_value_on_failure(self):
        result = payamak.translate(RawBody('{"Value": "oops", "RetStatus": 0}'))
        assert not result.succeeded
        assert result.code == ResultCode.UNSUPPORTED
        assert result.data

    @pytest.mark.parametrize("body", ['[0, "x"]', '{"Value": "1"}', '"text"', "42"])
    def test_unexpected_shape(self, body):
        result = payamak.translate(RawBody(body))
        assert result.code == ResultCode.INVALID_FORMAT
        assert result.data == "Invalid response format from API"

    def test_delivery_status(self):
        assert payamak.delivery_status(1) == payamak.DELIVERY_STATUSES[1]
        assert payamak.delivery_status(4242) is None


class TestIPPanelTranslator:
    def test_success(self):
        assert ippanel.translate(RawBody('[0, "1234567"]')) == SMSResult.ok("1234567", code=0)

    def test_string_code(self):
        assert ippanel.translate(RawBody('["0", 1500]')).succeeded

    def test_known_error(self):
        result = ippanel.translate(RawBody('[5, ""]'))
        assert not result.succeeded
        assert result.code == 5
        assert result.data == ippanel.ERRORS[5]

    def test_unknown_code_uses_payload_text(self):
        result = ippanel.translate(RawBody('[4242, "panel says no"]'))
        assert result.data == "panel says no"

    def test_unknown_code_generic_message(self):
        assert ippanel.translate(RawBody("[4242, null]")).data == unknown_error_message(4242)

    def test_extra_success_codes(self):
        result = ippanel.translate(RawBody('[102, "saved"]'), success_codes=(0, ippanel.CONTACT_SAVED))
        assert result.succeeded
        assert result.code == 102

    @pytest.mark.parametrize("body", ["[0]", "[]", '{"status": 0}', '["abc", 1]', '"0"'])
    def test_unexpected_shape(self, body):
        assert ippanel.translate(RawBody(body)).code == ResultCode.INVALID_FORMAT


class TestSMSirTranslator:
    def test_success(self):
        body = '{"status": 1, "message": "موفق", "data": {"packId": "abc", "messageIds": [1, 2]}}'
        result = smsir.translate(RawBody(body))
        assert result.succeeded
        assert result.code == 1
        assert result.data == {"packId": "abc", "messageIds": [1, 2]}

    def test_known_error(self):
        result = smsir.translate(RawBody('{"status": 102, "message": "credit", "data": null}'))
        assert result.code == 102
        assert result.data == smsir.ERRORS[102]

    def test_zero_is_an_error(self):
        result = smsir.translate(RawBody('{"status": 0, "message": "", "data": null}'))
        assert not result.succeeded
        assert result.data == smsir.ERRORS[0]

    def test_unknown_code_uses_provider_message(self):
        assert smsir.translate(RawBody('{"status": 4242, "message": "new error"}')).data == "new error"

    def test_unknown_code_generic_message(self):
        assert smsir.translate(RawBody('{"status": 4242}')).data == unknown_error_message(4242)

    @pytest.mark.parametrize("body", ['{"data": 1}', "[1, 2]", '{"status": "x"}'])
    def test_unexpected_shape(self, body):
        assert smsir.translate(RawBody(body)).code == ResultCode.INVALID_FORMAT

    def test_delivery_state(self):
        assert smsir.delivery_state(1) == smsir.DELIVERY_STATES[1]
        assert smsir.delivery_state(99) is None


class TestCallSoap:
    def test_success(self):
        operation = MagicMock(return_value="1001")
        result = call_soap(operation, "a", "b")
        assert result == SMSResult.ok("1001", code=0)
        operation.assert_called_once_with("a", "b")

    def test_fault(self):
        operation = MagicMock(side_effect=Fault("Invalid username"))
        result = call_soap(operation)
        assert not result.succeeded
        assert result.code == ResultCode.UNSUPPORTED
        assert result.data == "Invalid username"

    def test_transport_error_with_status(self):
        result = call_soap(MagicMock(side_effect=TransportError(status_code=502)))
        assert result.code == 502
        assert result.data == "HTTP Error: 502"

    def test_request_exception(self):
        result = call_soap(MagicMock(side_effect=requests.ConnectionError("refused")))
        assert result.code == ResultCode.TRANSPORT_FAILURE
        assert "refused" in result.data

    def test_other_zeep_error(self):
        result = call_soap(MagicMock(side_effect=ValidationError("bad arg")))
        assert not result.succeeded
        assert result.code == ResultCode.UNSUPPORTED
        assert result.data.startswith("SOAP error:")

    def test_missing_operation(self):
        service = MagicMock(spec=[])
        result = call_soap(lambda: service.SendSMS("a"))
        assert result.code == ResultCode.UNSUPPORTED
        assert result.data.startswith("SOAP error:")

    def test_signature_mismatch(self):
        result = call_soap(MagicMock(side_effect=TypeError("SendSMS() got an unexpected keyword argument")))
        assert not result.succeeded
        assert result.code == ResultCode.UNSUPPORTED
