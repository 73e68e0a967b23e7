"""Translator for payamak-panel REST responses (Melipayamak, FaraPayamak).

Responses are JSON objects shaped like
``{"Value": "...", "RetStatus": 1, "StrRetStatus": "Ok"}``. ``RetStatus``
of 1 is success; on failure ``Value`` usually carries the error code.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from smsapi.transport import TransportOutcome
from smsapi.types import ResultCode, SMSResult

from .base import as_int, invalid_format, lookup_message, translate_outcome, unknown_error_message

SUCCESS_STATUS = 1

EMPTY_MESSAGE = 17
NO_RECIPIENTS = 16

SEND_ERRORS = MappingProxyType({
    0: "نام کاربری یا رمز عبور اشتباه می باشد",
    1: "درخواست با موفقیت انجام شد",
    2: "اعتبار کافی نمی باشد",
    3: "محدودیت در ارسال روزانه",
    4: "محدودیت در حجم ارسال",
    5: "شماره فرستنده معتبر نمی باشد",
    6: "سامانه در حال بروزرسانی می باشد",
    7: "متن حاوی کلمه فیلتر شده می باشد",
    9: "ارسال از خطوط عمومی از طریق وب سرویس امکان پذیر نمی باشد",
    10: "کاربر مورد نظر فعال نمی باشد",
    11: "ارسال نشده",
    12: "مدارک کاربر کامل نمی باشد",
    14: "متن حاوی لینک می باشد",
    15: "عدم وجود لغو 11 در انتهای متن پیامک",
    16: "شماره گیرنده ای یافت نشد",
    17: "متن پیامک خالی می باشد",
    18: "شماره موبایل معتبر نمی باشد",
})

# IP restriction and API-key enforcement errors.
SECURITY_ERRORS = MappingProxyType({
    108: "مسدود شدن IP به دلیل تلاش ناموفق استفاده از API",
    109: "الزام تنظیم IP مجاز برای استفاده از API",
    110: "الزام استفاده از ApiKey به جای رمز عبور",
    111: "درخواست کننده نامعتبر است",
})

# GetDeliveries2 status codes.
DELIVERY_STATUSES = MappingProxyType({
    0: "ارسال شده به مخابرات",
    1: "رسیده به گوشی",
    2: "نرسیده به گوشی",
    3: "خطای مخابراتی",
    5: "خطای نامشخص",
    8: "رسیده به مخابرات",
    16: "نرسیده به مخابرات",
    35: "لیست سیاه",
    100: "نامشخص",
    200: "ارسال شده",
    300: "فیلتر شده",
    400: "در لیست ارسال",
    500: "عدم پذیرش",
})


def parse_payload(payload: Any) -> SMSResult:
    if not isinstance(payload, dict) or "RetStatus" not in payload:
        return invalid_format(payload)

    ret_status = as_int(payload["RetStatus"])
    value = payload.get("Value")

    if ret_status == SUCCESS_STATUS:
        return SMSResult.ok(value, code=SUCCESS_STATUS)

    error_code = as_int(value)
    if error_code is None:
        error_code = ResultCode.UNSUPPORTED
    return SMSResult.fail(error_message(error_code, payload.get("StrRetStatus") or ""), code=error_code)


def error_message(code: int, str_ret_status: str = "") -> str:
    """Resolve a failure message from the static tables or the provider's text."""
    message = lookup_message(code, SEND_ERRORS, SECURITY_ERRORS)
    if message:
        return message
    if str_ret_status and str_ret_status != "Error":
        return str_ret_status
    return unknown_error_message(code)


def translate(outcome: TransportOutcome) -> SMSResult:
    return translate_outcome(outcome, parse_payload)


def delivery_status(code: int) -> str | None:
    return DELIVERY_STATUSES.get(code)
