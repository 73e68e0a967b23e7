"""Translator for sms.ir v1 REST responses.

Responses are JSON objects ``{"status": 1, "message": "...", "data": ...}``.
``status`` 1 is success, any other value is an error code.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from smsapi.transport import TransportOutcome
from smsapi.types import SMSResult

from .base import as_int, invalid_format, translate_outcome, unknown_error_message

SUCCESS_STATUS = 1

EMPTY_MESSAGE = 103
NO_RECIPIENTS = 107

ERRORS = MappingProxyType({
    0: "مشکلی در سرور رخ داده است",
    10: "کلید وب سرویس نامعتبر است",
    11: "کلید وب سرویس غیرفعال است",
    12: "کلید وب سرویس محدود به آی‌پی‌های تعریف شده می‌باشد",
    13: "حساب کاربری غیر فعال است",
    14: "حساب کاربری در حالت تعلیق قرار دارد",
    15: "به منظور استفاده از وب سرویس پلن خود را ارتقا دهید",
    16: "مقدار ارسالی پارامتر نادرست می‌باشد",
    20: "تعداد درخواست بیشتر از حد مجاز است",
    101: "شماره خط نامعتبر می‌باشد",
    102: "اعتبار کافی نمی‌باشد",
    103: "درخواست شما دارای متن (های) خالی است",
    104: "درخواست شما دارای موبایل (های) نادرست است",
    105: "تعداد موبایل ها بیشتر از حد مجاز (100 عدد) می‌باشد",
    106: "تعداد متن ها بیشتر از حد مجاز (100 عدد) می‌باشد",
    107: "لیست موبایل ها خالی می‌باشد",
    108: "لیست متن ها خالی می‌باشد",
    109: "زمان ارسال نامعتبر می‌باشد",
    110: "تعداد شماره موبایل ها و تعداد متن ها برابر نیستند",
    111: "با این شناسه ارسالی ثبت نشده است",
    112: "رکوردی برای حذف یافت نشد",
    113: "قالب یافت نشد",
    114: "طول رشته مقدار پارامتر، بیش از حد مجاز (25 کاراکتر) می‌باشد",
    115: "شماره موبایل(ها) در لیست سیاه سامانه می‌باشند",
    116: "نام یک یا چند پارامتر مقداردهی نشده‌است",
    117: "متن ارسال شده مورد تایید نمی‌باشد",
    118: "تعداد پیام ها بیش از حد مجاز می‌باشد",
    119: "به منظور استفاده از قالب شخصی سازی شده پلن خود را ارتقا دهید",
    123: "خط ارسال‌کننده نیاز به فعال‌سازی دارد",
})

# ``deliveryState`` values of a message report.
DELIVERY_STATES = MappingProxyType({
    1: "رسیده به گوشی",
    2: "نرسیده به گوشی",
    3: "پردازش در مخابرات",
    4: "نرسیده به مخابرات",
    5: "رسیده به اپراتور",
    6: "ناموفق",
    7: "لیست سیاه",
})


def parse_payload(payload: Any) -> SMSResult:
    if not isinstance(payload, dict) or "status" not in payload:
        return invalid_format(payload)

    status = as_int(payload["status"])
    if status is None:
        return invalid_format(payload)

    if status == SUCCESS_STATUS:
        return SMSResult.ok(payload.get("data"), code=SUCCESS_STATUS)

    return SMSResult.fail(error_message(status, payload.get("message")), code=status)


def error_message(code: int, provider_message: Any = None) -> str:
    message = ERRORS.get(code)
    if message:
        return message
    if isinstance(provider_message, str) and provider_message.strip():
        return provider_message.strip()
    return unknown_error_message(code)


def translate(outcome: TransportOutcome) -> SMSResult:
    return translate_outcome(outcome, parse_payload)


def delivery_state(code: int) -> str | None:
    return DELIVERY_STATES.get(code)
