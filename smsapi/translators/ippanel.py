"""Translator for ippanel ``services.jspd`` responses (FarazSMS, MedianaSMS).

Every response is a two-element JSON array ``[code, payload]``. Code 0 is
success. On failure the payload may hold a description, but the static
table below is preferred since it is stable across panel versions.
"""

from __future__ import annotations

from collections.abc import Collection
from types import MappingProxyType
from typing import Any

from smsapi.transport import TransportOutcome
from smsapi.types import SMSResult

from .base import as_int, invalid_format, translate_outcome, unknown_error_message

SUCCESS_CODE = 0

EMPTY_MESSAGE = 1
NO_RECIPIENTS = 4
CONTACT_SAVED = 102

ERRORS = MappingProxyType({
    1: "متن پیام خالی می باشد.",
    2: "کاربر محدود گردیده است.",
    3: "خط به شما تعلق ندارد.",
    4: "گیرندگان خالی است.",
    5: "اعتبار کافی نیست.",
    7: "خط مورد نظر برای ارسال انبوه مناسب نمی‌باشد.",
    9: "خط مورد نظر در این ساعت امکان ارسال ندارد.",
    21: "پسوند فایل صوتی نامعتبر است.",
    22: "سایز فایل صوتی نامعتبر است.",
    23: "تعداد تلاش در پیام صوتی نامعتبر است.",
    98: "حداکثر تعداد گیرنده رعایت نشده است.",
    99: "اپراتور خط ارسالی قطع می‌باشد.",
    100: "شماره مخاطب دفترچه تلفن نامعتبر می‌باشد.",
    101: "شماره مخاطب در دفترچه تلفن وجود دارد.",
    102: "شماره مخاطب با موفقیت در دفترچه تلفن ذخیره گردید.",
    111: "حداکثر تعداد گیرنده برای ارسال پیام صوتی رعایت نشده است.",
    131: "تعداد تلاش در پیام صوتی باید یکبار باشد.",
    132: "آدرس فایل صوتی وارد نگردیده است.",
    301: "از حرف ویژه در نام کاربری استفاده گردیده است.",
    302: "قیمت گذاری انجام نشده است.",
    303: "نام کاربری وارد نگردیده است.",
    304: "نام کاربری قبلا انتخاب گردیده است.",
    305: "نام کاربری وارد نگردیده است.",
    306: "کد ملی وارد نشده است.",
    307: "کد ملی به خطا وارد شده است.",
    308: "شماره شناسنامه نا معتبر است.",
    309: "شماره شناسنامه وارد نگردیده است.",
    310: "ایمیل کاربر وارد نگردیده است.",
    311: "شماره تلفن وارد نگردیده است.",
    312: "تلفن به درستی وارد نگردیده است.",
    313: "آدرس شما وارد نگردیده است.",
    314: "شماره موبایل را وارد نکرده اید.",
    315: "شماره موبایل به نادرستی وارد گردیده است.",
    316: "سطح دسترسی به نادرستی وارد گردیده است.",
    317: "کلمه عبور وارد نشده است.",
    455: "ارسال در آینده برای کد بالک ارسالی لغو شد.",
    456: "کد بالک ارسالی نامعتبر است.",
    458: "کد تیکت نامعتبر است.",
    962: "نام کاربری یا کلمه عبور نادرست می باشد.",
    963: "دسترسی نامعتبر می باشد.",
    964: "شما دسترسی نمایندگی ندارید.",
    970: "پارامترهای ارسالی برای پترن نامعتبر است.",
    971: "پترن ارسالی نامعتبر است.",
    972: "دریافت کننده برای ارسال پترن نامعتبر می باشد.",
    992: "ارسال پیام از ساعت 8 تا 23 می باشد.",
    993: "دفترچه تلفن باید یک آرایه باشد.",
    994: "لطفا تصویری از کارت بانکی خود را از منو مدارک ارسال کنید.",
    995: "جهت ارسال با خطوط اشتراکی سامانه، لطفا شماره کارت بانکی خود را به دلیل تکمیل فرایند احراز هویت از بخش ارسال مدارک ثبت نمایید.",
    996: "پترن فعال نیست.",
    997: "شما اجازه ارسال از این پترن را ندارید.",
    998: "کارت ملی یا کارت بانکی شما تایید نشده است.",
    1001: "فرمت نام کاربری درست نمی باشد، حداقل ۵ کاراکتر (فقط حروف و اعداد).",
    1002: "گذرواژه خیلی ساده می باشد. (حداقل ۸ کاراکتر بوده و نام کاربری، ایمیل و شماره موبایل در آن وجود نداشته باشد.)",
    1003: "مشکل در ثبت، با پشتیبانی تماس بگیرید.",
    1004: "مشکل در ثبت، با پشتیبانی تماس بگیرید.",
    1005: "مشکل در ثبت، با پشتیبانی تماس بگیرید.",
    1006: "تاریخ ارسال پیام برای گذشته می باشد، لطفا تاریخ ارسال پیام را به درستی وارد نمایید.",
})


def parse_payload(payload: Any, success_codes: Collection[int] = (SUCCESS_CODE,)) -> SMSResult:
    if not isinstance(payload, list) or len(payload) < 2:
        return invalid_format(payload)

    code = as_int(payload[0])
    if code is None:
        return invalid_format(payload)

    data = payload[1]
    if code in success_codes:
        return SMSResult.ok(data, code=code)

    return SMSResult.fail(error_message(code, data), code=code)


def error_message(code: int, data: Any = None) -> str:
    message = ERRORS.get(code)
    if message:
        return message
    if isinstance(data, str) and data.strip():
        return data.strip()
    return unknown_error_message(code)


def translate(outcome: TransportOutcome, success_codes: Collection[int] = (SUCCESS_CODE,)) -> SMSResult:
    return translate_outcome(outcome, lambda payload: parse_payload(payload, success_codes))
