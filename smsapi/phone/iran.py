"""Iranian mobile number normalization utilities.

Iranian mobile numbers are dialed domestically as ``09XXXXXXXXX`` (11
digits). Callers commonly supply them with the ``98``/``+98`` country code,
or without the trunk ``0``. All of these map to the domestic form.
"""

from __future__ import annotations

import re

IRAN_COUNTRY_CODE = "98"

_MOBILE_RE = re.compile(r"^(\+98|0)?9\d{9}$")
_NORMALIZED_MOBILE_RE = re.compile(r"^09\d{9}$")


def normalize_iran_mobile(number: str) -> str:
    """Normalize a phone number to the domestic ``09XXXXXXXXX`` form.

    Non-digit characters are removed first. Shapes that are not recognized
    are returned as cleaned digits without raising, use
    :func:`is_valid_iran_mobile` to validate.

    Examples:
        >>> normalize_iran_mobile("+98 912 411 8355")
        '09124118355'
        >>> normalize_iran_mobile("9124118355")
        '09124118355'
        >>> normalize_iran_mobile("12345")
        '12345'
    """
    digits = re.sub(r"\D", "", number)

    if len(digits) == 12 and digits.startswith(IRAN_COUNTRY_CODE):
        return "0" + digits[2:]
    if len(digits) == 10 and digits.startswith("9"):
        return "0" + digits

    return digits


def is_valid_iran_mobile(number: str) -> bool:
    """Check whether a number is an Iranian mobile number.

    Accepts ``09123456789``, ``9123456789`` and ``+989123456789`` as given,
    and anything that normalizes to ``09`` followed by nine digits.
    """
    if not number:
        return False
    stripped = number.strip()
    if _MOBILE_RE.match(stripped):
        return True
    return bool(_NORMALIZED_MOBILE_RE.match(normalize_iran_mobile(stripped)))
