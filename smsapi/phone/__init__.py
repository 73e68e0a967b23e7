"""Phone normalization utilities."""

from .iran import is_valid_iran_mobile, normalize_iran_mobile
from .normalize import normalize_phone_numbers, recipients_list

__all__ = [
    "is_valid_iran_mobile",
    "normalize_iran_mobile",
    "normalize_phone_numbers",
    "recipients_list",
]
