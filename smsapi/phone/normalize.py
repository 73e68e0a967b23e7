"""Shape-preserving phone normalization used by every provider."""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

from .iran import normalize_iran_mobile


@overload
def normalize_phone_numbers(numbers: str) -> str: ...


@overload
def normalize_phone_numbers(numbers: Sequence[str]) -> list[str]: ...


def normalize_phone_numbers(numbers: str | Sequence[str]) -> str | list[str]:
    """Normalize one number or a collection of numbers.

    A single string yields a single string. Any other sequence is normalized
    element-wise, keeping order and count.
    """
    if isinstance(numbers, str):
        return normalize_iran_mobile(numbers)
    return [normalize_iran_mobile(number) for number in numbers]


def recipients_list(to: str | Sequence[str]) -> list[str]:
    """Return normalized recipients as a list, wrapping a single number."""
    if isinstance(to, str):
        return [normalize_iran_mobile(to)]
    return normalize_phone_numbers(to)
