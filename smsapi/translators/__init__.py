"""Response translators: provider payloads to ``SMSResult``."""

from . import ippanel, payamak, smsir, soap
from .base import translate_outcome

__all__ = ["ippanel", "payamak", "smsir", "soap", "translate_outcome"]
