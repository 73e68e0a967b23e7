"""SMS provider adapters."""

from .base import SMSProvider
from .elanak import ElanakProvider
from .farapayamak import FaraPayamakProvider
from .ippanel import FarazSMSProvider, IPPanelProvider, MedianaSMSProvider
from .melipayamak import MelipayamakProvider
from .smsir import SMSirProvider

__all__ = [
    "ElanakProvider",
    "FaraPayamakProvider",
    "FarazSMSProvider",
    "IPPanelProvider",
    "MedianaSMSProvider",
    "MelipayamakProvider",
    "SMSProvider",
    "SMSirProvider",
]
