"""Utilities module initialization"""

from sadad_pay.utils.logger import Logger
from sadad_pay.utils.numerals import normalize_digits
from sadad_pay.utils.phone import validate_phone

__all__ = ["Logger", "normalize_digits", "validate_phone"]
