"""Persian and Arabic numeral normalization"""

import re
from typing import Dict

ASCII_DIGITS = "0123456789"

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

# HTML numeric entities for the same digits
PERSIAN_ENTITIES = tuple(f"&#{1776 + i};" for i in range(10))
ARABIC_ENTITIES = tuple(f"&#{1632 + i};" for i in range(10))


def _build_digit_table() -> Dict[str, str]:
    table: Dict[str, str] = {}
    for digits in (PERSIAN_DIGITS, ARABIC_DIGITS, PERSIAN_ENTITIES, ARABIC_ENTITIES):
        for ascii_digit, token in zip(ASCII_DIGITS, digits):
            table[token] = ascii_digit
    return table


DIGIT_TABLE = _build_digit_table()

# Longest tokens first so entities win over any shorter overlap
_DIGIT_PATTERN = re.compile(
    "|".join(re.escape(token) for token in sorted(DIGIT_TABLE, key=len, reverse=True))
)


def normalize_digits(text: str) -> str:
    """
    Replace Persian/Arabic digits and their HTML entity forms with ASCII digits

    Every other character is left untouched. The replacement is a single
    pass, so a replaced digit is never looked at again.

    Example:
        >>> normalize_digits("&#1635;٤۵")
        '345'
    """
    return _DIGIT_PATTERN.sub(lambda match: DIGIT_TABLE[match.group(0)], text)
