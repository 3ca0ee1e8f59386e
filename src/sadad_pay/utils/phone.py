"""Customer phone number validation"""

import re
from typing import Optional

from sadad_pay.exceptions import InvalidPhoneError
from sadad_pay.utils.numerals import normalize_digits

MIN_PHONE_LENGTH = 3
MAX_PHONE_LENGTH = 14

# International dialing prefix
DIAL_PREFIX = "00"

_NON_DIGITS = re.compile(r"[^0-9]")


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Normalize a phone number to a bare ASCII digit string

    Args:
        phone: Phone number as typed by the customer, in any numeral script

    Returns:
        The digits, without a leading ``00`` prefix, or None when no
        digits were given

    Raises:
        InvalidPhoneError: If the number has fewer than 3 or more than 14 digits
    """
    if not phone:
        return None

    number = _NON_DIGITS.sub("", normalize_digits(phone))
    if number.startswith(DIAL_PREFIX):
        number = number[len(DIAL_PREFIX):]

    if not number:
        return None

    if not MIN_PHONE_LENGTH <= len(number) <= MAX_PHONE_LENGTH:
        raise InvalidPhoneError(
            f"Please provide a phone number with length between "
            f"{MIN_PHONE_LENGTH} to {MAX_PHONE_LENGTH} digits",
            phone=number,
        )

    return number
