"""
Reusable value converters for OFX field text.

Monetary and quantity fields are kept decimal-precise: text is handed to
Decimal exactly as read, never through float.
"""

import logging
import re
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Optional

from ofx_parser.exceptions import InvalidAmountFormat

logger = logging.getLogger(__name__)

# "-12,50" style amounts written with a comma as the decimal separator
_COMMA_DECIMAL = re.compile(r'^[+-]?\d*,\d+$')


def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """
    Convert OFX amount text to Decimal.

    Args:
        text: Field text as read from the tree. None (node absent) and
            empty text both yield None.

    Returns:
        Decimal with the exact digits of the input, or None

    Raises:
        InvalidAmountFormat: If the text is not a finite number

    Example:
        >>> parse_decimal('-1234.50')
        Decimal('-1234.50')
        >>> parse_decimal('12,5')
        Decimal('12.5')
    """
    if text is None:
        return None

    value = text.strip()
    if not value:
        return None

    if _COMMA_DECIMAL.match(value):
        logger.debug(f"Reading comma as decimal separator in amount {value!r}")
        value = value.replace(',', '.')

    try:
        amount = Decimal(value)
    except InvalidOperation as e:
        raise InvalidAmountFormat(text) from e

    if not amount.is_finite():
        raise InvalidAmountFormat(text)

    return amount


def to_cents(amount: Optional[Decimal]) -> Optional[int]:
    """
    Express an amount as integer cents, truncating beyond two places.

    Example:
        >>> to_cents(Decimal('-12.349'))
        -1234
        >>> to_cents(Decimal('7'))
        700
    """
    if amount is None:
        return None
    return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_DOWN))
