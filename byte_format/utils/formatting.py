"""Byte size formatting utilities."""

import logging
import math
import numbers
import operator
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from ..config import (
    UNITS,
    BASE,
    FRACTION_SCALE,
    DISPLAY_PLACES,
    MAX_SAFE_INTEGER,
    INVALID_INPUT_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
)

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r'^[0-9]+$')
_DISPLAY_QUANTUM = Decimal(1).scaleb(-DISPLAY_PLACES)

ByteInput = Union[int, float, str]


class InvalidInputError(ValueError):
    """Raised when a value cannot be formatted as a byte size."""
    pass


def to_byte_count(value: ByteInput) -> int:
    """Normalize an integer, integral float, or digit string to an int.

    Strings are stripped of surrounding whitespace; an empty string counts
    as zero, matching what the input field submits when it is cleared.

    Args:
        value: Byte quantity in any accepted form

    Returns:
        Non-negative integer byte count

    Raises:
        InvalidInputError: If the value is not a non-negative integer
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            count = 0
        elif _DIGITS_RE.fullmatch(text):
            try:
                count = int(text)
            except ValueError as e:
                # Past the interpreter's int digit limit, far beyond YB range
                raise InvalidInputError(OUT_OF_RANGE_MESSAGE) from e
        else:
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
    elif isinstance(value, numbers.Integral):
        count = operator.index(value)
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
        count = int(value)
    else:
        raise InvalidInputError(INVALID_INPUT_MESSAGE)

    if count < 0:
        raise InvalidInputError(INVALID_INPUT_MESSAGE)
    return count


def format_bytes(value: ByteInput) -> str:
    """Format a byte count as a human-readable binary size.

    Scaling and the fraction are computed on ints so arbitrarily large
    counts stay exact; only the final display value becomes a float.

    Args:
        value: Byte quantity as int, integral float, or digit string

    Returns:
        Formatted string like '0 B', '1023.00 B', '1.50 KB'

    Raises:
        InvalidInputError: If the value is invalid or too large for YB
    """
    count = to_byte_count(value)
    if count == 0:
        return "0 B"

    scaled = count
    index = 0
    while scaled >= BASE and index < len(UNITS) - 1:
        scaled //= BASE
        index += 1

    level = BASE ** index
    remainder = count - level * scaled
    thousandths = remainder * FRACTION_SCALE // level

    # The double sum rounds up past MAX_SAFE_INTEGER from a half onwards
    if scaled > MAX_SAFE_INTEGER or (
        scaled == MAX_SAFE_INTEGER and thousandths * 2 >= FRACTION_SCALE
    ):
        logger.debug("Byte count of %d bits exceeds display range of %s", count.bit_length(), UNITS[-1])
        raise InvalidInputError(OUT_OF_RANGE_MESSAGE)

    number = scaled + thousandths / FRACTION_SCALE
    # Half-up on the exact binary value of the double
    display = Decimal(number).quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{display:f} {UNITS[index]}"
