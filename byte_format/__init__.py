"""Byte size formatter.

Formats byte counts as human-readable binary sizes (B, KB, ... YB).
"""

__version__ = "1.0.0"

from .utils.formatting import InvalidInputError, format_bytes, to_byte_count
from .session import FormatResult, InteractiveSession, format_value
from .config import (
    UNITS,
    MAX_SAFE_INTEGER,
    MAX_FORMATTABLE_BYTES,
    DEFAULT_INPUT_VALUE,
)

__all__ = [
    # Formatting
    'InvalidInputError',
    'format_bytes',
    'to_byte_count',
    # Interactive session
    'FormatResult',
    'InteractiveSession',
    'format_value',
    # Config
    'UNITS',
    'MAX_SAFE_INTEGER',
    'MAX_FORMATTABLE_BYTES',
    'DEFAULT_INPUT_VALUE',
]
