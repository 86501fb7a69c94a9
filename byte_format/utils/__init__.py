"""Shared utilities for byte-format."""

from .formatting import InvalidInputError, format_bytes, to_byte_count

__all__ = [
    'InvalidInputError',
    'format_bytes',
    'to_byte_count',
]
