"""Output formatters for different display modes."""

from .base import BaseFormatter
from .terminal import TerminalFormatter
from .plain import PlainFormatter, should_use_plain_output
from .jsonl import JSONLFormatter

__all__ = [
    'BaseFormatter',
    'TerminalFormatter',
    'PlainFormatter',
    'JSONLFormatter',
    'should_use_plain_output',
]
