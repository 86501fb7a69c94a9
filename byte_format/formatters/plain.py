"""Plain text output formatter for byte sizes."""

import os
import sys
from typing import TextIO, Optional

from .base import BaseFormatter
from ..session import FormatResult


class PlainFormatter(BaseFormatter):
    """Formats results as plain text suitable for piping."""

    def format_result(
        self,
        result: FormatResult,
        show_input: bool = False,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a result as a single line of plain text."""
        body = result.formatted if result.ok else f"Error: {result.error}"
        if show_input:
            body = f"{result.value or '(empty)'} -> {body}"

        plain_content = body + '\n'
        if output_file:
            output_file.write(plain_content)

        return plain_content

    def format_rejected_edit(
        self,
        candidate: str,
        current: str,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a rejected edit notice as plain text."""
        plain_content = f"Rejected {candidate!r}: only digits are allowed, keeping {current!r}\n"
        if output_file:
            output_file.write(plain_content)

        return plain_content


def should_use_plain_output() -> bool:
    """Detect if output should be plain text (when piping or NO_COLOR is set)."""
    # Check if output is being piped (not a terminal)
    if not sys.stdout.isatty():
        return True

    # Check for NO_COLOR environment variable
    if os.getenv('NO_COLOR'):
        return True

    return False
