"""Base formatter interface for output formatters."""

from abc import ABC, abstractmethod
from typing import TextIO, Optional

from ..session import FormatResult


class BaseFormatter(ABC):
    """Abstract base class for all output formatters.

    All formatters should implement these methods to ensure
    consistent interface across different output formats.
    """

    @abstractmethod
    def format_result(
        self,
        result: FormatResult,
        show_input: bool = False,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a single formatted size or error.

        Args:
            result: FormatResult to render
            show_input: Whether to echo the raw input next to the result
            output_file: Optional file to write output to

        Returns:
            Formatted string, or None if output was written directly
        """
        pass

    def format_rejected_edit(
        self,
        candidate: str,
        current: str,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a notice that an edit was discarded.

        Optional method - default implementation returns None.

        Args:
            candidate: The rejected text
            current: The text kept in the field
            output_file: Optional file to write output to

        Returns:
            Formatted string, or None if not implemented/output written directly
        """
        return None
