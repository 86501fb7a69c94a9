"""Interactive input session that re-formats the field after every edit."""

import logging
from dataclasses import dataclass
from typing import Optional

from .cli.validation import apply_input_edit, is_valid_input
from .config import DEFAULT_INPUT_VALUE, get_default_input_value
from .utils.formatting import InvalidInputError, format_bytes

logger = logging.getLogger(__name__)


@dataclass
class FormatResult:
    """Raw input text paired with its formatted size or error."""
    value: str
    formatted: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_value(value: str) -> FormatResult:
    """Format raw input text, capturing InvalidInputError as a result."""
    try:
        return FormatResult(value=value, formatted=format_bytes(value))
    except InvalidInputError as e:
        return FormatResult(value=value, error=str(e))


class InteractiveSession:
    """Holds the input field text and its latest formatted result.

    Edits that would put non-digit characters into the field are
    discarded and the previous text stays in place.
    """

    def __init__(self, initial_value: Optional[str] = None):
        if initial_value is None:
            initial_value = get_default_input_value()
            if not is_valid_input(initial_value):
                logger.warning(
                    "Ignoring BYTE_FORMAT_DEFAULT_VALUE=%r: only digits are allowed", initial_value
                )
                initial_value = DEFAULT_INPUT_VALUE
        self.value = initial_value
        self.rejected_edits = 0

    def apply_edit(self, candidate: str) -> bool:
        """Replace the field text with candidate if it is valid.

        Returns:
            True if the edit was accepted
        """
        self.value, accepted = apply_input_edit(self.value, candidate)
        if not accepted:
            self.rejected_edits += 1
        else:
            logger.debug("Input changed to %r", self.value)
        return accepted

    def current_result(self) -> FormatResult:
        """Format the current field text."""
        return format_value(self.value)
