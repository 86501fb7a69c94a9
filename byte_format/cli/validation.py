"""CLI input validation utilities."""

import logging
import re
from typing import Tuple

from ..config import INPUT_PATTERN

logger = logging.getLogger(__name__)

_INPUT_RE = re.compile(INPUT_PATTERN, re.ASCII)


def is_valid_input(text: str) -> bool:
    """Check whether text is allowed in the input field.

    The empty string is allowed so the field can be cleared.

    Args:
        text: Candidate field contents

    Returns:
        True if text is empty or only digits
    """
    return not text or bool(_INPUT_RE.fullmatch(text))


def apply_input_edit(current: str, candidate: str) -> Tuple[str, bool]:
    """Apply an edit to the input field, discarding it if invalid.

    Args:
        current: Text currently in the field
        candidate: Text the edit would produce

    Returns:
        Tuple of (new_text, accepted)
    """
    if is_valid_input(candidate):
        return candidate, True
    logger.debug("Rejected input edit %r, keeping %r", candidate, current)
    return current, False

