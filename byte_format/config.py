"""Configuration constants for byte-format."""

import os

# Magnitude units, each 1024x the previous
UNITS = ['B', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB']
BASE = 1024

# Fraction precision: thousandths are computed exactly, then shown with 2 places
FRACTION_SCALE = 1000
DISPLAY_PLACES = 2

# Largest integer a double holds without rounding (2**53 - 1)
MAX_SAFE_INTEGER = 2 ** 53 - 1

# Largest byte count whose display value stays within MAX_SAFE_INTEGER at YB:
# the fraction must stay below one half of a YB
MAX_FORMATTABLE_BYTES = (
    MAX_SAFE_INTEGER * BASE ** (len(UNITS) - 1)
    + BASE ** (len(UNITS) - 1) // 2 - 1
)

# Input field
DEFAULT_INPUT_VALUE = "520"
INPUT_PATTERN = r'^\d+$'

# Error messages
INVALID_INPUT_MESSAGE = (
    "Invalid input: `bytes` must be an integer, an integral float, or an integer string, "
    "and they all must be non-negative"
)
OUT_OF_RANGE_MESSAGE = (
    f"Invalid input: `bytes` exceeds the maximum precise value that {UNITS[-1]} can represent"
)

# Logging
DEFAULT_LOG_LEVEL = 'WARNING'


def get_default_input_value() -> str:
    """Initial text of the input field, overridable via BYTE_FORMAT_DEFAULT_VALUE."""
    return os.getenv('BYTE_FORMAT_DEFAULT_VALUE', DEFAULT_INPUT_VALUE)


def get_log_level(verbose: bool = False) -> str:
    """Resolve the log level from --verbose and BYTE_FORMAT_LOG_LEVEL."""
    if verbose:
        return 'DEBUG'
    return os.getenv('BYTE_FORMAT_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
