"""JSONL output formatter for byte sizes."""

import json
from typing import TextIO, Optional

from .base import BaseFormatter
from ..session import FormatResult


class JSONLFormatter(BaseFormatter):
    """Formats results as one JSON record per line."""

    def format_result(
        self,
        result: FormatResult,
        show_input: bool = False,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a result as a JSON record.

        The raw input is always included, so show_input is ignored.
        """
        record = {
            "type": "result",
            "value": result.value,
            "formatted": result.formatted,
            "error": result.error,
        }
        jsonl_content = json.dumps(record) + '\n'

        if output_file:
            output_file.write(jsonl_content)

        return jsonl_content

    def format_rejected_edit(
        self,
        candidate: str,
        current: str,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a rejected edit as a JSON record."""
        record = {
            "type": "rejected_edit",
            "candidate": candidate,
            "value": current,
        }
        jsonl_content = json.dumps(record) + '\n'

        if output_file:
            output_file.write(jsonl_content)

        return jsonl_content
