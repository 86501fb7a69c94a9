"""Rich terminal output formatter for byte sizes."""

from typing import TextIO, Optional

from rich.console import Console
from rich.text import Text

from .base import BaseFormatter
from ..session import FormatResult


class TerminalFormatter(BaseFormatter):
    """Formats results for rich terminal display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

        # Color scheme
        self.colors = {
            'input': 'bright_blue',
            'size': 'bold bright_green',
            'error': 'red',
            'warning': 'yellow',
            'arrow': 'dim white',
        }

    def format_result(
        self,
        result: FormatResult,
        show_input: bool = False,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Display a result on the console."""
        console = Console(file=output_file) if output_file else self.console

        text = Text()
        if show_input:
            text.append(result.value or '(empty)', style=self.colors['input'])
            text.append("  →  ", style=self.colors['arrow'])

        if result.ok:
            text.append(result.formatted, style=self.colors['size'])
        else:
            text.append(f"Error: {result.error}", style=self.colors['error'])

        console.print(text)
        return None  # Output written directly to console

    def format_rejected_edit(
        self,
        candidate: str,
        current: str,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Display a rejected edit warning on the console."""
        console = Console(file=output_file) if output_file else self.console
        text = Text()
        text.append("Rejected ", style=self.colors['warning'])
        text.append(repr(candidate), style=self.colors['error'])
        text.append(f": only digits are allowed, keeping {current!r}", style=self.colors['warning'])
        console.print(text)
        return None
