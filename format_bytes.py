#!/usr/bin/env python3
"""
Byte Size Formatter

Formats byte counts as human-readable binary sizes, either once from the
command line or interactively, re-rendering after every edit.
"""

import logging
import sys
from typing import Optional, TextIO

import click
from dotenv import load_dotenv
from rich.console import Console

from byte_format import __version__
from byte_format.config import get_log_level
from byte_format.formatters import (
    BaseFormatter,
    TerminalFormatter,
    PlainFormatter,
    JSONLFormatter,
    should_use_plain_output,
)
from byte_format.logging_setup import configure_logging
from byte_format.session import InteractiveSession, format_value

# Load environment variables from .env file
load_dotenv()

# Initialize console for rich output
console = Console()

logger = logging.getLogger(__name__)


@click.command()
@click.argument('value', required=False)
@click.option('--interactive', '-i', is_flag=True,
              help='Edit the value interactively (default when VALUE is omitted)')
@click.option('--format', 'output_format', type=click.Choice(['auto', 'terminal', 'plain', 'jsonl']),
              default='auto', help='Output format (auto detects plain when piping)')
@click.option('--plain', is_flag=True, help='Force plain text output (auto-enabled when piping)')
@click.option('--output', '-o', type=click.File('w'), default=None,
              help='Output file (default: stdout)')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.version_option(version=__version__)
def main(value, interactive, output_format, plain, output, verbose):
    """Byte Size Formatter

    Format VALUE, a non-negative byte count, as B, KB, MB, ... YB.
    """
    configure_logging(get_log_level(verbose))

    # Determine actual output format
    actual_format = output_format
    if output_format == 'auto':
        actual_format = 'plain' if (plain or should_use_plain_output()) else 'terminal'
    elif plain:
        actual_format = 'plain'

    formatter = get_formatter(actual_format)
    output_file = output if output is not None else _default_output(actual_format)

    try:
        if interactive or value is None:
            run_interactive(formatter, output_file)
            return

        handle_format_value(value, formatter, output_file)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)


def get_formatter(output_format: str) -> BaseFormatter:
    """Build the formatter for an output format name."""
    if output_format == 'terminal':
        return TerminalFormatter(console)
    elif output_format == 'jsonl':
        return JSONLFormatter()
    return PlainFormatter()


def _default_output(output_format: str) -> Optional[TextIO]:
    # The terminal formatter prints through its own console
    if output_format == 'terminal':
        return None
    return sys.stdout


def handle_format_value(value: str, formatter: BaseFormatter, output_file: Optional[TextIO]) -> None:
    """Format a single VALUE argument, exiting 1 on invalid input."""
    result = format_value(value)
    if not result.ok:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)

    formatter.format_result(result, output_file=output_file)


def run_interactive(formatter: BaseFormatter, output_file: Optional[TextIO]) -> None:
    """Read edits until EOF or Ctrl-C, showing the size after each one.

    Each line replaces the field text; an empty line clears the field.
    """
    session = InteractiveSession()
    formatter.format_result(session.current_result(), show_input=True, output_file=output_file)

    while True:
        click.echo("Bytes: ", nl=False, err=True)
        try:
            line = sys.stdin.readline()
        except KeyboardInterrupt:
            line = ''
        if not line:
            click.echo("", err=True)
            break

        candidate = line.rstrip('\r\n')
        if not session.apply_edit(candidate):
            formatter.format_rejected_edit(candidate, session.value, output_file=output_file)

        formatter.format_result(session.current_result(), show_input=True, output_file=output_file)


if __name__ == '__main__':
    main()
