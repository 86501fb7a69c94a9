"""Command-line helpers for byte-format."""
