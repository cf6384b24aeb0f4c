"""Sanitizers — Pure string transforms."""

from formcheck.sanitizers.common import (
    DEFAULT_OPTIONS,
    SanitizeOptions,
    escape_html,
    handle_html,
    handle_string,
    sanitize_string,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "SanitizeOptions",
    "escape_html",
    "handle_html",
    "handle_string",
    "sanitize_string",
]
