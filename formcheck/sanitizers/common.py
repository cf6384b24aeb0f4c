"""
Common Sanitizers — String cleanup and HTML escaping.

Both functions accept any value, never raise and never fail.
"""

import re
from dataclasses import dataclass, replace
from typing import Any, Optional

from formcheck.core.logging import LogChannel, get_logger
from formcheck.core.result import Checked, Ok
from formcheck.messages.loader import resolve_message
from formcheck.schema.models import Outcome, Rule

log = get_logger(LogChannel.SANITIZE)

# C0 controls and DEL
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE_RUN = re.compile(r"\s+")

# Applied in order; '&' first so later entities are not double-escaped
_HTML_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


@dataclass(frozen=True)
class SanitizeOptions:
    """Switches for sanitize_string()."""

    trim: bool = True
    collapse_whitespace: bool = True
    strip_controls: bool = True
    # None, 0 or a negative value disables truncation
    max_len: Optional[int] = 4096


DEFAULT_OPTIONS = SanitizeOptions()


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def sanitize_string(value: Any, options: Optional[SanitizeOptions] = None, **overrides: Any) -> str:
    """
    Clean a raw value into a single tidy line of text.

    Steps, in order: trim, strip control characters, collapse whitespace
    runs to one space, truncate to max_len. When trimming is on, the
    result is trimmed once more at the end because removing controls or
    truncating can expose edge whitespace; this keeps the function
    idempotent.

    Args:
        value: Anything; None becomes "", other values go through str()
        options: SanitizeOptions (defaults if None)
        **overrides: Per-call option overrides, e.g. max_len=64
    """
    opts = replace(options or DEFAULT_OPTIONS, **overrides) if overrides else (options or DEFAULT_OPTIONS)

    s = _as_text(value)
    if opts.trim:
        s = s.strip()
    if opts.strip_controls:
        s = _CONTROL_CHARS.sub("", s)
    if opts.collapse_whitespace:
        s = _WHITESPACE_RUN.sub(" ", s)
    if opts.max_len is not None and 0 < opts.max_len < len(s):
        s = s[:opts.max_len]
    if opts.trim:
        s = s.strip()
    return s


def escape_html(value: Any) -> str:
    """Escape & < > " ' for safe inclusion in HTML text or attributes."""
    s = _as_text(value)
    for char, entity in _HTML_ENTITIES:
        s = s.replace(char, entity)
    return s


def _sanitized_outcome(rule: Rule, text: str, lang: Optional[str]) -> Outcome:
    return Outcome(
        kind=rule.kind,
        ok=True,
        message=resolve_message(rule.kind, True, rule.success_message, rule.error_message, lang),
        id=rule.id,
        value=text,
    )


def handle_string(rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
    """Batch handler for the 'string' kind."""
    text = sanitize_string(rule.value)
    log.debug("string_sanitized", kind=rule.kind, output_chars=len(text))
    return Ok(_sanitized_outcome(rule, text, lang))


def handle_html(rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
    """Batch handler for the 'html' kind."""
    text = escape_html(rule.value)
    log.debug("html_escaped", kind=rule.kind, output_chars=len(text))
    return Ok(_sanitized_outcome(rule, text, lang))
