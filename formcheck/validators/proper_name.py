"""
Proper Name Validator

Accepts one Latin-script name token, personal or place:
- Kalle, Åsa, O'Brien, Jean-Luc, Anna-Liisa-Maria

Rules:
- NFC-normalized and trimmed, then 1-64 characters
- letters from Basic Latin, Latin-1 Supplement, Latin Extended-A/B
  and Latin Extended Additional only
- parts joined by one separator: hyphen, U+2010, U+2011, soft hyphen,
  apostrophe or U+2019
- every part starts with an uppercase letter
- no spaces, digits, other punctuation, or edge/doubled separators
"""

import re
import unicodedata
from typing import Any, Callable, Optional

from formcheck.core.logging import LogChannel, get_logger
from formcheck.core.result import Checked, Ok, TypeMismatch
from formcheck.schema.models import Outcome, Rule
from formcheck.validators.base import RuleLike, as_rule, field_outcome

log = get_logger(LogChannel.VALIDATE)

MAX_NAME_LENGTH = 64

# Unicode blocks holding Latin letters (inclusive code point ranges)
LATIN_BLOCKS = (
    (0x0041, 0x005A),  # Basic Latin uppercase
    (0x0061, 0x007A),  # Basic Latin lowercase
    (0x00C0, 0x00FF),  # Latin-1 Supplement (multiplication/division signs are not letters)
    (0x0100, 0x017F),  # Latin Extended-A
    (0x0180, 0x024F),  # Latin Extended-B
    (0x1E00, 0x1EFF),  # Latin Extended Additional
)

NAME_SEPARATORS = "-\u2010\u2011\u00ad'\u2019"


def _char_class(predicate: Callable[[str], bool]) -> str:
    """Regex character-class body for every Latin code point matching predicate."""
    ranges: list[list[int]] = []
    for start, end in LATIN_BLOCKS:
        for cp in range(start, end + 1):
            if not predicate(chr(cp)):
                continue
            if ranges and ranges[-1][1] == cp - 1:
                ranges[-1][1] = cp
            else:
                ranges.append([cp, cp])

    parts = []
    for lo, hi in ranges:
        if lo == hi:
            parts.append(re.escape(chr(lo)))
        else:
            parts.append(f"{re.escape(chr(lo))}-{re.escape(chr(hi))}")
    return "".join(parts)


LATIN_LETTERS = _char_class(lambda ch: unicodedata.category(ch).startswith("L"))
LATIN_UPPERCASE = _char_class(lambda ch: unicodedata.category(ch) in ("Lu", "Lt"))

_NAME_PART = f"[{LATIN_UPPERCASE}][{LATIN_LETTERS}]*"
_SEPARATOR = f"[{re.escape(NAME_SEPARATORS)}]"

PROPER_NAME_PATTERN = re.compile(f"{_NAME_PART}(?:{_SEPARATOR}{_NAME_PART})*")


def check_proper_name(value: Any) -> Checked[bool]:
    """Check a raw value; TypeMismatch if it is not a string."""
    if not isinstance(value, str):
        return TypeMismatch.of("Name", "a string", value)

    s = unicodedata.normalize("NFC", value).strip()
    if not 1 <= len(s) <= MAX_NAME_LENGTH:
        log.debug("proper_name_length_rejected", length=len(s))
        return Ok(False)

    ok = PROPER_NAME_PATTERN.fullmatch(s) is not None
    log.debug("proper_name_checked", ok=ok, length=len(s))
    return Ok(ok)


def is_proper_name(value: Any) -> bool:
    """
    True if value is a valid proper name.

    Raises:
        FieldTypeError: If value is not a string
    """
    return check_proper_name(value).unwrap()


def handle_proper_name(rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
    """Batch handler for the 'properName' kind."""
    checked = check_proper_name(rule.value)
    if isinstance(checked, TypeMismatch):
        return checked
    return Ok(field_outcome(rule, checked.value, lang))


def validate_proper_name(rule: RuleLike, lang: str = "en") -> Outcome:
    """
    Validate a proper-name field into a localized outcome.

    Args:
        rule: Rule (or mapping) whose value is the name
        lang: Two-letter language code for default messages

    Raises:
        FieldTypeError: If the value is not a string
    """
    return handle_proper_name(as_rule(rule), lang).unwrap()
