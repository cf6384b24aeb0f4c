"""
Phone Number Validator

One fixed international format: "+" + 3-digit country code (first
digit 1-9) + 9 subscriber digits, exactly 13 characters, ASCII digits
only. No spaces, separators, extensions or short codes.

    +358401234567   ok
    358401234567    no '+'
    +358 401234567  separator
"""

import re
from typing import Any, Optional

from formcheck.core.logging import LogChannel, get_logger
from formcheck.core.result import Checked, Ok, TypeMismatch
from formcheck.schema.models import Outcome, Rule
from formcheck.validators.base import RuleLike, as_rule, field_outcome

log = get_logger(LogChannel.VALIDATE)

PHONE_NUMBER_LENGTH = 13

PHONE_NUMBER_PATTERN = re.compile(r"\+[1-9][0-9]{2}[0-9]{9}\Z")


def check_phone_number(value: Any) -> Checked[bool]:
    """Check a raw value; TypeMismatch if it is not a string."""
    if not isinstance(value, str):
        return TypeMismatch.of("Phone number", "a string", value)

    # Cheap rejects before the regex
    if len(value) != PHONE_NUMBER_LENGTH:
        log.debug("phone_number_length_rejected", length=len(value))
        return Ok(False)
    if value[0] != "+":
        log.debug("phone_number_prefix_rejected")
        return Ok(False)

    ok = PHONE_NUMBER_PATTERN.match(value) is not None
    log.debug("phone_number_checked", ok=ok)
    return Ok(ok)


def is_phone_number(value: Any) -> bool:
    """
    True if value is a valid phone number.

    Raises:
        FieldTypeError: If value is not a string
    """
    return check_phone_number(value).unwrap()


def looks_like_phone_number(value: Any) -> bool:
    """Lenient variant of is_phone_number(): non-strings are simply False."""
    checked = check_phone_number(value)
    return isinstance(checked, Ok) and checked.value


def handle_phone_number(rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
    """Batch handler for the 'phoneNumber' kind."""
    checked = check_phone_number(rule.value)
    if isinstance(checked, TypeMismatch):
        return checked
    return Ok(field_outcome(rule, checked.value, lang))


def validate_phone_number(rule: RuleLike, lang: str = "en") -> Outcome:
    """
    Validate a phone-number field into a localized outcome.

    A fast reject (wrong length, missing '+') still produces a full
    outcome carrying the error message.

    Raises:
        FieldTypeError: If the value is not a string
    """
    return handle_phone_number(as_rule(rule), lang).unwrap()
