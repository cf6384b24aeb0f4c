"""
Email Address Validator

Pragmatic check: Latin local part, ASCII or Punycode domain with at
least one dot, strict length guards.

Length limits:
- whole address <= 254 characters (RFC 3696 errata 1690)
- local part <= 64 (RFC 5321 4.5.3.1.1)
- DNS label <= 63 (RFC 1035 2.3.4); Punycode TLD payload <= 59

Accepted:
    user@example.com
    åsa.lind@example.fi
    user+tag@sub.example.com
    o'connor@example.ie
    user@xn--bcher-kva.example

Rejected:
    "quoted"@example.com      quoted local parts
    user@[192.0.2.1]          domain literals
    user@localhost            no dot in domain
    user@-bad-.example        hyphen at label edge

The local part is case-sensitive and is never lowercased.
"""

import re
from typing import Any, Optional

from formcheck.core.logging import LogChannel, get_logger
from formcheck.core.result import Checked, Ok, TypeMismatch
from formcheck.schema.models import Outcome, Rule
from formcheck.validators.base import RuleLike, as_rule, field_outcome

log = get_logger(LogChannel.VALIDATE)

MAX_ADDRESS_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64

_LOCAL_CHARS = r"A-Za-z0-9\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u024F\u1E00-\u1EFF_%+'\-"

EMAIL_ADDRESS_PATTERN = re.compile(
    # length guards, checked before the main match
    r"(?=.{1,254}\Z)"
    r"(?=[^@]{1,64}@)"
    # local part: dot-separated atoms
    + f"[{_LOCAL_CHARS}]+(?:\\.[{_LOCAL_CHARS}]+)*"
    + r"@"
    # domain: LDH labels, then an alphabetic or Punycode TLD
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
    r"(?:[A-Za-z]{2,63}|xn--[A-Za-z0-9-]{2,59})\Z"
)


def check_email_address(value: Any) -> Checked[bool]:
    """Check a raw value; TypeMismatch if it is not a string."""
    if not isinstance(value, str):
        return TypeMismatch.of("Email address", "a string", value)

    s = value.strip()
    ok = EMAIL_ADDRESS_PATTERN.match(s) is not None
    log.debug("email_address_checked", ok=ok, length=len(s))
    return Ok(ok)


def is_email_address(value: Any) -> bool:
    """
    True if value is a valid email address.

    Raises:
        FieldTypeError: If value is not a string
    """
    return check_email_address(value).unwrap()


def handle_email_address(rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
    """Batch handler for the 'emailAddress' kind."""
    checked = check_email_address(rule.value)
    if isinstance(checked, TypeMismatch):
        return checked
    return Ok(field_outcome(rule, checked.value, lang))


def validate_email_address(rule: RuleLike, lang: str = "en") -> Outcome:
    """
    Validate an email-address field into a localized outcome.

    Raises:
        FieldTypeError: If the value is not a string
    """
    return handle_email_address(as_rule(rule), lang).unwrap()
