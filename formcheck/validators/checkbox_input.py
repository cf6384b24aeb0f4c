"""
Checkbox Input Validator

A checkbox fails only when it is required and left unchecked.
"""

from typing import Any, Optional

from formcheck.core.logging import LogChannel, get_logger
from formcheck.core.result import Checked, Ok, TypeMismatch
from formcheck.schema.models import Outcome, Rule
from formcheck.validators.base import RuleLike, as_rule, field_outcome

log = get_logger(LogChannel.VALIDATE)


def check_checkbox(value: Any, required: bool = False) -> Checked[bool]:
    """Check a raw value; TypeMismatch if it is not a bool."""
    if not isinstance(value, bool):
        return TypeMismatch.of("Checkbox value", "a boolean", value)

    ok = not (required and value is False)
    log.debug("checkbox_checked", ok=ok, required=required)
    return Ok(ok)


def is_checkbox_satisfied(value: Any, required: bool = False) -> bool:
    """
    True unless the checkbox is required and unchecked.

    Raises:
        FieldTypeError: If value is not a bool
    """
    return check_checkbox(value, required).unwrap()


def handle_checkbox_input(rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
    """Batch handler for the 'checkboxInput' kind."""
    checked = check_checkbox(rule.value, rule.required)
    if isinstance(checked, TypeMismatch):
        return checked
    return Ok(field_outcome(rule, checked.value, lang))


def validate_checkbox_input(rule: RuleLike, lang: str = "en") -> Outcome:
    """
    Validate a checkbox field into a localized outcome.

    Raises:
        FieldTypeError: If the value is not a bool
    """
    return handle_checkbox_input(as_rule(rule), lang).unwrap()
