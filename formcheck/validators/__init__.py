"""Validators — One module per field kind."""

from formcheck.validators.checkbox_input import (
    check_checkbox,
    handle_checkbox_input,
    is_checkbox_satisfied,
    validate_checkbox_input,
)
from formcheck.validators.email_address import (
    EMAIL_ADDRESS_PATTERN,
    check_email_address,
    handle_email_address,
    is_email_address,
    validate_email_address,
)
from formcheck.validators.phone_number import (
    PHONE_NUMBER_PATTERN,
    check_phone_number,
    handle_phone_number,
    is_phone_number,
    looks_like_phone_number,
    validate_phone_number,
)
from formcheck.validators.proper_name import (
    PROPER_NAME_PATTERN,
    check_proper_name,
    handle_proper_name,
    is_proper_name,
    validate_proper_name,
)

__all__ = [
    # Proper name
    "PROPER_NAME_PATTERN",
    "check_proper_name",
    "handle_proper_name",
    "is_proper_name",
    "validate_proper_name",
    # Email address
    "EMAIL_ADDRESS_PATTERN",
    "check_email_address",
    "handle_email_address",
    "is_email_address",
    "validate_email_address",
    # Phone number
    "PHONE_NUMBER_PATTERN",
    "check_phone_number",
    "handle_phone_number",
    "is_phone_number",
    "looks_like_phone_number",
    "validate_phone_number",
    # Checkbox
    "check_checkbox",
    "handle_checkbox_input",
    "is_checkbox_satisfied",
    "validate_checkbox_input",
]
