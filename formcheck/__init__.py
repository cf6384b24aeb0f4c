"""
formcheck — Field validation and sanitization for form data

Turns a batch of typed rules into a parallel batch of outcomes.
The same policy runs where the input was entered and again at
the trust boundary.

Single calls are strict. Batches are total.
"""

__version__ = "0.1.0"

from formcheck.core.dispatcher import (
    Dispatcher,
    get_dispatcher,
    validate,
    validate_async,
)
from formcheck.core.errors import FieldTypeError, FormcheckError
from formcheck.sanitizers import SanitizeOptions, escape_html, sanitize_string
from formcheck.schema import Outcome, Rule
from formcheck.validators import (
    is_checkbox_satisfied,
    is_email_address,
    is_phone_number,
    is_proper_name,
    looks_like_phone_number,
    validate_checkbox_input,
    validate_email_address,
    validate_phone_number,
    validate_proper_name,
)

__all__ = [
    "__version__",
    # Batch API
    "Dispatcher",
    "get_dispatcher",
    "validate",
    "validate_async",
    # Models
    "Rule",
    "Outcome",
    # Errors
    "FormcheckError",
    "FieldTypeError",
    # Sanitizers
    "SanitizeOptions",
    "sanitize_string",
    "escape_html",
    # Validators
    "is_proper_name",
    "is_email_address",
    "is_phone_number",
    "looks_like_phone_number",
    "is_checkbox_satisfied",
    "validate_proper_name",
    "validate_email_address",
    "validate_phone_number",
    "validate_checkbox_input",
]
