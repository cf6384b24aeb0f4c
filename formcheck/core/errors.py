"""
Errors — Exception types raised by formcheck.

Direct validator calls raise these. The batch dispatcher never lets
them escape; it turns them into negative outcomes.
"""


class FormcheckError(Exception):
    """Base class for all formcheck errors."""


class FieldTypeError(FormcheckError, TypeError):
    """
    A field value has the wrong Python type for its validator.

    This is a caller contract violation (e.g. an int passed to the
    email validator), not a user input failure.
    """

    def __init__(self, field: str, expected: str, got: str):
        self.field = field
        self.expected = expected
        self.got = got
        super().__init__(f"{field} must be {expected}, got {got}")


class CatalogError(FormcheckError, ValueError):
    """The message catalog file is missing entries or malformed."""
