"""
Enums — Field kinds and failure codes.

Kinds are compared exactly as the caller wrote them, so the values
here are the wire names (camelCase, case-sensitive).
"""

from enum import Enum


class FieldKind(str, Enum):
    """Field kinds registered by default."""

    PROPER_NAME = "properName"
    EMAIL_ADDRESS = "emailAddress"
    PHONE_NUMBER = "phoneNumber"
    CHECKBOX_INPUT = "checkboxInput"
    STRING = "string"
    HTML = "html"


class ErrorCode(str, Enum):
    """Machine-readable failure codes surfaced on outcomes."""

    INVALID_PROPER_NAME = "invalid-proper-name"
    INVALID_EMAIL_ADDRESS = "invalid-email-address"
    INVALID_PHONE_NUMBER = "invalid-phone-number"
    INVALID_CHECKBOX_INPUT = "invalid-checkbox-input"
    INVALID_STRING = "invalid-string"
    INVALID_HTML = "invalid-html"

    # Kind not present in the registry
    UNKNOWN_KIND = "unknown-kind"


class MessageKey(str, Enum):
    """Which default text to pick from the message catalog."""

    VALID = "valid"
    INVALID = "invalid"
