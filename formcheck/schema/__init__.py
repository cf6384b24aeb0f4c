"""Schema — Rule/Outcome models, enums and serialization."""

from formcheck.schema.enums import ErrorCode, FieldKind, MessageKey
from formcheck.schema.models import Outcome, Rule
from formcheck.schema.serialization import (
    load_rules,
    outcomes_from_json,
    outcomes_to_json,
    parse_rules,
)

__all__ = [
    "ErrorCode",
    "FieldKind",
    "MessageKey",
    "Outcome",
    "Rule",
    "load_rules",
    "outcomes_from_json",
    "outcomes_to_json",
    "parse_rules",
]
