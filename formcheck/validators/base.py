"""
Validator Base — Shared helpers for field-descriptor validators.
"""

from typing import Any, Mapping, Optional, Union

from formcheck.messages.loader import resolve_message
from formcheck.schema.models import Outcome, Rule

# Rules may arrive as models or as plain mappings (e.g. parsed JSON)
RuleLike = Union[Rule, Mapping[str, Any]]


def as_rule(rule: RuleLike) -> Rule:
    """Coerce a mapping into a Rule; Rule instances pass through."""
    if isinstance(rule, Rule):
        return rule
    return Rule.model_validate(rule)


def field_outcome(rule: Rule, ok: bool, lang: Optional[str]) -> Outcome:
    """Build the outcome for a validated field, resolving its message."""
    return Outcome(
        kind=rule.kind,
        ok=ok,
        message=resolve_message(rule.kind, ok, rule.success_message, rule.error_message, lang),
        id=rule.id,
    )
