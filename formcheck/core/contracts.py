"""
Contracts — Calling shape shared by every field-kind handler.
"""

from typing import Optional, Protocol

from formcheck.core.result import Checked
from formcheck.schema.models import Outcome, Rule


class Handler(Protocol):
    """
    Protocol for field-kind handlers.

    A handler is a pure function of the rule and the requested message
    language. It returns Ok(outcome), or TypeMismatch when the rule's
    value has the wrong Python type. It should not raise, but the
    dispatcher contains it if it does.
    """

    def __call__(self, rule: Rule, lang: Optional[str] = None) -> Checked[Outcome]:
        ...
