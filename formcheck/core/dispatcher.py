"""
Dispatcher — Batch orchestration of field handlers.

The dispatcher resolves each rule's kind against a read-only registry,
runs the handler inside a fault boundary and returns one outcome per
rule, in order.

Single validator calls are strict and may raise. validate() is total:
only a non-sequence `rules` argument raises.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Optional

from formcheck.core.contracts import Handler
from formcheck.core.logging import BatchLogger
from formcheck.core.result import Ok, TypeMismatch
from formcheck.messages.loader import resolve_message
from formcheck.sanitizers.common import handle_html, handle_string
from formcheck.schema.enums import ErrorCode, FieldKind
from formcheck.schema.models import Outcome, Rule
from formcheck.validators.base import as_rule
from formcheck.validators.checkbox_input import handle_checkbox_input
from formcheck.validators.email_address import handle_email_address
from formcheck.validators.phone_number import handle_phone_number
from formcheck.validators.proper_name import handle_proper_name


# Registered handlers; keys are case-sensitive and never normalized
HANDLERS: Mapping[str, Handler] = MappingProxyType({
    FieldKind.PROPER_NAME.value: handle_proper_name,
    FieldKind.EMAIL_ADDRESS.value: handle_email_address,
    FieldKind.PHONE_NUMBER.value: handle_phone_number,
    FieldKind.CHECKBOX_INPUT.value: handle_checkbox_input,
    FieldKind.STRING.value: handle_string,
    FieldKind.HTML.value: handle_html,
})

ERROR_CODES: Mapping[str, str] = MappingProxyType({
    FieldKind.PROPER_NAME.value: ErrorCode.INVALID_PROPER_NAME.value,
    FieldKind.EMAIL_ADDRESS.value: ErrorCode.INVALID_EMAIL_ADDRESS.value,
    FieldKind.PHONE_NUMBER.value: ErrorCode.INVALID_PHONE_NUMBER.value,
    FieldKind.CHECKBOX_INPUT.value: ErrorCode.INVALID_CHECKBOX_INPUT.value,
    FieldKind.STRING.value: ErrorCode.INVALID_STRING.value,
    FieldKind.HTML.value: ErrorCode.INVALID_HTML.value,
})


def _kind_of(item: Any) -> str:
    """Kind of a raw rule item; "" when it cannot be read."""
    if isinstance(item, Rule):
        return item.kind
    if isinstance(item, Mapping):
        kind = item.get("kind")
        return "" if kind is None else str(kind)
    return ""


def _read_field(item: Any, attr: str, key: str) -> Optional[str]:
    """Best-effort read of a string field from a Rule or mapping."""
    if isinstance(item, Rule):
        return getattr(item, attr)
    if isinstance(item, Mapping):
        value = item.get(key, item.get(attr))
        return value if isinstance(value, str) else None
    return None


def _read_id(item: Any) -> Optional[str]:
    """Rule id as text, matching Rule's own coercion."""
    if isinstance(item, Rule):
        return item.id
    if isinstance(item, Mapping) and item.get("id") is not None:
        return str(item["id"])
    return None


class Dispatcher:
    """
    Field-kind dispatcher.

    Holds a read-only handler registry and kind -> failure code table.
    Every registered kind must have a failure code.
    """

    def __init__(
        self,
        handlers: Optional[Mapping[str, Handler]] = None,
        codes: Optional[Mapping[str, str]] = None,
    ) -> None:
        handlers = dict(HANDLERS if handlers is None else handlers)
        codes = dict(ERROR_CODES if codes is None else codes)

        missing = sorted(kind for kind in handlers if kind not in codes)
        if missing:
            raise ValueError(f"No failure code registered for kinds: {', '.join(missing)}")
        if ErrorCode.UNKNOWN_KIND.value in codes.values():
            raise ValueError(f"'{ErrorCode.UNKNOWN_KIND.value}' is reserved for unregistered kinds")

        self._handlers: Mapping[str, Handler] = MappingProxyType(handlers)
        self._codes: Mapping[str, str] = MappingProxyType(codes)

    @property
    def handlers(self) -> Mapping[str, Handler]:
        return self._handlers

    @property
    def codes(self) -> Mapping[str, str]:
        return self._codes

    def kinds(self) -> list[str]:
        """List registered kinds."""
        return list(self._handlers.keys())

    def extend(
        self,
        handlers: Mapping[str, Handler],
        codes: Optional[Mapping[str, str]] = None,
    ) -> "Dispatcher":
        """
        Return a new dispatcher with additional (or replaced) kinds.

        This dispatcher is left unchanged.
        """
        return Dispatcher(
            handlers={**self._handlers, **handlers},
            codes={**self._codes, **(codes or {})},
        )

    def validate(self, rules: Sequence[Any], lang: Optional[str] = None) -> list[Outcome]:
        """
        Validate a batch of rules into outcomes.

        Args:
            rules: Sequence of Rule objects or rule mappings
            lang: Language for built-in default messages; None means
                only caller-supplied messages are returned

        Returns:
            One Outcome per rule, in input order

        Raises:
            TypeError: If rules is not a sequence
        """
        if isinstance(rules, (str, bytes, bytearray)) or not isinstance(rules, Sequence):
            raise TypeError("rules must be a sequence of rule objects")

        blog = BatchLogger(len(rules))
        outcomes = [self._dispatch(i, item, lang, blog) for i, item in enumerate(rules)]
        blog.complete()
        return outcomes

    async def validate_async(self, rules: Sequence[Any], lang: Optional[str] = None) -> list[Outcome]:
        """Awaitable form of validate(); does the same synchronous work."""
        return self.validate(rules, lang)

    def _failed(self, item: Any, kind: str, code: str, lang: Optional[str]) -> Outcome:
        error_message = _read_field(item, "error_message", "errorMessage")
        return Outcome(
            kind=kind,
            ok=False,
            message=resolve_message(kind, False, None, error_message, lang),
            code=code,
            id=_read_id(item),
        )

    def _dispatch(self, index: int, item: Any, lang: Optional[str], blog: BatchLogger) -> Outcome:
        kind = _kind_of(item)
        handler = self._handlers.get(kind)

        if handler is None:
            blog.unknown_kind(index, kind)
            return self._failed(item, kind, ErrorCode.UNKNOWN_KIND.value, lang)

        code = self._codes[kind]
        try:
            rule = as_rule(item)
            result = handler(rule, lang)
            if isinstance(result, TypeMismatch):
                blog.type_mismatch(index, kind, result.expected, result.got)
                return self._failed(rule, kind, code, lang)
            if not (isinstance(result, Ok) and isinstance(result.value, Outcome)):
                raise TypeError(f"Handler for '{kind}' returned {type(result).__name__}, expected Ok(Outcome)")
        except Exception as e:
            blog.handler_error(index, kind, e)
            return self._failed(item, kind, code, lang)

        outcome = result.value
        if outcome.ok:
            return outcome.model_copy(update={"code": None})

        blog.rejected(index, kind, code)
        return outcome.model_copy(update={"code": code})


# Global dispatcher instance
_dispatcher: Optional[Dispatcher] = None


def get_dispatcher() -> Dispatcher:
    """Get or create the default dispatcher."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher()
    return _dispatcher


def validate(rules: Sequence[Any], lang: Optional[str] = None) -> list[Outcome]:
    """
    Convenience function: validate a batch with the default dispatcher.

    Example::

        outcomes = validate([
            {"kind": "properName", "value": "Jean-Luc", "successMessage": "OK"},
            {"kind": "emailAddress", "value": "bad@", "errorMessage": "Email"},
        ])
        # [{'kind': 'properName', 'ok': True, 'message': 'OK'},
        #  {'kind': 'emailAddress', 'ok': False, 'message': 'Email',
        #   'code': 'invalid-email-address'}]
    """
    return get_dispatcher().validate(rules, lang)


async def validate_async(rules: Sequence[Any], lang: Optional[str] = None) -> list[Outcome]:
    """Awaitable form of validate()."""
    return get_dispatcher().validate(rules, lang)
