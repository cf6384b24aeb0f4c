"""Messages — Localized default outcome texts."""

from formcheck.messages.loader import (
    DEFAULT_LANGUAGE,
    MessageCatalog,
    get_catalog,
    get_message,
    load_catalog,
    resolve_message,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "MessageCatalog",
    "get_catalog",
    "get_message",
    "load_catalog",
    "resolve_message",
]
