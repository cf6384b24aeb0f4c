"""
Message Loader — Load the localized outcome message catalog from YAML.

The catalog maps kind -> valid/invalid -> language -> text. It is read
once from package data, validated, frozen and cached.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import yaml

from formcheck.core.errors import CatalogError
from formcheck.core.logging import LogChannel, get_logger
from formcheck.schema.enums import MessageKey

log = get_logger(LogChannel.MESSAGES)

CATALOG_PATH = Path(__file__).parent / "catalog.yaml"

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class MessageCatalog:
    """Read-only message tables."""

    version: str
    default_language: str
    languages: tuple[str, ...]
    kinds: Mapping[str, Mapping[str, Mapping[str, str]]]

    def get(self, kind: str, key: Union[MessageKey, str], lang: Optional[str] = None) -> Optional[str]:
        """
        Look up a default message.

        Unknown languages fall back to the catalog's default language.
        Kinds without an entry (e.g. the sanitizers) yield None.
        """
        texts = self.kinds.get(kind)
        if texts is None:
            return None
        key = MessageKey(key).value
        lang = lang if lang in self.languages else self.default_language
        return texts[key][lang]


def parse_catalog(data: dict[str, Any]) -> MessageCatalog:
    """
    Parse and check a catalog document.

    Raises:
        CatalogError: If a kind lacks a valid/invalid text for a language
    """
    if not isinstance(data, dict) or not isinstance(data.get("kinds"), dict):
        raise CatalogError("Message catalog must be a mapping with a 'kinds' section")

    default_language = data.get("default_language", DEFAULT_LANGUAGE)
    languages = tuple(data.get("languages", [default_language]))
    if default_language not in languages:
        raise CatalogError(f"Default language '{default_language}' not in {list(languages)}")

    kinds = {}
    for kind, texts in data["kinds"].items():
        frozen_texts = {}
        for key in MessageKey:
            per_lang = (texts or {}).get(key.value) or {}
            missing = [lang for lang in languages if not per_lang.get(lang)]
            if missing:
                raise CatalogError(f"Kind '{kind}' has no '{key.value}' text for: {', '.join(missing)}")
            frozen_texts[key.value] = MappingProxyType({lang: str(per_lang[lang]) for lang in languages})
        kinds[kind] = MappingProxyType(frozen_texts)

    return MessageCatalog(
        version=str(data.get("version", "1.0")),
        default_language=default_language,
        languages=languages,
        kinds=MappingProxyType(kinds),
    )


def load_catalog(path: Union[str, Path, None] = None) -> MessageCatalog:
    """
    Load a message catalog from a YAML file.

    Args:
        path: Catalog file (default: the bundled catalog.yaml)

    Raises:
        FileNotFoundError: If the file doesn't exist
        CatalogError: If the catalog is malformed
    """
    path = Path(path) if path is not None else CATALOG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Message catalog not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    catalog = parse_catalog(data)
    log.debug("catalog_loaded", kinds=len(catalog.kinds), languages=list(catalog.languages))
    return catalog


_cache: dict[str, MessageCatalog] = {}


def get_catalog(use_cache: bool = True) -> MessageCatalog:
    """Get the bundled catalog, using the cache by default."""
    if use_cache and "default" in _cache:
        return _cache["default"]

    catalog = load_catalog()
    _cache["default"] = catalog
    return catalog


def clear_cache() -> None:
    """Clear the catalog cache."""
    _cache.clear()


def get_message(kind: str, key: Union[MessageKey, str], lang: Optional[str] = DEFAULT_LANGUAGE) -> Optional[str]:
    """Default catalog text for a kind, or None if the kind has none."""
    return get_catalog().get(kind, key, lang)


def resolve_message(
    kind: str,
    ok: bool,
    success_message: Optional[str],
    error_message: Optional[str],
    lang: Optional[str],
) -> Optional[str]:
    """
    Pick the message for an outcome.

    A caller-supplied message always wins. Without one, the catalog
    text is used only when a language was requested.
    """
    override = success_message if ok else error_message
    if override is not None:
        return override
    if lang is None:
        return None
    return get_message(kind, MessageKey.VALID if ok else MessageKey.INVALID, lang)
