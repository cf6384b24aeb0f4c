"""
Serialization — JSON/YAML import and export for rules and outcomes.
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml

from formcheck.schema.models import Outcome


def outcomes_to_json(outcomes: list[Outcome], indent: int = 2) -> str:
    """Serialize outcomes to a JSON array, dropping absent fields."""
    return json.dumps([o.to_dict() for o in outcomes], indent=indent, ensure_ascii=False)


def outcomes_from_json(json_str: str) -> list[Outcome]:
    """Deserialize outcomes from a JSON array."""
    return [Outcome.model_validate(item) for item in json.loads(json_str)]


def parse_rules(text: str) -> list[Any]:
    """
    Parse a rule batch from YAML or JSON text.

    Accepts either a top-level list or a mapping with a ``rules`` list.
    Items are returned as-is; the dispatcher copes with malformed ones.

    Raises:
        ValueError: If the document is not a rule list
    """
    data = yaml.safe_load(text)
    if isinstance(data, dict):
        data = data.get("rules")
    if not isinstance(data, list):
        raise ValueError("Expected a list of rules (or a mapping with a 'rules' list)")
    return data


def load_rules(path: Union[str, Path]) -> list[Any]:
    """Load a rule batch from a YAML or JSON file."""
    return parse_rules(Path(path).read_text(encoding="utf-8"))
