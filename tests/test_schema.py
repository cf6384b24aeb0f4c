"""
Unit tests for rule/outcome models and serialization.
"""

import pytest
from pydantic import ValidationError

from formcheck.schema import (
    ErrorCode,
    FieldKind,
    Outcome,
    Rule,
    load_rules,
    outcomes_from_json,
    outcomes_to_json,
    parse_rules,
)


class TestRule:
    """Tests for the Rule model."""

    def test_camel_case_aliases(self):
        """Verify successMessage/errorMessage are accepted."""
        rule = Rule.model_validate({
            "kind": "properName",
            "value": "Kalle",
            "successMessage": "ok",
            "errorMessage": "bad",
        })

        assert rule.success_message == "ok"
        assert rule.error_message == "bad"

    def test_snake_case_names(self):
        """Verify field names work too."""
        rule = Rule(kind="properName", value="Kalle", error_message="bad")

        assert rule.error_message == "bad"

    def test_defaults(self):
        """Verify optional fields default sensibly."""
        rule = Rule(kind="string")

        assert rule.value is None
        assert rule.required is False
        assert rule.id is None

    def test_id_coerced_to_text(self):
        """Verify numeric ids become strings."""
        assert Rule.model_validate({"kind": "string", "id": 12}).id == "12"

    def test_null_required_is_false(self):
        """Verify required: null means not required."""
        assert Rule.model_validate({"kind": "checkboxInput", "required": None}).required is False

    def test_kind_required(self):
        """Verify a rule needs a kind."""
        with pytest.raises(ValidationError):
            Rule.model_validate({"value": "x"})

    def test_frozen(self):
        """Verify rules are immutable."""
        rule = Rule(kind="string", value="x")

        with pytest.raises(ValidationError):
            rule.value = "y"


class TestOutcome:
    """Tests for the Outcome model."""

    def test_to_dict_drops_absent_fields(self):
        """Verify None fields are omitted."""
        outcome = Outcome(kind="properName", ok=True)

        assert outcome.to_dict() == {"kind": "properName", "ok": True}

    def test_to_dict_keeps_present_fields(self):
        """Verify message and code survive."""
        outcome = Outcome(kind="emailAddress", ok=False, message="Email", code="invalid-email-address")

        assert outcome.to_dict() == {
            "kind": "emailAddress",
            "ok": False,
            "message": "Email",
            "code": "invalid-email-address",
        }


class TestEnums:
    """Kinds and codes are wire strings."""

    def test_kind_values(self):
        """Verify camelCase kind names."""
        assert FieldKind.EMAIL_ADDRESS == "emailAddress"
        assert FieldKind.CHECKBOX_INPUT.value == "checkboxInput"

    def test_code_values(self):
        """Verify kebab-case codes."""
        assert ErrorCode.UNKNOWN_KIND.value == "unknown-kind"
        assert ErrorCode.INVALID_PHONE_NUMBER.value == "invalid-phone-number"


class TestSerialization:
    """JSON/YAML helpers."""

    def test_outcomes_json_round_trip(self):
        """Verify outcomes survive a JSON round trip."""
        outcomes = [
            Outcome(kind="properName", ok=True, message="Nimi on kelvollinen.", id="n"),
            Outcome(kind="nope", ok=False, code="unknown-kind"),
        ]

        text = outcomes_to_json(outcomes)

        assert '"code"' in text
        assert "kelvollinen" in text
        assert outcomes_from_json(text) == outcomes

    def test_parse_rules_list(self):
        """Verify a top-level YAML list."""
        rules = parse_rules("- {kind: properName, value: Kalle}\n- {kind: html, value: '<'}\n")

        assert [r["kind"] for r in rules] == ["properName", "html"]

    def test_parse_rules_mapping(self):
        """Verify a mapping with a rules key."""
        rules = parse_rules('{"rules": [{"kind": "phoneNumber", "value": "+358401234567"}]}')

        assert rules[0]["value"] == "+358401234567"

    def test_phone_number_stays_text(self):
        """Verify a quoted phone number is not parsed as an int."""
        rules = parse_rules("- kind: phoneNumber\n  value: '+358401234567'\n")

        assert rules[0]["value"] == "+358401234567"

    @pytest.mark.parametrize("text", ["kind: properName", "42", ""])
    def test_parse_rules_rejects_non_list(self, text):
        """Verify documents without a rule list are rejected."""
        with pytest.raises(ValueError):
            parse_rules(text)

    def test_load_rules(self, tmp_path):
        """Verify loading from a file."""
        path = tmp_path / "rules.yaml"
        path.write_text("rules:\n  - kind: checkboxInput\n    value: true\n    required: true\n", encoding="utf-8")

        rules = load_rules(path)

        assert rules == [{"kind": "checkboxInput", "value": True, "required": True}]
