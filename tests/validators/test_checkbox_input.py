"""
Unit tests for the checkbox validator.
"""

import pytest

from formcheck.core.errors import FieldTypeError
from formcheck.schema import Rule
from formcheck.validators import is_checkbox_satisfied, validate_checkbox_input


class TestRequiredFlag:
    """Only required + unchecked fails."""

    @pytest.mark.parametrize("required,value,expected", [
        (True, False, False),
        (True, True, True),
        (False, False, True),
        (False, True, True),
    ])
    def test_truth_table(self, required, value, expected):
        """Verify every required/value combination."""
        assert is_checkbox_satisfied(value, required=required) is expected

    def test_not_required_by_default(self):
        """Verify required defaults to False."""
        assert is_checkbox_satisfied(False) is True


class TestStrictTypes:
    """The value must be a real bool."""

    @pytest.mark.parametrize("value", ["true", 1, 0, None, "on"])
    def test_non_bool_raises(self, value):
        """Verify FieldTypeError for truthy/falsy non-bools."""
        with pytest.raises(FieldTypeError, match="Checkbox value must be a boolean"):
            is_checkbox_satisfied(value, required=True)


class TestFieldDescriptor:
    """Tests for validate_checkbox_input() outcomes."""

    def test_required_unchecked(self):
        """Verify the failure text for an unchecked required box."""
        outcome = validate_checkbox_input(Rule(kind="checkboxInput", value=False, required=True))

        assert outcome.ok is False
        assert outcome.message == "This checkbox is required and must be checked."

    def test_required_checked_swedish(self):
        """Verify the Swedish success text."""
        outcome = validate_checkbox_input(
            {"kind": "checkboxInput", "value": True, "required": True},
            lang="sv",
        )

        assert outcome.ok is True
        assert outcome.message == "Kryssrutan är markerad."

    def test_success_override(self):
        """Verify successMessage wins."""
        outcome = validate_checkbox_input(
            {"kind": "checkboxInput", "value": True, "successMessage": "Thanks!"},
        )

        assert outcome.message == "Thanks!"
