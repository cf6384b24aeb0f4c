"""
Models — Pydantic models for rules and outcomes.

A Rule asks for one value to be validated or sanitized.
An Outcome is the answer, one per rule, in the same order.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Rule(BaseModel):
    """One caller-supplied request to validate or sanitize a value."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str = Field(..., description="Field kind selecting the handler (case-sensitive)")
    value: Any = Field(default=None, description="Raw candidate value")
    required: bool = Field(
        default=False,
        description="Only meaningful to handlers that treat false/absent specially (checkbox)",
    )
    success_message: Optional[str] = Field(
        default=None,
        alias="successMessage",
        description="Echoed back verbatim when the rule passes",
    )
    error_message: Optional[str] = Field(
        default=None,
        alias="errorMessage",
        description="Echoed back verbatim when the rule fails",
    )
    id: Optional[str] = Field(default=None, description="Caller's field identifier, echoed back")

    @field_validator("required", mode="before")
    @classmethod
    def _null_required_is_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Optional[str]:
        # Form libraries often use numeric field ids
        return None if v is None else str(v)


class Outcome(BaseModel):
    """Result of one rule."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Kind exactly as given on the rule")
    ok: bool = Field(..., description="Whether the value passed")
    message: Optional[str] = Field(default=None, description="Success or error text to render")
    code: Optional[str] = Field(
        default=None,
        description="Failure code (per-kind code or 'unknown-kind'); absent on success",
    )
    id: Optional[str] = Field(default=None, description="Echo of the rule's id")
    value: Optional[str] = Field(
        default=None,
        description="Cleaned text from the string/html sanitizers",
    )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict without absent fields."""
        return self.model_dump(exclude_none=True)
