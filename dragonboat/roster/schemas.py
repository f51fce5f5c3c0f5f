"""
roster/schemas.py - Pydantic models for roster input

The roster lives in an external collaborator. These models validate the rows
it hands over and convert them to the Athlete values the core works with.
Only id and weight_kg matter for balance; the rest is display data.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.dataclasses import Athlete
from ..core.utils import coerce_weight_kg
from ..errors.taxonomy import ErrorCode, InvalidLineupError


class RosterMember(BaseModel):
    """One roster row as supplied by the roster collaborator."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Member id")
    full_name: str = Field(default="", description="Display name")
    weight_kg: float = Field(default=0.0, ge=0.0, description="Weight in kilograms")
    gender: Optional[str] = Field(default=None, description="Free-text gender")
    preferred_side: Optional[str] = Field(default=None, description="Preferred paddling side")
    is_active: bool = Field(default=True, description="Eligible for the lineup pool")

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v):
        # Roster ids arrive as uuids or integers
        if isinstance(v, (int, str)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("full_name", mode="before")
    @classmethod
    def validate_full_name(cls, v):
        return "" if v is None else v

    @field_validator("weight_kg", mode="before")
    @classmethod
    def validate_weight(cls, v):
        return coerce_weight_kg(v)

    @field_validator("is_active", mode="before")
    @classmethod
    def validate_is_active(cls, v):
        return False if v is None else v

    def to_athlete(self) -> Athlete:
        return Athlete(
            id=self.id,
            name=self.full_name,
            weight_kg=self.weight_kg,
            gender=self.gender,
            preferred_side=self.preferred_side,
            is_active=self.is_active,
        )


def parse_roster(rows: Iterable[Dict[str, Any]]) -> List[Athlete]:
    """
    Validate raw roster rows and convert them to athletes.

    Raises:
        InvalidLineupError: If a row is structurally invalid (e.g. no id).
    """
    athletes = []
    for position, row in enumerate(rows):
        try:
            member = RosterMember.model_validate(row)
        except ValidationError as e:
            raise InvalidLineupError(
                f"Invalid roster row {position}: {e.errors()[0]['msg']}",
                ErrorCode.ROSTER_INVALID,
            ) from e
        athletes.append(member.to_athlete())
    return athletes
