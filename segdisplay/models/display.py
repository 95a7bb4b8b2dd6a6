"""Display kind and construction options."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field, field_validator


class DisplayKind(enum.Enum):
    SEVEN = "seven"
    SEVEN_DP = "seven_dp"
    COLON = "colon"
    SYMBOL = "symb"

    @classmethod
    def from_name(cls, name: str) -> DisplayKind:
        """Resolve a case-exact type name or legacy alias."""
        for kind in cls:
            if name == kind.value:
                return kind
        alias = _ALIASES.get(name)
        if alias is None:
            raise ValueError(f"Unrecognised type name {name!r}")
        return alias


_ALIASES: dict[str, DisplayKind] = {
    "7": DisplayKind.SEVEN,
    "7.": DisplayKind.SEVEN_DP,
    ":": DisplayKind.COLON,
}


class DisplayOptions(BaseModel):
    type: str = Field(default="seven", description="Display type name or alias")
    value: str = Field(default="", description="Initial character on display")

    @field_validator("type")
    @classmethod
    def _known_type(cls, v: str) -> str:
        DisplayKind.from_name(v)
        return v

    @property
    def kind(self) -> DisplayKind:
        return DisplayKind.from_name(self.type)
