"""Lit and unlit colours a display paints with."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from segdisplay.utils.palette import COLOUR_NAMES, parse_colour

Colour = Annotated[int, BeforeValidator(parse_colour)]


class StyleValues(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    lit: Colour = Field(default=COLOUR_NAMES["red"], description="Colour of lit segments")
    unlit: Colour = Field(default=16 + 36, description="Colour of unlit segments")
