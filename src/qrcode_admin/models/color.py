"""HSV colour model edited by the colour pickers."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ColorHSV(BaseModel):
    """Hue/saturation/brightness colour as the pickers edit it.

    Alpha is always 1: translucent colours are not supported, so an alpha
    supplied by a picker is accepted and replaced by 1.
    """

    hue: float = Field(0.0, ge=0, lt=360)
    saturation: float = Field(0.0, ge=0, le=1)
    brightness: float = Field(0.0, ge=0, le=1)
    alpha: float = Field(1.0, ge=0, le=1)

    model_config = {"frozen": True}

    @field_validator("alpha")
    @classmethod
    def _opaque(cls, _value: float) -> float:
        return 1.0


FOREGROUND_DEFAULT = ColorHSV(hue=0, saturation=0, brightness=0)
BACKGROUND_DEFAULT = ColorHSV(hue=0, saturation=0, brightness=1)
