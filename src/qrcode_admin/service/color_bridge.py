"""Hex <-> HSV conversion between the persisted colours and the pickers.

The store keeps colours as ``#rrggbb``; the pickers edit hue (degrees),
saturation and brightness.  Both directions are pure.  Encoding rounds each
channel to the nearest 8-bit value, so any hex string produced by
:func:`to_hex` survives ``to_hex(to_hsv(h)) == h`` exactly.
"""

from __future__ import annotations

import colorsys
import re

from qrcode_admin.models.color import FOREGROUND_DEFAULT, ColorHSV

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class InvalidColorError(ValueError):
    """Raised when a colour string is not a hex colour."""


def _parse_rgb(value: str) -> tuple[int, int, int]:
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise InvalidColorError(f"Not a hex colour: '{value}'")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    # An alpha pair (rrggbbaa) is ignored
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_hsv(value: str | None, default: ColorHSV = FOREGROUND_DEFAULT) -> ColorHSV:
    """Convert a hex colour to HSV.  Empty or missing input yields *default*.

    Greys have no hue; they come back with hue 0.
    """
    if not value or not value.strip():
        return default
    r, g, b = _parse_rgb(value)
    h, s, v = colorsys.rgb_to_hsv(r / 255, g / 255, b / 255)
    return ColorHSV(hue=(h * 360) % 360, saturation=s, brightness=v)


def to_hex(color: ColorHSV) -> str:
    """Encode an HSV colour as ``#rrggbb`` (lower-case, alpha dropped)."""
    r, g, b = colorsys.hsv_to_rgb(color.hue / 360, color.saturation, color.brightness)
    return "#{:02x}{:02x}{:02x}".format(*(_channel(c) for c in (r, g, b)))


def _channel(component: float) -> int:
    return max(0, min(255, round(component * 255)))


def normalize_hex(value: str) -> str:
    """Return *value* in the canonical ``#rrggbb`` form."""
    return "#{:02x}{:02x}{:02x}".format(*_parse_rgb(value))
