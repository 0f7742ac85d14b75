"""Unit tests for hex <-> HSV colour conversion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from qrcode_admin.models.color import BACKGROUND_DEFAULT, FOREGROUND_DEFAULT, ColorHSV
from qrcode_admin.service.color_bridge import InvalidColorError, normalize_hex, to_hex, to_hsv


class TestToHsv:
    def test_pure_red(self) -> None:
        color = to_hsv("#ff0000")
        assert color.hue == pytest.approx(0)
        assert color.saturation == pytest.approx(1)
        assert color.brightness == pytest.approx(1)
        assert color.alpha == 1

    def test_pure_green_hue_in_degrees(self) -> None:
        assert to_hsv("#00ff00").hue == pytest.approx(120)

    def test_grey_has_zero_hue_and_saturation(self) -> None:
        color = to_hsv("#808080")
        assert color.hue == 0
        assert color.saturation == 0
        assert color.brightness == pytest.approx(128 / 255)

    def test_empty_input_returns_foreground_default(self) -> None:
        assert to_hsv(None) == FOREGROUND_DEFAULT
        assert to_hsv("") == FOREGROUND_DEFAULT
        assert to_hsv("   ") == FOREGROUND_DEFAULT

    def test_empty_input_returns_given_default(self) -> None:
        assert to_hsv(None, BACKGROUND_DEFAULT).brightness == 1

    def test_short_form_and_missing_hash(self) -> None:
        assert to_hsv("#f00") == to_hsv("ff0000")

    def test_alpha_channel_is_ignored(self) -> None:
        assert to_hsv("#00ff0080") == to_hsv("#00ff00")

    def test_uppercase_accepted(self) -> None:
        assert to_hsv("#ABCDEF") == to_hsv("#abcdef")

    @pytest.mark.parametrize("value", ["red", "#12345", "#gggggg", "rgb(1,2,3)"])
    def test_invalid_colour_raises(self, value: str) -> None:
        with pytest.raises(InvalidColorError, match="Not a hex colour"):
            to_hsv(value)

    def test_invalid_colour_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            to_hsv("nope")


class TestToHex:
    def test_always_six_digits_lowercase(self) -> None:
        assert to_hex(ColorHSV(hue=0, saturation=0, brightness=0)) == "#000000"
        assert to_hex(ColorHSV(hue=0, saturation=0, brightness=1)) == "#ffffff"
        assert to_hex(ColorHSV(hue=240, saturation=1, brightness=1)) == "#0000ff"

    def test_alpha_is_not_emitted(self) -> None:
        translucent = ColorHSV(hue=120, saturation=1, brightness=1, alpha=0.25)
        assert to_hex(translucent) == "#00ff00"

    def test_fractional_channels_round_to_nearest(self) -> None:
        # 0.5 * 255 = 127.5 rounds to 128 (0x80)
        assert to_hex(ColorHSV(hue=0, saturation=0, brightness=0.5)) == "#808080"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "value",
        ["#000000", "#ffffff", "#1a2b3c", "#ff8800", "#7f7f7f", "#010203", "#fe01fd", "#c0ffee"],
    )
    def test_hex_survives_round_trip(self, value: str) -> None:
        assert to_hex(to_hsv(value)) == value

    def test_round_trip_from_hsv(self) -> None:
        # Any hex produced by to_hex is a fixed point of the conversion
        produced = to_hex(ColorHSV(hue=201.7, saturation=0.37, brightness=0.61))
        assert to_hex(to_hsv(produced)) == produced

    def test_normalize_hex(self) -> None:
        assert normalize_hex("#ABC") == "#aabbcc"
        assert normalize_hex("C0FFEE80") == "#c0ffee"


class TestColorModel:
    def test_hue_must_be_below_360(self) -> None:
        with pytest.raises(ValidationError):
            ColorHSV(hue=360)

    def test_saturation_range(self) -> None:
        with pytest.raises(ValidationError):
            ColorHSV(saturation=1.5)

    def test_structural_equality(self) -> None:
        assert ColorHSV(hue=10, saturation=0.5, brightness=0.5) == ColorHSV(
            hue=10, saturation=0.5, brightness=0.5
        )

    def test_alpha_is_forced_opaque(self) -> None:
        assert ColorHSV(hue=10, alpha=0.3).alpha == 1
        assert ColorHSV(hue=10, alpha=0.3) == ColorHSV(hue=10)

    def test_alpha_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ColorHSV(alpha=2)
