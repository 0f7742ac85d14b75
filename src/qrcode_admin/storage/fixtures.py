"""Load QR code collections from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from qrcode_admin.models.qrcode import QRCode


class FixtureError(Exception):
    """Raised when a fixture file cannot be parsed into QR codes."""


def parse_codes(content: str, shop: str | None = None) -> list[QRCode]:
    """Parse a YAML document holding a list of QR codes (or ``{codes: [...]}``).

    When *shop* is given it fills in codes that do not name one.
    """
    try:
        raw: Any = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise FixtureError(f"Invalid YAML: {exc}") from exc
    if isinstance(raw, dict):
        raw = raw.get("codes")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise FixtureError("Expected a list of QR codes")
    codes: list[QRCode] = []
    for i, item in enumerate(raw):
        if shop and isinstance(item, dict):
            item = {"shop": shop} | item
        try:
            codes.append(QRCode.model_validate(item))
        except PydanticValidationError as exc:
            raise FixtureError(f"QR code #{i}: {exc}") from exc
    return codes


def load_codes(path: str | Path, shop: str | None = None) -> list[QRCode]:
    return parse_codes(Path(path).read_text(encoding="utf-8"), shop=shop)
