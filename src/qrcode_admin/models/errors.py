"""User-facing notices raised by the editor."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class NoticeLevel(StrEnum):
    INFO = "info"
    ERROR = "error"


class Notice(BaseModel):
    """A non-blocking message shown to the user (toast/banner)."""

    level: NoticeLevel
    message: str
