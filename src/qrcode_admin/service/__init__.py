"""Listing and editor state for QR Code Admin."""

from qrcode_admin.service.editor import ActionInProgressError, CodeEditor, EditorState
from qrcode_admin.service.filters import FilterCriterion, FilterSet, RangeCriterion, TextCriterion
from qrcode_admin.service.form_state import FormStateTracker
from qrcode_admin.service.listing import ListingState
from qrcode_admin.service.projector import project
from qrcode_admin.service.views import IndexOutOfRangeError, LastViewError, ViewRegistry

__all__ = [
    "ActionInProgressError",
    "CodeEditor",
    "EditorState",
    "FilterCriterion",
    "FilterSet",
    "FormStateTracker",
    "IndexOutOfRangeError",
    "LastViewError",
    "ListingState",
    "RangeCriterion",
    "TextCriterion",
    "ViewRegistry",
    "project",
]
