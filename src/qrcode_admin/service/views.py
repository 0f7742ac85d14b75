"""Ordered registry of named listing views with a selected index."""

from __future__ import annotations

import logging

from qrcode_admin.models.listing import View
from qrcode_admin.settings import Settings

logger = logging.getLogger("qrcode_admin.views")


class IndexOutOfRangeError(IndexError):
    """Raised when a view index is outside ``[0, len(views))``."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"View index {index} out of range (0..{length - 1})")


class LastViewError(Exception):
    """Raised when deleting the only remaining view."""


class ViewRegistry:
    """Views in display order plus the index of the selected one.

    Structural changes re-map the selection so it keeps pointing at the same
    logical view; only deleting the selected view moves it (to the previous
    entry).  The registry is never empty.
    """

    def __init__(
        self, names: list[str] | tuple[str, ...] | None = None, selected: int = 0
    ) -> None:
        if names is None:
            names = Settings().default_views
        if not names:
            raise ValueError("A view registry needs at least one view")
        self._views: list[View] = [View(name=name) for name in names]
        self._selected = 0
        self.select(selected)

    # -- state ---------------------------------------------------------------

    @property
    def views(self) -> list[View]:
        return list(self._views)

    @property
    def names(self) -> list[str]:
        return [view.name for view in self._views]

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected(self) -> View:
        return self._views[self._selected]

    def __len__(self) -> int:
        return len(self._views)

    # -- operations ----------------------------------------------------------

    def create(self, name: str) -> View:
        view = View(name=name)
        self._views.append(view)
        return view

    def rename(self, index: int, new_name: str) -> None:
        self._check_index(index)
        self._views[index] = View(name=new_name)

    def duplicate(self, index: int) -> View:
        """Insert ``"<name> (copy)"`` right after *index*."""
        self._check_index(index)
        copy = View(name=f"{self._views[index].name} (copy)")
        self._views.insert(index + 1, copy)
        if self._selected > index:
            self._selected += 1
        return copy

    def delete(self, index: int) -> View:
        self._check_index(index)
        if len(self._views) == 1:
            raise LastViewError("Cannot delete the only remaining view")
        removed = self._views.pop(index)
        if self._selected == index:
            self._selected = max(0, index - 1)
        elif self._selected > index:
            self._selected -= 1
        logger.debug("Deleted view '%s' (selected index now %d)", removed.name, self._selected)
        return removed

    def select(self, index: int) -> None:
        self._check_index(index)
        self._selected = index

    # -- internal ------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than counted from the end
        if not 0 <= index < len(self._views):
            raise IndexOutOfRangeError(index, len(self._views))
