"""QR code editor workflow: validation, save, delete and product selection.

Store calls are the only suspension points.  While one is in flight the
editor is busy and refuses to start another save or delete.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from qrcode_admin.models.color import ColorHSV
from qrcode_admin.models.errors import Notice, NoticeLevel
from qrcode_admin.models.qrcode import QRCode
from qrcode_admin.service.form_state import ColorSlot, FormStateTracker
from qrcode_admin.service.product_picker import ProductPicker
from qrcode_admin.service.validation import ValidationError, ensure_valid
from qrcode_admin.settings import Settings
from qrcode_admin.storage.repository import ResourceStore, StoreError

logger = logging.getLogger("qrcode_admin.editor")


class ActionInProgressError(Exception):
    """Raised when a save or delete starts while another one is running."""


class EditorState(StrEnum):
    IDLE = "idle"
    SAVING = "saving"
    DELETING = "deleting"


class CodeEditor:
    """Edits one QR code against a :class:`ResourceStore`."""

    def __init__(
        self,
        store: ResourceStore,
        code: QRCode | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._store = store
        self.code = code or QRCode(shop=self._settings.shop)
        self.form = FormStateTracker.from_code(self.code)
        self.errors: dict[str, str] = {}
        self.notices: list[Notice] = []
        self.state = EditorState.IDLE
        self.deleted = False

    @classmethod
    async def load(
        cls, store: ResourceStore, code_id: int | None, settings: Settings | None = None
    ) -> CodeEditor:
        """Open an existing code, or a blank one when *code_id* is None."""
        code = await store.fetch_one(code_id) if code_id is not None else None
        return cls(store, code, settings)

    # -- derived state -------------------------------------------------------

    @property
    def is_new(self) -> bool:
        return self.code.id is None

    @property
    def is_dirty(self) -> bool:
        return self.form.is_dirty()

    @property
    def can_save(self) -> bool:
        return self.is_dirty and self.state == EditorState.IDLE

    @property
    def can_delete(self) -> bool:
        return not self.is_new and not self.deleted and self.state == EditorState.IDLE

    @property
    def public_url(self) -> str | None:
        if self.is_new:
            return None
        return f"{self._settings.app_url.rstrip('/')}/qrcodes/{self.code.id}"

    # -- edits ---------------------------------------------------------------

    def set_field(self, key: str, value: object) -> None:
        self.form.set_field(key, value)

    def set_color(self, which: ColorSlot, color: ColorHSV) -> None:
        self.form.set_color(which, color)

    async def pick_product(self, picker: ProductPicker) -> bool:
        """Replace the product fields with the picker's choice.

        Returns False, leaving the form untouched, when the user cancels.
        """
        product = await picker.pick()
        if product is None:
            return False
        self.form.set_fields(**product.form_values())
        return True

    # -- store actions -------------------------------------------------------

    async def save(self) -> QRCode | None:
        """Validate and persist the form.

        Returns the saved code, or None when validation or the store failed
        (see :attr:`errors` and :attr:`notices`).
        """
        self._ensure_idle("save")
        try:
            ensure_valid(self.form.payload())
        except ValidationError as exc:
            self.errors = exc.errors
            logger.info("Save blocked by validation: %s", ", ".join(exc.errors))
            return None
        self.errors = {}

        # Edits made while the store call is pending stay dirty
        submitted = self.form.current
        candidate = self.form.apply_to(self.code)
        self.state = EditorState.SAVING
        try:
            if self.is_new:
                saved = await self._store.create(candidate)
            else:
                saved = await self._store.update(self.code.id, candidate)
        except StoreError as exc:
            logger.warning("Saving QR code %s failed: %s", self.code.id, exc)
            self._notify(NoticeLevel.ERROR, f"Could not save QR code: {exc}")
            return None
        finally:
            self.state = EditorState.IDLE

        created = self.is_new
        self.code = saved
        self.form.commit(submitted)
        logger.info("Saved QR code %s", saved.id)
        self._notify(NoticeLevel.INFO, "QR code created" if created else "QR code updated")
        return saved

    async def delete(self) -> bool:
        """Delete the persisted code.  Returns False when the store failed."""
        self._ensure_idle("delete")
        if self.is_new or self.deleted:
            raise ValueError("Only a saved QR code can be deleted")

        self.state = EditorState.DELETING
        try:
            await self._store.delete(self.code.id)
        except StoreError as exc:
            logger.warning("Deleting QR code %s failed: %s", self.code.id, exc)
            self._notify(NoticeLevel.ERROR, f"Could not delete QR code: {exc}")
            return False
        finally:
            self.state = EditorState.IDLE

        self.deleted = True
        logger.info("Deleted QR code %s", self.code.id)
        self._notify(NoticeLevel.INFO, "QR code deleted")
        return True

    # -- internal ------------------------------------------------------------

    def _ensure_idle(self, action: str) -> None:
        if self.state != EditorState.IDLE:
            raise ActionInProgressError(f"Cannot {action} while {self.state.value}")

    def _notify(self, level: NoticeLevel, message: str) -> None:
        self.notices.append(Notice(level=level, message=message))
