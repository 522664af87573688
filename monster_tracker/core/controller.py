from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from .dialogs import DialogService
from .errors import ValidationError
from .store import MonsterStore


@dataclass
class FormState:
    name: str = ""
    life: str = ""
    amount: str = ""

    def clear(self, *names: str) -> List[str]:
        cleared = []
        for field_name in names:
            setattr(self, field_name, "")
            cleared.append(field_name)
        return cleared

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


class MonsterController(QObject):
    """
    Event-driven logic behind the tracker window.

    Handlers read the current form texts, validate them through the store and
    report the outcome on a single status line. The selection is the only
    thing that decides whether apply, remove and clone are available.
    """

    store_changed = Signal(list)
    selection_changed = Signal(object)
    actions_enabled_changed = Signal(bool)
    status_changed = Signal(str)
    form_reset = Signal(list)
    log_emitted = Signal(str)

    CLEAR_TITLE = "Confirmation"
    CLEAR_QUESTION = "Do you want to remove all monsters?"
    CLONE_TITLE = "Clone monster"
    CLONE_LABEL = "Enter new name for the cloned monster:"
    CLONE_CANCELED = "Clone canceled or invalid name."

    def __init__(
        self,
        dialogs: Optional[DialogService] = None,
        store: Optional[MonsterStore] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._dialogs = dialogs
        self._store = store if store is not None else MonsterStore()
        self._form = FormState()
        self._selection: Optional[int] = None
        self._status = ""

    @property
    def store(self) -> MonsterStore:
        return self._store

    @property
    def form(self) -> FormState:
        return self._form

    @property
    def selection(self) -> Optional[int]:
        return self._selection

    @property
    def actions_enabled(self) -> bool:
        return self._selection is not None

    @property
    def status(self) -> str:
        return self._status

    @property
    def dialogs(self) -> Optional[DialogService]:
        return self._dialogs

    def set_dialogs(self, dialogs: DialogService) -> None:
        self._dialogs = dialogs

    def set_field(self, name: str, text: str) -> None:
        if name not in FormState.field_names():
            raise KeyError(name)
        setattr(self._form, name, text)

    def select(self, index: Optional[int]) -> None:
        if not self._store.is_valid_index(index):
            index = None
        self._set_selection(index)

    def clear_selection(self) -> None:
        self._set_selection(None)

    def create(self) -> bool:
        try:
            record = self._store.create(self._form.name, self._form.life)
        except ValidationError as exc:
            self._reject("create", exc)
            return False
        self._reset_fields("name", "life")
        self._set_selection(None)
        self._emit_store()
        self._set_status(f"Monster created: {record.name}")
        return True

    def apply(self) -> bool:
        index = self._selection
        if index is None:
            return False
        before = self._store[index].life
        try:
            record = self._store.adjust_life(index, self._form.amount)
        except ValidationError as exc:
            self._reject("apply", exc)
            return False
        delta = record.life - before
        self._reset_fields("amount")
        self._set_selection(None)
        self._emit_store()
        self._set_status(f"{record.name} life changed by {delta:+d} (now {record.life})")
        return True

    def remove(self) -> bool:
        index = self._selection
        if index is None:
            return False
        removed = self._store.remove(index)
        self._set_selection(None)
        self._emit_store()
        self._set_status(f"Monster removed: {removed.name}")
        return True

    def clear_list(self) -> bool:
        if self._store.is_empty:
            self._set_status("There are no monsters created.")
            return False
        if not self._require_dialogs().confirm(self.CLEAR_TITLE, self.CLEAR_QUESTION):
            self._set_status("Clear list canceled.")
            return False
        self._store.clear()
        self._set_selection(None)
        self._emit_store()
        self._set_status("All monsters have been removed.")
        return True

    def clone(self) -> bool:
        index = self._selection
        if index is None:
            return False
        source = self._store[index]
        new_name = self._require_dialogs().prompt_text(self.CLONE_TITLE, self.CLONE_LABEL)
        copied = self._store.clone(index, new_name)
        if copied is None:
            self._set_status(self.CLONE_CANCELED)
            return False
        self._set_selection(None)
        self._emit_store()
        self._set_status(f"{source.name} cloned to {copied.name}")
        return True

    def _set_selection(self, index: Optional[int]) -> None:
        if index == self._selection:
            return
        was_enabled = self.actions_enabled
        self._selection = index
        self.selection_changed.emit(index)
        if self.actions_enabled != was_enabled:
            self.actions_enabled_changed.emit(self.actions_enabled)

    def _set_status(self, text: str) -> None:
        self._status = text
        self.status_changed.emit(text)
        self.log_emitted.emit(text)

    def _reset_fields(self, *names: str) -> None:
        self.form_reset.emit(self._form.clear(*names))

    def _emit_store(self) -> None:
        self.store_changed.emit(self._store.lines())

    def _reject(self, action: str, exc: ValidationError) -> None:
        self.log_emitted.emit(f"{action} rejected: {exc.message}")
        self._require_dialogs().show_validation_error(exc.message)

    def _require_dialogs(self) -> DialogService:
        if self._dialogs is None:
            raise RuntimeError("no dialog service installed")
        return self._dialogs
