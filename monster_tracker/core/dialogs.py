from __future__ import annotations

from typing import Optional, Protocol


class DialogService(Protocol):
    """Modal dialogs the controller relies on. Every call blocks until answered."""

    def show_validation_error(self, message: str) -> None:
        ...

    def confirm(self, title: str, question: str) -> bool:
        ...

    def prompt_text(self, title: str, label: str) -> Optional[str]:
        """Return the entered text, or None when the prompt was cancelled."""
        ...
