"""Stateful adapter between a UI text field and the pure sanitizer."""
from __future__ import annotations

from typing import Callable, Optional

from entry.sanitizer import EditRange, SanitizeOptions, sanitize


class ClearOnEditField:
    """Holds the accepted text of one numeric entry field.

    The UI forwards its edit and focus callbacks here and displays ``text``.
    Edits always go through ``sanitize``; focus gain optionally clears the
    field so the user can type a fresh value without deleting the old one.

    Attributes:
        options: Sanitizer switches for this field
        clears_on_begin_editing: Reset the text to "" on focus gain
        on_text_changed: Optional callback receiving every new accepted text
    """

    def __init__(
        self,
        text: str = "",
        options: SanitizeOptions = SanitizeOptions(),
        clears_on_begin_editing: bool = False,
        on_text_changed: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.options = options
        self.clears_on_begin_editing = clears_on_begin_editing
        self.on_text_changed = on_text_changed
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Programmatic update from the bound model value; not sanitized."""
        self._publish(text)

    def on_change(self, edit_range: EditRange, replacement: str) -> str:
        """Handle a keystroke or paste and return the text to display."""
        self._publish(sanitize(self._text, edit_range, replacement, self.options))
        return self._text

    def on_focus(self) -> str:
        if self.clears_on_begin_editing:
            self._publish("")
        return self._text

    def on_blur(self) -> str:
        return self._text

    def _publish(self, text: str) -> None:
        changed = text != self._text
        self._text = text
        if changed and self.on_text_changed is not None:
            self.on_text_changed(text)
