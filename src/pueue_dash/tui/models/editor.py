"""Single-line text editor state for the argument popup.

The cursor counts characters (code points), never bytes. ``byte_index`` is
the only place the two index spaces meet.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len

__all__ = ["InputBuffer"]


@dataclass(slots=True)
class InputBuffer:
    """Editable text with a character-position cursor.

    Attributes:
        text: Current buffer content.
        cursor: Character index of the cursor, ``0 <= cursor <= len(text)``.
    """

    text: str = ""
    cursor: int = 0

    def __post_init__(self) -> None:
        self.cursor = self._clamp(self.cursor)

    @classmethod
    def with_text(cls, text: str) -> InputBuffer:
        """Create a buffer holding ``text`` with the cursor at its end."""
        return cls(text=text, cursor=len(text))

    def byte_index(self) -> int:
        """UTF-8 byte offset of the cursor position.

        Returns the full byte length when the cursor sits past the last
        character.
        """
        return len(self.text[: self.cursor].encode("utf-8"))

    def cursor_cells(self) -> int:
        """Terminal column of the cursor, counting wide characters as two."""
        return cell_len(self.text[: self.cursor])

    def insert_char(self, char: str) -> None:
        """Insert one character at the cursor and move past it.

        Raises:
            ValueError: If ``char`` is not exactly one character.
        """
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self.text = self.text[: self.cursor] + char + self.text[self.cursor :]
        self.move_cursor_right()

    def insert_text(self, text: str) -> None:
        """Insert each character of ``text`` in order."""
        for char in text:
            self.insert_char(char)

    def delete_char_before_cursor(self) -> None:
        """Delete the character left of the cursor; no-op at position 0."""
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.move_cursor_left()

    def move_cursor_left(self) -> None:
        self.cursor = self._clamp(self.cursor - 1)

    def move_cursor_right(self) -> None:
        self.cursor = self._clamp(self.cursor + 1)

    def _clamp(self, position: int) -> int:
        return min(max(position, 0), len(self.text))
