"""Cell-based cropping for styled text.

Terminal columns are cells, not characters: wide characters take two.
"""

from __future__ import annotations

from rich.cells import get_character_cell_size
from rich.text import Text

__all__ = ["char_index_at_cell", "crop_cells"]


def char_index_at_cell(plain: str, cell: int) -> int:
    """Index of the first character starting at or after column ``cell``.

    A wide character straddling ``cell`` is skipped.
    """
    if cell <= 0:
        return 0
    position = 0
    for index, char in enumerate(plain):
        if position >= cell:
            return index
        position += get_character_cell_size(char)
    return len(plain)


def crop_cells(line: Text, start: int, width: int) -> Text:
    """Return the part of ``line`` visible in columns ``[start, start + width)``.

    The result is padded with spaces to exactly ``width`` cells.
    """
    if width <= 0:
        return Text("")
    begin = char_index_at_cell(line.plain, start)
    if begin >= len(line.plain):
        visible = Text("")
    elif begin > 0:
        visible = line[begin:]
    else:
        visible = line.copy()
    visible.truncate(width, overflow="crop", pad=True)
    return visible
