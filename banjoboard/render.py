"""Plain-text view of the board.

Rows are fret positions from the nut down, columns are strings left to
right as played, with fret labels on the left and inlay markers on the
right.
"""

from typing import Dict, List

from typing_extensions import override

from banjoboard.base import MatchException
from banjoboard.fretboard import (
    Cell,
    CellStyle,
    FretMarker,
    Grid,
    StringPos,
    fret_label,
    fret_marker,
)
from banjoboard.instrument import Tuning
from banjoboard.shadow import BoardShadow, BoardView

SLOT_WIDTH = 5
LABEL_WIDTH = 4


def format_cell(cell: Cell) -> str:
    """Render a single cell into a fixed-width slot.

    Chord roots are wrapped in parentheses, chord tones in brackets and
    scale roots in angle brackets. Dimmed cells and placeholders are blank.

    Args:
        cell: The cell to render.

    Returns:
        A string of ``SLOT_WIDTH`` characters.
    """
    if cell.style == CellStyle.Blank or cell.dimmed or not cell.text:
        body = ""
    elif cell.style == CellStyle.Root:
        body = f"({cell.text})"
    elif cell.style == CellStyle.Highlighted:
        body = f"[{cell.text}]"
    elif cell.style == CellStyle.ScaleRoot:
        body = f"<{cell.text}>"
    elif cell.style == CellStyle.Plain:
        body = cell.text
    else:
        raise MatchException(cell.style)
    return body.center(SLOT_WIDTH)


def format_marker(marker: FretMarker) -> str:
    if marker == FretMarker.Double:
        return "**"
    elif marker == FretMarker.Single:
        return "*"
    elif marker == FretMarker.Blank:
        return ""
    else:
        raise MatchException(marker)


class TextView(BoardView):
    """A view that keeps the board as text slots."""

    def __init__(self, tuning: Tuning, fret_count: int) -> None:
        self._tuning = tuning
        self._fret_count = fret_count
        self._slots: Dict[StringPos, str] = {}

    @override
    def paint_cell(self, cell: Cell) -> None:
        self._slots[cell.pos] = format_cell(cell)

    @override
    def clear(self) -> None:
        self._slots = {}

    def get_slot(self, pos: StringPos) -> str:
        return self._slots.get(pos, " " * SLOT_WIDTH)

    def get_text(self) -> str:
        """Get the whole board as text.

        Returns:
            The board, one line per fret position under a header naming
            the strings.
        """
        lines: List[str] = []
        header = "".join(s.ident.center(SLOT_WIDTH) for s in self._tuning)
        lines.append(" " * LABEL_WIDTH + " |" + header + "|")
        for fret in range(self._fret_count + 1):
            slots = "".join(
                self.get_slot(StringPos(str_index, fret))
                for str_index in range(len(self._tuning))
            )
            label = fret_label(fret).rjust(LABEL_WIDTH)
            marker = format_marker(fret_marker(fret))
            lines.append(f"{label} |{slots}| {marker}".rstrip())
        return "\n".join(lines)


def render_text(grid: Grid) -> str:
    """Render a grid to text in one go."""
    view = TextView(grid.tuning, grid.fret_count)
    BoardShadow(view).update(grid)
    return view.get_text()
