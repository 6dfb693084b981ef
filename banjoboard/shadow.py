"""Shadow state for painting the board incrementally.

The board is rebuilt in full on every change, but a view only needs to
repaint the cells that differ from what it last painted. The shadow keeps
the last painted grid and forwards only the differences.
"""

from abc import ABCMeta, abstractmethod
from typing import Dict, Optional

from banjoboard.base import Resettable
from banjoboard.fretboard import Cell, Grid, StringPos


class BoardView(metaclass=ABCMeta):
    """Abstract interface to something that draws cells."""

    @abstractmethod
    def paint_cell(self, cell: Cell) -> None:
        """Draw a cell, replacing whatever was drawn at its position."""
        raise NotImplementedError()

    @abstractmethod
    def clear(self) -> None:
        """Erase everything drawn so far."""
        raise NotImplementedError()


class BoardShadow(Resettable):
    """Tracks what a view currently shows and paints only the changes."""

    def __init__(self, view: BoardView) -> None:
        """Initialize the shadow with a view.

        Args:
            view: The view to paint into.
        """
        self._view = view
        self._cells: Dict[StringPos, Cell] = {}
        self._shape: Optional[tuple[int, int]] = None

    def reset(self) -> None:
        """Clear the view and forget everything painted."""
        self._view.clear()
        self._cells = {}
        self._shape = None

    def update(self, grid: Grid) -> int:
        """Paint the cells of a grid that differ from the last painted grid.

        A grid of a different shape than the last one clears the view and
        is painted in full.

        Args:
            grid: The newly built grid.

        Returns:
            The number of cells painted.
        """
        shape = (len(grid.cells), grid.fret_count)
        if shape != self._shape:
            self.reset()
            self._shape = shape
        painted = 0
        for cell in grid:
            if self._cells.get(cell.pos) != cell:
                self._view.paint_cell(cell)
                self._cells[cell.pos] = cell
                painted += 1
        return painted
