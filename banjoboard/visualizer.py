"""Controller that ties the selection, the board model and a view together.

Each event produces a new selection, the board is rebuilt from it in full
and the shadow repaints whatever changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from banjoboard.base import MatchException, Resettable
from banjoboard.config import Selection, init_selection
from banjoboard.fretboard import Grid, build_grid_for
from banjoboard.keys import Chord, Key
from banjoboard.shadow import BoardShadow


@dataclass(frozen=True)
class KeyChange:
    """The user picked a key."""

    key: Key


@dataclass(frozen=True)
class ChordHover:
    """The pointer entered a chord in the list, or left it (chord is None)."""

    chord: Optional[Chord]


@dataclass(frozen=True)
class ToggleDegrees:
    """The scale degree toggle changed."""

    enabled: bool


@dataclass(frozen=True)
class TogglePentatonic:
    """The pentatonic toggle changed."""

    enabled: bool


BoardEvent = KeyChange | ChordHover | ToggleDegrees | TogglePentatonic


def apply_event(selection: Selection, event: BoardEvent) -> Selection:
    """Compute the selection that follows an event.

    Args:
        selection: The current selection.
        event: The user interaction.

    Returns:
        The new selection.

    Raises:
        MatchException: If the event is not a known board event.
    """
    if isinstance(event, KeyChange):
        return selection.with_key(event.key)
    elif isinstance(event, ChordHover):
        return selection.with_chord(event.chord)
    elif isinstance(event, ToggleDegrees):
        return selection.with_show_degrees(event.enabled)
    elif isinstance(event, TogglePentatonic):
        return selection.with_pentatonic(event.enabled)
    else:
        raise MatchException(event)


class Visualizer(Resettable):
    """Owns the current selection and keeps a view in sync with it."""

    def __init__(self, shadow: BoardShadow, selection: Optional[Selection] = None) -> None:
        """Initialize the visualizer.

        Args:
            shadow: Shadow of the view to keep painted.
            selection: Starting selection; defaults to the startup selection.
        """
        self._shadow = shadow
        self._initial = selection if selection is not None else init_selection()
        self._selection = self._initial
        self._grid = build_grid_for(self._selection)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def grid(self) -> Grid:
        return self._grid

    def handle_event(self, event: BoardEvent) -> int:
        """Apply an event and repaint the board.

        Args:
            event: The user interaction.

        Returns:
            The number of cells repainted.
        """
        selection = apply_event(self._selection, event)
        if selection == self._selection:
            return 0
        logging.debug("selection changed: %s", selection)
        self._selection = selection
        return self._redraw()

    def _redraw(self) -> int:
        self._grid = build_grid_for(self._selection)
        return self._shadow.update(self._grid)

    def redraw(self) -> int:
        """Repaint the whole board from scratch."""
        logging.info("visualizer redrawing")
        self._shadow.reset()
        return self._redraw()

    def reset(self) -> None:
        """Return to the starting selection and repaint everything."""
        logging.info("visualizer resetting")
        self._selection = self._initial
        self.redraw()
