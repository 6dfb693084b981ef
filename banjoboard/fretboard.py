"""Fretboard model for the banjo diagram.

This module turns a tuning, a key, an optional hovered chord and the
display toggles into a grid of cells, one per string and fret position.
Each cell carries the pitch and the classification flags a view needs to
draw it; the view itself decides colours and layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Generator, Optional, Tuple

from banjoboard import constants
from banjoboard.config import DisplayMode, Selection
from banjoboard.instrument import STANDARD_G_TUNING, BanjoString, Tuning
from banjoboard.keys import Chord, Key
from banjoboard.theory import Pitch, degree_of, is_member, is_pentatonic_degree, normalize


@dataclass(frozen=True)
class StringPos:
    """A position on the fretboard as a string and fret combination."""

    str_index: int
    """Index into the tuning, 0 being the leftmost string."""
    fret: int
    """Fret position, 0 being the nut."""


@unique
class CellStyle(Enum):
    """Classification used to style a note, highest precedence first."""

    Root = auto()  # Root of the hovered chord
    Highlighted = auto()  # Other tone of the hovered chord
    ScaleRoot = auto()  # Degree 1 of the key, only while showing degrees
    Plain = auto()  # Anything else
    Blank = auto()  # Placeholder before a short string starts


@unique
class FretMarker(Enum):
    """Inlay drawn beside a fret position."""

    Blank = auto()
    Single = auto()
    Double = auto()


@dataclass(frozen=True)
class Cell:
    """Display data for one string at one fret position."""

    pos: StringPos
    """Where this cell is on the board."""
    pitch: Optional[Pitch]
    """Sounded pitch, or None where the string has not started yet."""
    is_open: bool
    """The string's first sounding position (the nut, or a short string's start fret)."""
    is_nut: bool
    """A boundary the view draws as a nut."""
    has_fret_wire: bool
    """A fret wire is drawn below this position."""
    is_highlighted: bool
    """The pitch is a tone of the hovered chord."""
    is_chord_root: bool
    """The pitch is the root of the hovered chord."""
    scale_degree: Optional[int]
    """Degree (1-7) of the pitch in the key's scale, if any."""
    is_pentatonic_degree: bool
    """The degree belongs to the major pentatonic subset."""
    is_in_displayed_scale: bool
    """The cell is part of what is currently displayed as the scale."""
    is_scale_root: bool
    """The pitch is degree 1 of the key."""
    style: CellStyle
    """Dominant styling classification."""
    dimmed: bool
    """The cell is shown as out of scale."""
    text: str
    """Text drawn on the note."""

    @property
    def playable(self) -> bool:
        return self.pitch is not None

    @classmethod
    def placeholder(cls, pos: StringPos) -> Cell:
        """Create an empty cell for a fret before a short string starts.

        Args:
            pos: The position of the cell.

        Returns:
            A cell with no pitch and no flags set.
        """
        return cls(
            pos=pos,
            pitch=None,
            is_open=False,
            is_nut=False,
            has_fret_wire=False,
            is_highlighted=False,
            is_chord_root=False,
            scale_degree=None,
            is_pentatonic_degree=False,
            is_in_displayed_scale=False,
            is_scale_root=False,
            style=CellStyle.Blank,
            dimmed=False,
            text="",
        )


def _cell_style(
    is_chord_root: bool, is_highlighted: bool, is_scale_root: bool, mode: DisplayMode
) -> CellStyle:
    if is_chord_root:
        return CellStyle.Root
    elif is_highlighted:
        return CellStyle.Highlighted
    elif mode.show_degrees and is_scale_root:
        return CellStyle.ScaleRoot
    else:
        return CellStyle.Plain


def _cell_text(
    pitch: Pitch, degree: Optional[int], in_scale: bool, mode: DisplayMode
) -> str:
    if not mode.show_degrees:
        return pitch
    elif not in_scale:
        return ""
    elif degree is not None:
        return str(degree)
    else:
        # In scale only through the hovered chord
        return pitch


def build_cell(
    string: BanjoString,
    pos: StringPos,
    key: Key,
    chord: Optional[Chord],
    mode: DisplayMode,
) -> Cell:
    """Classify a single position of a string.

    Args:
        string: The string the position belongs to.
        pos: The position on the board.
        key: The selected key.
        chord: The hovered chord, if any.
        mode: The display toggles.

    Returns:
        The cell for this position.
    """
    fret = pos.fret
    if not string.is_playable(fret):
        return Cell.placeholder(pos)

    pitch = string.pitch_at(fret)
    is_open = fret == string.start_fret
    is_nut = fret == 0 or fret == string.start_fret
    is_highlighted = chord is not None and is_member(pitch, chord.tones)
    is_chord_root = chord is not None and normalize(pitch) == normalize(chord.root)
    scale_degree = degree_of(pitch, key.scale.pitches)
    pentatonic_degree = is_pentatonic_degree(scale_degree)
    if mode.pentatonic:
        in_scale_base = pentatonic_degree
    else:
        in_scale_base = scale_degree is not None
    # Chord tones are never hidden by the pentatonic filter
    in_scale = in_scale_base or is_highlighted or is_chord_root
    is_scale_root = scale_degree == 1

    return Cell(
        pos=pos,
        pitch=pitch,
        is_open=is_open,
        is_nut=is_nut,
        has_fret_wire=fret > 0 and fret != string.start_fret,
        is_highlighted=is_highlighted,
        is_chord_root=is_chord_root,
        scale_degree=scale_degree,
        is_pentatonic_degree=pentatonic_degree,
        is_in_displayed_scale=in_scale,
        is_scale_root=is_scale_root,
        style=_cell_style(is_chord_root, is_highlighted, is_scale_root, mode),
        dimmed=mode.show_degrees and not in_scale,
        text=_cell_text(pitch, scale_degree, in_scale, mode),
    )


@dataclass(frozen=True)
class Grid:
    """All cells of the board, indexed by string then fret.

    Fret positions run from 0 (the nut) to ``fret_count`` inclusive.
    """

    tuning: Tuning
    """The tuning the grid was built for."""
    fret_count: int
    """Highest fret position on the board."""
    cells: Tuple[Tuple[Cell, ...], ...]
    """Cells as ``cells[str_index][fret]``."""

    def cell(self, pos: StringPos) -> Cell:
        return self.cells[pos.str_index][pos.fret]

    def __iter__(self) -> Generator[Cell, None, None]:
        """Iterate over all cells string by string.

        Yields:
            Each cell, in string order then fret order.
        """
        for column in self.cells:
            yield from column

    def rows(self) -> Generator[Tuple[Cell, ...], None, None]:
        """Iterate over fret positions from the nut up.

        Yields:
            The cells at each fret position, one per string, left to right.
        """
        for fret in range(self.fret_count + 1):
            yield tuple(column[fret] for column in self.cells)


def fret_label(fret: int) -> str:
    return constants.OPEN_LABEL if fret == 0 else str(fret)


def fret_marker(fret: int) -> FretMarker:
    """Get the inlay drawn beside a fret position."""
    if fret in constants.DOUBLE_MARKER_FRETS:
        return FretMarker.Double
    elif fret in constants.FRET_MARKERS:
        return FretMarker.Single
    else:
        return FretMarker.Blank


def build_grid(
    tuning: Tuning,
    fret_count: int,
    key: Key,
    chord: Optional[Chord],
    mode: DisplayMode,
) -> Grid:
    """Build the full board for a selection.

    This is a pure function of its inputs and is rerun in full whenever
    any of them changes.

    Args:
        tuning: The strings of the instrument.
        fret_count: Highest fret position to include.
        key: The selected key.
        chord: The hovered chord, if any.
        mode: The display toggles.

    Returns:
        A grid covering every string at fret positions 0 to ``fret_count``.
    """
    cells = tuple(
        tuple(
            build_cell(string, StringPos(str_index, fret), key, chord, mode)
            for fret in range(fret_count + 1)
        )
        for str_index, string in enumerate(tuning)
    )
    return Grid(tuning=tuning, fret_count=fret_count, cells=cells)


def build_grid_for(selection: Selection) -> Grid:
    """Build the board for a selection using the fixed tuning and fret count."""
    return build_grid(
        STANDARD_G_TUNING,
        constants.NUM_FRETS,
        selection.key,
        selection.chord,
        selection.mode,
    )
