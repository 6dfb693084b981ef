import pytest

from banjoboard import constants
from banjoboard.base import MatchException
from banjoboard.config import DisplayMode, Selection, init_selection
from banjoboard.fretboard import CellStyle, StringPos, build_grid_for
from banjoboard.instrument import STANDARD_G_TUNING
from banjoboard.keys import Key
from banjoboard.render import TextView
from banjoboard.shadow import BoardShadow
from banjoboard.visualizer import (
    ChordHover,
    KeyChange,
    ToggleDegrees,
    TogglePentatonic,
    Visualizer,
    apply_event,
)


def make_visualizer() -> Visualizer:
    view = TextView(STANDARD_G_TUNING, constants.NUM_FRETS)
    visualizer = Visualizer(BoardShadow(view))
    visualizer.reset()
    return visualizer


def test_init_selection() -> None:
    selection = init_selection()
    assert selection == Selection(key=Key.G, chord=None, mode=DisplayMode())


def test_key_change_clears_chord() -> None:
    selection = init_selection().with_chord(Key.G.chords[0])
    after = apply_event(selection, KeyChange(Key.D))
    assert after.key == Key.D
    assert after.chord is None


def test_toggles() -> None:
    selection = apply_event(init_selection(), TogglePentatonic(True))
    assert selection.mode.pentatonic
    assert not selection.effective_pentatonic
    selection = apply_event(selection, ToggleDegrees(True))
    assert selection.effective_pentatonic


def test_unknown_event() -> None:
    with pytest.raises(MatchException):
        apply_event(init_selection(), "hover")  # type: ignore[arg-type]


def test_hover_and_leave() -> None:
    visualizer = make_visualizer()
    am = Key.G.find_chord("Am")
    assert visualizer.handle_event(ChordHover(am)) > 0
    assert visualizer.grid.cell(StringPos(3, 1)).style == CellStyle.Highlighted
    assert visualizer.grid.cell(StringPos(2, 2)).style == CellStyle.Root
    assert visualizer.handle_event(ChordHover(am)) == 0
    assert visualizer.handle_event(ChordHover(None)) > 0
    assert visualizer.grid == build_grid_for(init_selection())


def test_reset_restores_start() -> None:
    visualizer = make_visualizer()
    visualizer.handle_event(KeyChange(Key.C))
    visualizer.handle_event(ToggleDegrees(True))
    visualizer.reset()
    assert visualizer.selection == init_selection()
    assert visualizer.grid == build_grid_for(init_selection())
