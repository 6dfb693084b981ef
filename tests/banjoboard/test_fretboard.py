from typing import Optional

import pytest
from hypothesis import given
from hypothesis import strategies as st

from banjoboard import constants
from banjoboard.config import DisplayMode, init_selection
from banjoboard.fretboard import (
    CellStyle,
    FretMarker,
    Grid,
    StringPos,
    build_cell,
    build_grid,
    build_grid_for,
    fret_label,
    fret_marker,
)
from banjoboard.instrument import STANDARD_G_TUNING, BanjoString
from banjoboard.keys import Chord, ChordQuality, Key
from banjoboard.theory import Pitch
from tests.banjoboard.hypo import configure_hypo

configure_hypo()

NAMES = DisplayMode()
DEGREES = DisplayMode(show_degrees=True)
PENTA = DisplayMode(show_degrees=True, pentatonic=True)

DRONE = 0
D_STRING = 1
G_STRING = 2
B_STRING = 3


def make_grid(key: Key, chord_name: Optional[str], mode: DisplayMode) -> Grid:
    chord = key.find_chord(chord_name) if chord_name is not None else None
    return build_grid(STANDARD_G_TUNING, constants.NUM_FRETS, key, chord, mode)


def test_grid_shape() -> None:
    grid = make_grid(Key.G, None, NAMES)
    assert len(grid.cells) == 5
    assert all(len(column) == constants.NUM_FRET_POSITIONS for column in grid.cells)
    assert len(list(grid)) == 5 * 16
    rows = list(grid.rows())
    assert len(rows) == 16
    assert [c.pos for c in rows[3]] == [StringPos(i, 3) for i in range(5)]


def test_short_string_placeholders() -> None:
    grid = make_grid(Key.G, "G", DEGREES)
    for fret in range(5):
        cell = grid.cell(StringPos(DRONE, fret))
        assert not cell.playable
        assert cell.style == CellStyle.Blank
        assert cell.text == ""
        assert not cell.is_nut
        assert not cell.is_highlighted
    assert grid.cell(StringPos(DRONE, 5)).playable


def test_short_string_start() -> None:
    cell = make_grid(Key.G, None, NAMES).cell(StringPos(DRONE, 5))
    assert cell.pitch == "G"
    assert cell.is_open
    assert cell.is_nut
    assert not cell.has_fret_wire


def test_nut_and_open_flags() -> None:
    grid = make_grid(Key.G, None, NAMES)
    open_d = grid.cell(StringPos(D_STRING, 0))
    assert open_d.is_open and open_d.is_nut and not open_d.has_fret_wire
    fifth_d = grid.cell(StringPos(D_STRING, 5))
    assert not fifth_d.is_open and not fifth_d.is_nut and fifth_d.has_fret_wire
    assert fifth_d.pitch == "G"


@pytest.mark.parametrize(
    "pos, pitch",
    [
        (StringPos(D_STRING, 0), "D"),
        (StringPos(G_STRING, 0), "G"),
        (StringPos(B_STRING, 0), "B"),
        (StringPos(B_STRING, 1), "C"),
        (StringPos(4, 4), "F#"),
        (StringPos(DRONE, 10), "C"),
        (StringPos(G_STRING, 12), "G"),
        (StringPos(4, 15), "F"),
    ],
)
def test_pitches(pos: StringPos, pitch: str) -> None:
    assert make_grid(Key.G, None, NAMES).cell(pos).pitch == pitch


def test_root_precedence() -> None:
    grid = make_grid(Key.G, "G", NAMES)
    for cell in grid:
        if cell.pitch == "G":
            assert cell.is_chord_root
            assert cell.style == CellStyle.Root
        elif cell.pitch in ("B", "D"):
            assert cell.is_highlighted
            assert not cell.is_chord_root
            assert cell.style == CellStyle.Highlighted
        elif cell.playable:
            assert not cell.is_highlighted
            assert cell.style == CellStyle.Plain


def test_no_false_positive_from_alias() -> None:
    # C# on the open D string's 11th fret is not in F#dim
    cell = make_grid(Key.G, "F#dim", NAMES).cell(StringPos(D_STRING, 11))
    assert cell.pitch == "C#"
    assert not cell.is_highlighted
    assert not cell.is_chord_root


def test_flat_spelled_chord_matches() -> None:
    chord = Chord("Gm", (Pitch("G"), Pitch("Bb"), Pitch("D")), ChordQuality.Minor)
    string = BanjoString("x", Pitch("G"))
    cell = build_cell(string, StringPos(0, 3), Key.G, chord, NAMES)
    assert cell.pitch == "A#"
    assert cell.is_highlighted
    assert cell.text == "A#"


def test_degrees_in_d() -> None:
    # Open G string in D major: degree 4
    cell = make_grid(Key.D, None, DEGREES).cell(StringPos(G_STRING, 0))
    assert cell.scale_degree == 4
    assert cell.is_in_displayed_scale
    assert not cell.is_pentatonic_degree
    assert cell.text == "4"
    assert not cell.dimmed


def test_pentatonic_hides_fourth() -> None:
    cell = make_grid(Key.D, None, PENTA).cell(StringPos(G_STRING, 0))
    assert cell.scale_degree == 4
    assert not cell.is_pentatonic_degree
    assert not cell.is_in_displayed_scale
    assert cell.text == ""
    assert cell.dimmed


def test_pentatonic_keeps_chord_tones() -> None:
    # G is the root of the G chord in D major, so it stays visible
    cell = make_grid(Key.D, "G", PENTA).cell(StringPos(G_STRING, 0))
    assert cell.is_chord_root
    assert cell.is_in_displayed_scale
    assert cell.text == "4"
    assert cell.style == CellStyle.Root


def test_out_of_scale_names_mode() -> None:
    # F on the D string in G major
    cell = make_grid(Key.G, None, NAMES).cell(StringPos(D_STRING, 3))
    assert cell.pitch == "F"
    assert cell.scale_degree is None
    assert not cell.is_in_displayed_scale
    assert cell.text == "F"
    assert not cell.dimmed


def test_out_of_scale_degrees_mode() -> None:
    cell = make_grid(Key.G, None, DEGREES).cell(StringPos(D_STRING, 3))
    assert cell.text == ""
    assert cell.dimmed


def test_chord_tone_without_degree_shows_name() -> None:
    chord = Chord("Bb", (Pitch("Bb"), Pitch("D"), Pitch("F")), ChordQuality.Major)
    grid = build_grid(STANDARD_G_TUNING, constants.NUM_FRETS, Key.G, chord, DEGREES)
    cell = grid.cell(StringPos(D_STRING, 3))
    assert cell.pitch == "F"
    assert cell.scale_degree is None
    assert cell.is_highlighted
    assert cell.is_in_displayed_scale
    assert cell.text == "F"


def test_scale_root_style_only_with_degrees() -> None:
    names = make_grid(Key.G, None, NAMES).cell(StringPos(G_STRING, 0))
    degrees = make_grid(Key.G, None, DEGREES).cell(StringPos(G_STRING, 0))
    assert names.is_scale_root and degrees.is_scale_root
    assert names.style == CellStyle.Plain
    assert degrees.style == CellStyle.ScaleRoot
    assert degrees.text == "1"


@given(
    st.sampled_from(list(Key)),
    st.booleans(),
    st.booleans(),
    st.integers(min_value=0, max_value=7),
)
def test_grid_invariants(key: Key, show_degrees: bool, pentatonic: bool, chord_index: int) -> None:
    chord = key.chords[chord_index] if chord_index < len(key.chords) else None
    mode = DisplayMode(show_degrees=show_degrees, pentatonic=pentatonic)
    grid = build_grid(STANDARD_G_TUNING, constants.NUM_FRETS, key, chord, mode)
    for cell in grid:
        if not cell.playable:
            continue
        if cell.is_chord_root:
            assert cell.is_highlighted
            assert cell.style == CellStyle.Root
        if cell.is_highlighted:
            assert cell.is_in_displayed_scale
        if cell.scale_degree is not None:
            assert 1 <= cell.scale_degree <= 7
        assert cell.is_scale_root == (cell.scale_degree == 1)
        if not show_degrees:
            assert cell.text == cell.pitch
        elif not cell.is_in_displayed_scale:
            assert cell.text == ""
            assert cell.dimmed


def test_build_grid_is_pure() -> None:
    selection = init_selection("C").with_show_degrees(True)
    assert build_grid_for(selection) == build_grid_for(selection)


@pytest.mark.parametrize(
    "fret, label, marker",
    [
        (0, "Open", FretMarker.Blank),
        (1, "1", FretMarker.Blank),
        (3, "3", FretMarker.Single),
        (12, "12", FretMarker.Double),
        (15, "15", FretMarker.Single),
    ],
)
def test_fret_labels_and_markers(fret: int, label: str, marker: FretMarker) -> None:
    assert fret_label(fret) == label
    assert fret_marker(fret) == marker
