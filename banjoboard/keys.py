"""Keys, their scales and their diatonic chords.

Each supported key selects a seven-note major scale and the seven
diatonic triads built on it. The tables are fixed and read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from types import MappingProxyType
from typing import Dict, Generator, Mapping, Optional, Tuple

from banjoboard import constants
from banjoboard.base import MatchException
from banjoboard.theory import Pitch, degree_of, is_pentatonic_degree, major_scale, normalize


@unique
class ChordQuality(Enum):
    """Quality of a triad."""

    Major = "major"
    Minor = "minor"
    Diminished = "dim"

    @property
    def suffix(self) -> str:
        """Get the suffix appended to the root in a chord name.

        Returns:
            The suffix ("", "m" or "dim").
        """
        if self == ChordQuality.Major:
            return ""
        elif self == ChordQuality.Minor:
            return "m"
        elif self == ChordQuality.Diminished:
            return "dim"
        else:
            raise MatchException(self)


@dataclass(frozen=True)
class Chord:
    """A named chord and its tones, root first."""

    name: str
    """Display name, e.g. "F#dim"."""
    tones: Tuple[Pitch, ...]
    """Chord tones with the root first."""
    quality: ChordQuality
    """Major, minor or diminished."""

    @property
    def root(self) -> Pitch:
        return self.tones[0]

    def label(self) -> str:
        """Render the tones for the chord list, e.g. "G - B - D"."""
        return " - ".join(self.tones)


@dataclass(frozen=True)
class Scale:
    """A diatonic scale; index 0 is degree 1."""

    pitches: Tuple[Pitch, ...]

    def __post_init__(self) -> None:
        assert len(self.pitches) == constants.SCALE_LENGTH

    @property
    def root(self) -> Pitch:
        return self.pitches[0]

    def __iter__(self) -> Generator[Pitch, None, None]:
        yield from self.pitches

    def __len__(self) -> int:
        return len(self.pitches)

    def degree_of(self, pitch: str) -> Optional[int]:
        """Get the 1-based degree of a pitch in this scale, if present."""
        return degree_of(pitch, self.pitches)

    def pentatonic(self) -> Tuple[Pitch, ...]:
        """Get the major pentatonic subset of this scale."""
        return tuple(
            p
            for degree, p in enumerate(self.pitches, start=1)
            if is_pentatonic_degree(degree)
        )


def _pitches(*names: str) -> Tuple[Pitch, ...]:
    return tuple(Pitch(n) for n in names)


def _chord(root: str, third: str, fifth: str, quality: ChordQuality) -> Chord:
    return Chord(root + quality.suffix, _pitches(root, third, fifth), quality)


_MAJ = ChordQuality.Major
_MIN = ChordQuality.Minor
_DIM = ChordQuality.Diminished

SCALES: Mapping[str, Scale] = MappingProxyType(
    {
        "G": Scale(_pitches("G", "A", "B", "C", "D", "E", "F#")),
        "C": Scale(_pitches("C", "D", "E", "F", "G", "A", "B")),
        "D": Scale(_pitches("D", "E", "F#", "G", "A", "B", "C#")),
    }
)
"""Major scale of each supported key."""

CHORDS_BY_KEY: Mapping[str, Tuple[Chord, ...]] = MappingProxyType(
    {
        "G": (
            _chord("G", "B", "D", _MAJ),
            _chord("A", "C", "E", _MIN),
            _chord("B", "D", "F#", _MIN),
            _chord("C", "E", "G", _MAJ),
            _chord("D", "F#", "A", _MAJ),
            _chord("E", "G", "B", _MIN),
            _chord("F#", "A", "C", _DIM),
        ),
        "C": (
            _chord("C", "E", "G", _MAJ),
            _chord("D", "F", "A", _MIN),
            _chord("E", "G", "B", _MIN),
            _chord("F", "A", "C", _MAJ),
            _chord("G", "B", "D", _MAJ),
            _chord("A", "C", "E", _MIN),
            _chord("B", "D", "F", _DIM),
        ),
        "D": (
            _chord("D", "F#", "A", _MAJ),
            _chord("E", "G", "B", _MIN),
            _chord("F#", "A", "C#", _MIN),
            _chord("G", "B", "D", _MAJ),
            _chord("A", "C#", "E", _MAJ),
            _chord("B", "D", "F#", _MIN),
            _chord("C#", "E", "G", _DIM),
        ),
    }
)
"""Diatonic triads of each supported key, in scale order."""


def _check_tables() -> None:
    assert SCALES.keys() == CHORDS_BY_KEY.keys()
    for name, scale in SCALES.items():
        assert scale.root == name
        assert tuple(normalize(p) for p in scale) == major_scale(name)
        chords = CHORDS_BY_KEY[name]
        assert len(chords) == constants.SCALE_LENGTH
        for chord, degree_root in zip(chords, scale):
            assert chord.root == degree_root
            assert all(scale.degree_of(tone) is not None for tone in chord.tones)


_check_tables()


@unique
class Key(Enum):
    """The supported keys."""

    G = "G"
    C = "C"
    D = "D"

    @property
    def display_name(self) -> str:
        """Get the name shown in the key selector, e.g. "G Major"."""
        return f"{self.value} Major"

    @property
    def scale(self) -> Scale:
        return SCALES[self.value]

    @property
    def chords(self) -> Tuple[Chord, ...]:
        return CHORDS_BY_KEY[self.value]

    def find_chord(self, name: str) -> Optional[Chord]:
        """Find one of this key's chords by name.

        Args:
            name: The chord name, e.g. "Am".

        Returns:
            The chord, or None if the key has no chord of that name.
        """
        for chord in self.chords:
            if chord.name == name:
                return chord
        return None


KEY_LOOKUP: Dict[str, Key] = {k.value: k for k in Key}
"""Lookup from key name to Key."""


def lookup_key(name: str) -> Key:
    """Get a supported key by name.

    Raises:
        ValueError: If the key is not supported.
    """
    key = KEY_LOOKUP.get(name)
    if key is None:
        raise ValueError(f"Unsupported key: {name}")
    return key
