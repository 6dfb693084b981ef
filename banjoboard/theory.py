"""Pitch arithmetic and membership tests for the fretboard.

Pitches are plain note-name strings. The twelve canonical names use
sharps; the flat and uncommon spellings in ``ENHARMONICS`` are accepted
wherever two pitches are compared, so every comparison in this module
goes through ``normalize`` first.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, NewType, Optional, Sequence, Tuple

from banjoboard import constants

Pitch = NewType("Pitch", str)
"""A note name such as ``"C#"`` or ``"Bb"``."""

CHROMATIC: Tuple[Pitch, ...] = tuple(
    Pitch(x) for x in ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
)
"""The chromatic cycle in canonical (sharp) spelling, starting from C."""

ENHARMONICS: Mapping[str, Pitch] = MappingProxyType(
    {
        "Db": Pitch("C#"),
        "Eb": Pitch("D#"),
        "Fb": Pitch("E"),
        "Gb": Pitch("F#"),
        "Ab": Pitch("G#"),
        "Bb": Pitch("A#"),
        "Cb": Pitch("B"),
        "E#": Pitch("F"),
        "B#": Pitch("C"),
    }
)
"""Alias spellings mapped to their canonical pitch.

Used only for comparison. Input spellings are never rewritten for display.
"""

MAJOR_INTERVALS: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
"""Semitone offsets of the major scale degrees from the root."""

_INDEX_LOOKUP: Mapping[str, int] = MappingProxyType(
    {name: index for index, name in enumerate(CHROMATIC)}
)

assert len(CHROMATIC) == constants.NUM_PITCHES
assert all(canonical in _INDEX_LOOKUP for canonical in ENHARMONICS.values())


def normalize(pitch: str) -> Pitch:
    """Map an alias spelling to its canonical pitch.

    Names that are not aliases (including every canonical name) are
    returned unchanged.
    """
    return ENHARMONICS.get(pitch, Pitch(pitch))


def is_canonical(pitch: str) -> bool:
    """Check whether a name is one of the twelve canonical spellings."""
    return pitch in _INDEX_LOOKUP


def pitch_index(pitch: str) -> int:
    """Get the position of a pitch in the chromatic cycle (C = 0).

    Raises:
        ValueError: If the name is not a known spelling.
    """
    index = _INDEX_LOOKUP.get(normalize(pitch))
    if index is None:
        raise ValueError(f"Unknown pitch: {pitch}")
    return index


def transpose(pitch: str, steps: int) -> Pitch:
    """Move a pitch by a number of semitones, wrapping in both directions."""
    return CHROMATIC[(pitch_index(pitch) + steps) % constants.NUM_PITCHES]


def pitch_at_fret(open_pitch: str, fret_offset: int) -> Pitch:
    """Get the pitch sounded by stopping a string above its first sounding fret.

    Args:
        open_pitch: The pitch of the string at its first sounding position.
        fret_offset: Semitones above that position. Callers only pass
            non-negative offsets; frets before a string starts are never
            queried.

    Returns:
        The canonical name of the sounded pitch.
    """
    return CHROMATIC[(pitch_index(open_pitch) + fret_offset) % constants.NUM_PITCHES]


def is_member(pitch: str, pitches: Iterable[str]) -> bool:
    """Check whether a pitch matches any of the given pitches up to enharmonics."""
    target = normalize(pitch)
    return any(normalize(p) == target for p in pitches)


def degree_of(pitch: str, scale: Sequence[str]) -> Optional[int]:
    """Get the 1-based scale degree of a pitch.

    Args:
        pitch: The pitch to look up.
        scale: The scale pitches, root first.

    Returns:
        One plus the index of the first matching scale entry, or None if
        the pitch is not in the scale.
    """
    target = normalize(pitch)
    for index, member in enumerate(scale):
        if normalize(member) == target:
            return index + 1
    return None


def is_pentatonic_degree(degree: Optional[int]) -> bool:
    """Check whether a major scale degree survives in the major pentatonic."""
    return degree is not None and degree not in constants.PENTATONIC_DROPPED_DEGREES


def major_scale(root: str) -> Tuple[Pitch, ...]:
    """Spell the major scale on a root using canonical names."""
    return tuple(transpose(root, steps) for steps in MAJOR_INTERVALS)
