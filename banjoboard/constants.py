"""Compiled-in constants for the banjo fretboard.

The tuning, fret count and marker positions are fixed; nothing here is
read from the environment.
"""

from typing import FrozenSet, Tuple

NUM_PITCHES = 12
"""Number of pitch classes in the chromatic cycle."""

NUM_FRETS = 15
"""Number of frets drawn above the nut."""
NUM_FRET_POSITIONS = NUM_FRETS + 1
"""Number of drawn positions per string (open + frets)."""

SCALE_LENGTH = 7
"""Number of degrees in a diatonic scale."""
PENTATONIC_DROPPED_DEGREES: FrozenSet[int] = frozenset({4, 7})
"""Degrees of the major scale left out of the major pentatonic."""

FRET_MARKERS: Tuple[int, ...] = (3, 5, 7, 10, 12, 15)
"""Frets carrying an inlay marker."""
DOUBLE_MARKER_FRETS: FrozenSet[int] = frozenset({12})
"""Frets whose inlay is drawn as a double dot."""

OPEN_LABEL = "Open"
"""Label shown for fret position 0."""

DEFAULT_KEY_NAME = "G"
"""Key selected on startup."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"
"""Format string for log records."""
