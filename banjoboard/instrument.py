"""Strings and tuning of the five-string banjo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generator, Tuple

from banjoboard.theory import Pitch, pitch_at_fret


@dataclass(frozen=True)
class BanjoString:
    """A single string of the instrument.

    The short drone string only starts sounding at ``start_fret``; all
    other strings start at the nut (fret 0).
    """

    ident: str
    """String number as printed on the instrument ("1" is the highest)."""
    open_pitch: Pitch
    """Pitch sounded at the string's first sounding position."""
    start_fret: int = 0
    """Fret at which the string begins."""

    @property
    def is_short(self) -> bool:
        return self.start_fret > 0

    def is_playable(self, fret: int) -> bool:
        """Check whether the string exists at a fret position."""
        return fret >= self.start_fret

    def fret_offset(self, fret: int) -> int:
        """Get the semitone offset of a fret from the string's first sounding position."""
        return fret - self.start_fret

    def pitch_at(self, fret: int) -> Pitch:
        """Get the pitch sounded at a playable fret position."""
        return pitch_at_fret(self.open_pitch, self.fret_offset(fret))


@dataclass(frozen=True)
class Tuning:
    """The ordered strings of the instrument, left to right as played."""

    name: str
    strings: Tuple[BanjoString, ...]

    def __iter__(self) -> Generator[BanjoString, None, None]:
        yield from self.strings

    def __len__(self) -> int:
        return len(self.strings)

    @property
    def short_name(self) -> str:
        """Get the conventional tuning spelling, drone string in lower case (e.g. "gDGBD")."""
        return "".join(
            s.open_pitch.lower() if s.is_short else s.open_pitch for s in self.strings
        )


STANDARD_G_TUNING = Tuning(
    name="Standard G",
    strings=(
        BanjoString("5", Pitch("G"), start_fret=5),
        BanjoString("4", Pitch("D")),
        BanjoString("3", Pitch("G")),
        BanjoString("2", Pitch("B")),
        BanjoString("1", Pitch("D")),
    ),
)
"""Open G tuning (gDGBD) with the short fifth string starting at fret 5."""
