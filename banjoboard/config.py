"""Selection state for the fretboard view.

The selection is an immutable value. Every user interaction produces a
new selection, and the whole board is rebuilt from it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from banjoboard import constants
from banjoboard.keys import Chord, Key, lookup_key


@dataclass(frozen=True)
class DisplayMode:
    """Display toggles for the board."""

    show_degrees: bool = False  # Show scale degrees instead of note names
    pentatonic: bool = False  # Restrict the displayed scale to the major pentatonic


@dataclass(frozen=True)
class Selection:
    """Everything the board depends on besides the fixed tables.

    Holds the current key, the hovered chord (if any) and the display
    toggles.
    """

    key: Key
    """The selected key."""
    chord: Optional[Chord]
    """The hovered chord, drawn from the key's chord table, or None."""
    mode: DisplayMode
    """The display toggles."""

    @property
    def effective_pentatonic(self) -> bool:
        """Check whether the pentatonic toggle is in effect.

        The toggle is only offered while scale degrees are shown.

        Returns:
            True if both degrees and pentatonic are enabled.
        """
        return self.mode.show_degrees and self.mode.pentatonic

    def with_key(self, key: Key) -> Selection:
        """Select a key, clearing the hovered chord.

        Args:
            key: The new key.

        Returns:
            A new selection on the given key with no chord.
        """
        return replace(self, key=key, chord=None)

    def with_chord(self, chord: Optional[Chord]) -> Selection:
        return replace(self, chord=chord)

    def with_show_degrees(self, enabled: bool) -> Selection:
        return replace(self, mode=replace(self.mode, show_degrees=enabled))

    def with_pentatonic(self, enabled: bool) -> Selection:
        return replace(self, mode=replace(self.mode, pentatonic=enabled))


def init_selection(key_name: str = constants.DEFAULT_KEY_NAME) -> Selection:
    """Initialize the startup selection.

    Args:
        key_name: Name of the starting key.

    Returns:
        A selection on the given key with no chord and both toggles off.
    """
    return Selection(key=lookup_key(key_name), chord=None, mode=DisplayMode())
