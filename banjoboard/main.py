"""Command-line entry point for banjoboard.

Prints the fretboard for a key, optionally highlighting one of the key's
chords and showing scale degrees.
"""

import logging
from argparse import ArgumentParser, Namespace
from typing import List, Optional

from banjoboard import constants
from banjoboard.config import init_selection
from banjoboard.instrument import STANDARD_G_TUNING
from banjoboard.keys import KEY_LOOKUP, Key, lookup_key
from banjoboard.render import TextView
from banjoboard.shadow import BoardShadow
from banjoboard.visualizer import (
    ChordHover,
    KeyChange,
    ToggleDegrees,
    TogglePentatonic,
    Visualizer,
)


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(prog="banjoboard")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument(
        "--key", choices=sorted(KEY_LOOKUP), default=constants.DEFAULT_KEY_NAME
    )
    parser.add_argument("--chord", help="name of a chord in the key, e.g. Am")
    parser.add_argument("--degrees", action="store_true", help="show scale degrees")
    parser.add_argument(
        "--pentatonic", action="store_true", help="limit degrees to the pentatonic"
    )
    parser.add_argument(
        "--list-chords", action="store_true", help="list the chords of the key"
    )
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(format=constants.LOG_FORMAT, level=log_level)


def list_chords(key: Key) -> str:
    lines = [f"{key.display_name}:"]
    for chord in key.chords:
        lines.append(f"  {chord.name:<6} {chord.label()}")
    return "\n".join(lines)


def run(args: Namespace, parser: ArgumentParser) -> str:
    """Build the output for parsed arguments.

    Args:
        args: Parsed command-line arguments.
        parser: The parser, used to report invalid chord names.

    Returns:
        The text to print.
    """
    key = lookup_key(args.key)
    if args.list_chords:
        return list_chords(key)
    chord = None
    if args.chord is not None:
        chord = key.find_chord(args.chord)
        if chord is None:
            parser.error(f"no chord {args.chord} in {key.display_name}")
    view = TextView(STANDARD_G_TUNING, constants.NUM_FRETS)
    visualizer = Visualizer(BoardShadow(view), init_selection(key.value))
    visualizer.reset()
    for event in [
        KeyChange(key),
        ChordHover(chord),
        ToggleDegrees(args.degrees),
        TogglePentatonic(args.pentatonic),
    ]:
        visualizer.handle_event(event)
    title = f"Banjo fretboard, {STANDARD_G_TUNING.name} tuning ({STANDARD_G_TUNING.short_name})"
    return f"{title}\n\n{view.get_text()}"


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point.

    Parses command-line arguments, configures logging and prints the board.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    print(run(args, parser))
    logging.info("done")


if __name__ == "__main__":
    main()
