"""Command-line front end.

::

    echo "e4 e5 Nf3 Nc6" | chesswav > game.wav
    chesswav moves.txt -o game.wav --waveform triangle
    chesswav moves.txt -o game.wav --waveform square --sine-mix 0.3 --harmonics 7
    echo "e4 e5" | chesswav --play
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import subprocess
import sys
import tempfile
from collections.abc import Sequence
from pathlib import Path

from chesswav.audio.constants import NUM_CHANNELS, SAMPLE_RATE
from chesswav.audio.freq import Tuning
from chesswav.audio.tables import Waveform
from chesswav.audio.wav import encode
from chesswav.config import RenderSettings
from chesswav.core.board import Board
from chesswav.errors import EncodingError
from chesswav.render import render_game

_LOGGER = logging.getLogger(__name__)


class PlaybackError(RuntimeError):
    """No usable audio player, or the player failed."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesswav",
        description="Turn chess moves in algebraic notation into a WAV file.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="file with whitespace-separated moves (default: stdin)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="write the WAV here instead of stdout"
    )
    parser.add_argument(
        "-p", "--play", action="store_true", help="play the result instead of writing it"
    )
    parser.add_argument(
        "--waveform", choices=[w.value for w in Waveform], help="oscillator shape"
    )
    parser.add_argument(
        "--tuning", choices=[t.value for t in Tuning], help="square to pitch mapping"
    )
    parser.add_argument("--note-ms", type=int, help="length of each note")
    parser.add_argument("--silence-ms", type=int, help="gap after each note")
    parser.add_argument(
        "--sine-mix",
        type=float,
        help="blend the waveform toward a sine, 0.0 (none) to 1.0 (pure sine)",
    )
    parser.add_argument(
        "--harmonics",
        type=int,
        help="band-limit the waveform to this many Fourier partials",
    )
    parser.add_argument(
        "--board",
        action="store_true",
        help="print the starting position to stderr before rendering",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="draw the --board diagram with chess glyphs",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0)
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )


def _player_command(path: Path) -> list[str]:
    if sys.platform == "darwin":
        candidates = [["afplay", str(path)]]
    else:
        candidates = [
            [
                "aplay",
                "-q",
                "-f",
                "S16_LE",
                "-r",
                str(SAMPLE_RATE),
                "-c",
                str(NUM_CHANNELS),
                str(path),
            ],
            ["paplay", str(path)],
        ]
    for command in candidates:
        if shutil.which(command[0]):
            return command
    raise PlaybackError("No audio player found (tried afplay, aplay, paplay)")


def play(wav: bytes) -> None:
    """Play *wav* through the system audio player."""
    fd, name = tempfile.mkstemp(prefix="chesswav-", suffix=".wav")
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(wav)
        command = _player_command(path)
        _LOGGER.info("Playing with %s", command[0])
        result = subprocess.run(command, check=False)
        if result.returncode != 0:
            raise PlaybackError(f"{command[0]} exited with status {result.returncode}")
    finally:
        path.unlink(missing_ok=True)


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        settings = RenderSettings().with_overrides(
            note_ms=args.note_ms,
            silence_ms=args.silence_ms,
            waveform=args.waveform,
            tuning=args.tuning,
            sine_mix=args.sine_mix,
            harmonics=args.harmonics,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.board:
        print(Board.initial().diagram(unicode=args.unicode), file=sys.stderr)

    try:
        text = _read_input(args.input)
    except OSError as exc:
        _LOGGER.error("Cannot read %s: %s", args.input, exc)
        return 1

    try:
        report = render_game(text, settings)
        wav = encode(report.samples)
    except EncodingError as exc:
        _LOGGER.error("%s", exc)
        return 1

    if report.skipped:
        _LOGGER.info("Skipped tokens: %s", " ".join(report.skipped))

    if args.play:
        try:
            play(wav)
        except PlaybackError as exc:
            _LOGGER.error("%s", exc)
            return 1
        return 0

    if args.output is not None:
        args.output.write_bytes(wav)
        _LOGGER.info("Wrote %d bytes to %s", len(wav), args.output)
    else:
        sys.stdout.buffer.write(wav)
        sys.stdout.buffer.flush()
    return 0
