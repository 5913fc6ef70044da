"""Command-line interface for idshuffle."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, NoReturn, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from .api import IdShuffle
from .defaults import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH
from .exceptions import IdShuffleError
from .utils import configure_logging

logger = logging.getLogger(__name__)

error_console = Console(stderr=True)


def read_blocklist_file(path: Path) -> List[str]:
    """Read one word per line, skipping blank lines and ``#`` comments."""

    words: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        word = line.strip()
        if word and not word.startswith("#"):
            words.append(word)
    return words


def _fail(message: str) -> NoReturn:
    error_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    raise SystemExit(1)


def _build_codec(
    alphabet: str, min_length: int, blocklist_file: Optional[Path], no_blocklist: bool
) -> IdShuffle:
    blocklist: Optional[List[str]] = None
    if no_blocklist:
        blocklist = []
    elif blocklist_file is not None:
        blocklist = read_blocklist_file(blocklist_file)
        logger.info("loaded %d blocklist words from %s", len(blocklist), blocklist_file)
    try:
        return IdShuffle(alphabet=alphabet, min_length=min_length, blocklist=blocklist)
    except IdShuffleError as exc:
        _fail(str(exc))


def codec_options(func: Callable) -> Callable:
    """Attach the shared codec configuration options to a command."""

    options = [
        click.option(
            "--alphabet",
            envvar="IDSHUFFLE_ALPHABET",
            default=DEFAULT_ALPHABET,
            show_default=True,
            help="Unique single-byte symbols used to build ids.",
        ),
        click.option(
            "--min-length",
            envvar="IDSHUFFLE_MIN_LENGTH",
            type=int,
            default=DEFAULT_MIN_LENGTH,
            show_default=True,
            help="Minimum length of generated ids (0-255).",
        ),
        click.option(
            "--blocklist-file",
            envvar="IDSHUFFLE_BLOCKLIST_FILE",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            default=None,
            help="File with one blocked word per line, replacing the built-in list.",
        ),
        click.option(
            "--no-blocklist",
            is_flag=True,
            default=False,
            help="Disable blocklist filtering entirely.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def main(log_level: str | None) -> None:
    """Encode integers into short shuffled ids and back."""
    configure_logging(log_level)


@main.command()
@codec_options
@click.argument("numbers", nargs=-1, type=click.IntRange(min=0))
def encode(
    numbers: Tuple[int, ...],
    alphabet: str,
    min_length: int,
    blocklist_file: Optional[Path],
    no_blocklist: bool,
) -> None:
    """Encode NUMBERS into a single id."""
    codec = _build_codec(alphabet, min_length, blocklist_file, no_blocklist)
    try:
        id_ = codec.encode(list(numbers))
    except IdShuffleError as exc:
        _fail(str(exc))
    click.echo(id_)


@main.command()
@codec_options
@click.argument("id_", metavar="ID")
def decode(
    id_: str,
    alphabet: str,
    min_length: int,
    blocklist_file: Optional[Path],
    no_blocklist: bool,
) -> None:
    """Decode ID back into the numbers it was built from."""
    codec = _build_codec(alphabet, min_length, blocklist_file, no_blocklist)
    numbers = codec.decode(id_)
    if not numbers:
        _fail(f"'{id_}' does not decode to any numbers")
    click.echo(" ".join(str(n) for n in numbers))


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
