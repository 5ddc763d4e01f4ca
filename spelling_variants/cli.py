"""Command-line interface for British <-> American spelling translation."""

from itertools import islice
from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from spelling_variants import __version__, add_file_sink
from spelling_variants.config import Settings, get_settings
from spelling_variants.dictionary import Dictionary, Direction
from spelling_variants.word_list import WordListManager

console = Console()

DIRECTIONS = {"us": Direction.GB_TO_US, "gb": Direction.US_TO_GB}


def configure_verbose_logging() -> None:
    """Configure verbose debug logging."""
    logger.remove()
    logger.add(
        lambda msg: console.print(msg, end="", markup=False, highlight=False),
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    console.print("[dim]Debug logging enabled[/dim]")


def configure_quiet_logging(settings: Settings) -> None:
    """Send logs to the configured log file, or discard them."""
    logger.remove()
    if settings.log_file:
        add_file_sink(settings.log_file, settings.log_level)
    else:
        logger.add(lambda msg: None, level=settings.log_level)


def load_settings_or_abort() -> Settings:
    """Load settings from the environment or abort with a helpful error message."""
    try:
        return get_settings()
    except ValidationError as e:
        console.print("[bold red]Error:[/bold red] Invalid configuration")
        console.print("\nCheck the SPELLING_VARIANTS_* variables in your environment or .env file.\n")
        console.print(f"Details: {e}")
        raise click.Abort from e


def build_dictionary(
    pairs_file: Path | str | None,
    exclude: tuple[str, ...] = (),
    locale: str | None = None,
) -> Dictionary:
    """Create a dictionary with extra pairs from ``pairs_file`` and words removed."""
    additions = []
    if pairs_file:
        manager = WordListManager()
        try:
            additions = manager.remove_duplicates(manager.load_pairs_from_file(str(pairs_file)))
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[bold red]Error:[/bold red] Failed to load pair list: {e}")
            raise click.Abort from e

    dictionary = Dictionary(additions)
    for word in exclude:
        dictionary.remove(word, locale)

    return dictionary


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Translate words between British and American English spelling."""


pairs_option = click.option(
    "--pairs",
    "-p",
    "pairs_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Extra 'british,american' pairs, one per line",
)
exclude_option = click.option(
    "--exclude",
    "-x",
    multiple=True,
    help="Remove the pair containing this word (repeatable)",
)
locale_option = click.option(
    "--locale",
    "-l",
    default=None,
    help="Locale used to lowercase --exclude words (e.g. 'tr')",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)


@cli.command()
@click.argument("words", nargs=-1)
@click.option(
    "--words",
    "-w",
    "words_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to word list file (one word per line)",
)
@click.option(
    "--to",
    "target",
    type=click.Choice(sorted(DIRECTIONS), case_sensitive=False),
    default="us",
    show_default=True,
    help="Spelling variant to translate into",
)
@click.option(
    "--match-case/--no-match-case",
    default=None,
    help="Mirror the casing of each input word (default from settings)",
)
@pairs_option
@exclude_option
@locale_option
@verbose_option
@click.pass_context
def translate(
    ctx: click.Context,
    words: tuple[str, ...],
    words_file: Path | None,
    target: str,
    match_case: bool | None,
    pairs_file: Path | None,
    exclude: tuple[str, ...],
    locale: str | None,
    verbose: bool,
) -> None:
    """Translate WORDS (and words from --words) one per line.

    Words are translated as given; splitting text into words is up to you.
    Unknown words are printed unchanged.
    """
    if not words and words_file is None:
        click.echo(ctx.get_help())
        ctx.exit()

    settings = load_settings_or_abort()

    if verbose:
        configure_verbose_logging()
    else:
        configure_quiet_logging(settings)

    all_words = list(words)
    if words_file is not None:
        logger.debug(f"Loading words from {words_file}...")
        try:
            all_words.extend(WordListManager().load_from_file(str(words_file)))
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[bold red]Error:[/bold red] Failed to load word list: {e}")
            raise click.Abort from e

    dictionary = build_dictionary(
        pairs_file or settings.pairs_file, exclude, locale or settings.locale
    )
    if match_case is None:
        match_case = settings.match_case

    direction = DIRECTIONS[target.lower()]
    logger.debug(f"Translating {len(all_words)} word(s) ({direction.value})")

    for translated in dictionary.translate_many(all_words, direction, match_case):
        console.print(translated, markup=False, highlight=False)


@cli.command()
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Show at most this many pairs",
)
@pairs_option
@exclude_option
@locale_option
@verbose_option
def pairs(
    limit: int | None,
    pairs_file: Path | None,
    exclude: tuple[str, ...],
    locale: str | None,
    verbose: bool,
) -> None:
    """List the British -> American pairs in the dictionary."""
    settings = load_settings_or_abort()

    if verbose:
        configure_verbose_logging()
    else:
        configure_quiet_logging(settings)

    dictionary = build_dictionary(
        pairs_file or settings.pairs_file, exclude, locale or settings.locale
    )

    table = Table(title="Spelling pairs")
    table.add_column("British", style="cyan")
    table.add_column("American", style="green")
    for gb, us in islice(dictionary.entries(), limit):
        table.add_row(gb, us)

    console.print(table)
    console.print(f"Total pairs: [green]{len(dictionary)}[/green]")


if __name__ == "__main__":
    cli()
