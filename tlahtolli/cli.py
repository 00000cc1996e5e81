"""
Command-line interface for Tlahtolli.

Provides commands for:
- Translating words and phrases between Spanish and an indigenous language
- Ranking "did you mean" suggestions
- Showing the phonetic approximation used for speech playback
- Listing languages and dataset statistics

Usage:
    tlahtolli translate "El perro" --language nahuatl
    tlahtolli translate "chichi" --dataset nahuatl.json --direction ind-es
    tlahtolli suggest "perros" --language nahuatl
    tlahtolli phonetic "xochitl" --language nahuatl
    tlahtolli languages
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tlahtolli import __version__
from tlahtolli.config import APP_NAME, LANGUAGES, EngineConfig
from tlahtolli.errors import TlahtolliError
from tlahtolli.ingest.datasets import available_languages, language_label
from tlahtolli.models import Direction, Suggestion
from tlahtolli.pipeline import TranslatorSession
from tlahtolli.speech.phonetics import build_speech_request

app = typer.Typer(
    name="tlahtolli",
    help="Tlahtolli: Spanish <-> indigenous Mexican languages dictionary translator",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{APP_NAME} v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v",
        count=True,
        help="Increase log verbosity (-v info, -vv debug)",
    ),
):
    """Tlahtolli: word and phrase translation for Mexican languages."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _build_config(data_dir: Optional[Path], top_n: Optional[int] = None) -> EngineConfig:
    options = {}
    if data_dir is not None:
        options["data_dir"] = data_dir
    if top_n is not None:
        options["top_n"] = top_n
    try:
        return EngineConfig(**options)
    except ValueError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(1)


def _open_session(
    language: Optional[str],
    dataset: Optional[str],
    data_dir: Optional[Path],
    suggestions: Optional[int] = None,
) -> TranslatorSession:
    session = TranslatorSession(_build_config(data_dir, top_n=suggestions))

    if not dataset and not language:
        console.print("[red]Error:[/] Provide either --language or --dataset", style="bold")
        raise typer.Exit(1)
    try:
        if dataset:
            session.load_source(dataset)
        else:
            session.load_language(language)
    except TlahtolliError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(1)

    console.print(f"[dim]{session.status}[/]")
    return session


def _parse_direction(value: str) -> Direction:
    try:
        return Direction.parse(value)
    except ValueError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(1)


def _suggestion_table(title: str, suggestions: list[Suggestion]) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Translation", style="green")
    table.add_column("Similar to", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Confidence")
    for i, s in enumerate(suggestions, start=1):
        table.add_row(str(i), s.translation, s.matched_source, f"{s.score:.2f}", s.confidence)
    return table


LANGUAGE_OPTION = typer.Option(
    None, "--language", "-l",
    help=f"Language dataset to load ({', '.join(LANGUAGES)})",
)
DATASET_OPTION = typer.Option(
    None, "--dataset", "-d",
    help="Dataset JSON file or URL (overrides --language)",
)
DATA_DIR_OPTION = typer.Option(
    None, "--data-dir",
    help="Directory holding <language>.json datasets",
)
DIRECTION_OPTION = typer.Option(
    "es-ind", "--direction", "-r",
    help="Translation direction: es-ind (Spanish to indigenous) or ind-es",
)


@app.command()
def translate(
    text: str = typer.Argument(..., help="Word or phrase to translate"),
    language: Optional[str] = LANGUAGE_OPTION,
    dataset: Optional[str] = DATASET_OPTION,
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    direction: str = DIRECTION_OPTION,
    suggestions: int = typer.Option(
        5, "--suggestions", "-n",
        help="Maximum number of suggestions to show",
    ),
    phonetic: bool = typer.Option(
        False, "--phonetic",
        help="Also print the text sent to speech playback",
    ),
):
    """Translate a word or phrase."""
    dir_value = _parse_direction(direction)
    session = _open_session(language, dataset, data_dir, suggestions)
    outcome = session.translate(text, dir_value)

    if not outcome.ok:
        console.print(f"[yellow]{outcome.message}[/]")
        raise typer.Exit(1)

    if outcome.suggestions:
        console.print(_suggestion_table("Suggestions", outcome.suggestions))

    console.print("\n[bold]Translation:[/]")
    console.print(outcome.text, markup=False)

    if phonetic:
        if outcome.speakable:
            original, translated = outcome.speech
            console.print(f"\n[bold]Speech (original):[/] {original.text}")
            console.print(f"[bold]Speech (translation):[/] {translated.text}")
        else:
            console.print("\n[dim]No single translation to speak.[/]")


@app.command()
def suggest(
    query: str = typer.Argument(..., help="Word or phrase to look up"),
    language: Optional[str] = LANGUAGE_OPTION,
    dataset: Optional[str] = DATASET_OPTION,
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    direction: str = DIRECTION_OPTION,
    top: int = typer.Option(
        5, "--top", "-n",
        help="Number of suggestions",
    ),
):
    """Rank dictionary entries similar to a query."""
    dir_value = _parse_direction(direction)
    session = _open_session(language, dataset, data_dir, top)
    found = session.suggest(query, dir_value)
    if not found:
        console.print(f"[yellow]No suggestions for:[/] {query}")
        return
    console.print(_suggestion_table(f"Suggestions for '{query}'", found))


@app.command()
def phonetic(
    text: str = typer.Argument(..., help="Text to convert"),
    language: str = typer.Option(
        ..., "--language", "-l",
        help="Language of the text (es for Spanish)",
    ),
):
    """Show the phonetic approximation used for speech playback."""
    request = build_speech_request(text, language)
    console.print(request.text, markup=False)


@app.command()
def languages(
    data_dir: Optional[Path] = DATA_DIR_OPTION,
):
    """List supported languages and whether their datasets are present."""
    config = _build_config(data_dir)
    present = available_languages(config.data_dir)

    table = Table(title=f"Languages ({config.data_dir})")
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="green")
    table.add_column("Dataset")
    for code, label in LANGUAGES.items():
        table.add_row(code, label, "[green]yes[/]" if present[code] else "[dim]missing[/]")
    console.print(table)


@app.command()
def info(
    language: Optional[str] = LANGUAGE_OPTION,
    dataset: Optional[str] = DATASET_OPTION,
    data_dir: Optional[Path] = DATA_DIR_OPTION,
):
    """Show statistics for a language dataset."""
    session = _open_session(language, dataset, data_dir)
    loaded = session.dictionary

    table = Table(title=f"Dataset: {session.source}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Language", language_label(session.language))
    table.add_row("Indigenous field", loaded.schema.target_field)
    table.add_row("Records", str(loaded.record_count))
    table.add_row("Skipped records", str(loaded.skipped_count))
    table.add_row("Expanded entries", str(len(loaded.corpus)))
    table.add_row("Spanish keys", str(len(loaded.index.spanish_to_indigenous)))
    table.add_row("Indigenous keys", str(len(loaded.index.indigenous_to_spanish)))
    console.print(table)


if __name__ == "__main__":
    app()
