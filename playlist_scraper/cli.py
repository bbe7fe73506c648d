import typer
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from toolz import pipe

from . import logger_config # Initializes the root logger
from .adapters.requests_fetcher import DEFAULT_TIMEOUT, RequestsPageFetcher
from .assembler import extract_playlist
from .domain.errors import AppError
from .domain.models import Playlist, PlaylistTarget
from .i18n import get_default_lang, get_message, set_lang
from .identifiers import resolve_reference
from .playlist_api import get_playlist

# Initialization
console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="playlist-scraper",
    help="A CLI tool to read YouTube playlists without the YouTube API.",
    add_completion=False,
)

state = {"lang": get_default_lang()}
set_lang(state["lang"])


@app.callback()
def main_callback(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help=get_message("help_lang"),
        show_default=False,
    ),
):
    """Read YouTube playlists and channel listings from the command line."""
    if lang:
        set_lang(lang)
        state["lang"] = lang
        logger.info(f"Language explicitly set to: {lang}")


# --- Helper Functions ---


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]{get_message('error')}[/bold red] {escape(error.message)}")
    raise typer.Exit(code=1)


def format_duration(duration: timedelta) -> str:
    """Formats a duration the way YouTube displays it (5:30, 1:05:30)."""
    minutes, seconds = divmod(int(duration.total_seconds()), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def _print_playlist(playlist: Playlist, as_yaml: bool) -> None:
    if as_yaml:
        typer.echo(yaml.safe_dump(playlist.to_dict(), sort_keys=False, allow_unicode=True), nl=False)
        return

    console.print(
        f"[bold green]✓ {escape(get_message('playlist_summary', count=len(playlist.videos), title=playlist.title, author=playlist.author))}[/bold green]"
    )
    table = Table(show_lines=False)
    table.add_column(get_message("column_position"), justify="right")
    table.add_column(get_message("column_id"))
    table.add_column(get_message("column_title"))
    table.add_column(get_message("column_author"))
    table.add_column(get_message("column_duration"), justify="right")
    for position, video in enumerate(playlist.videos, start=1):
        table.add_row(
            str(position),
            escape(video.video_id),
            escape(video.title),
            escape(video.author),
            format_duration(video.duration),
        )
    console.print(table)


# --- CLI Commands ---


@app.command(name="show")
def show_playlist(
    reference: str = typer.Argument(..., help=get_message("help_reference")),
    as_yaml: bool = typer.Option(False, "--yaml", help=get_message("help_yaml")),
    timeout: float = typer.Option(DEFAULT_TIMEOUT, "--timeout", min=1.0, help=get_message("help_timeout")),
):
    """Fetches a playlist or channel listing and prints its videos."""
    logger.info(f"Command 'show' initiated for: {reference}")
    if not as_yaml:
        console.print(f"📡 {escape(get_message('fetching_playlist', reference=reference))}")

    pipe(
        get_playlist(reference, RequestsPageFetcher(timeout=timeout)),
        lambda e: e.either(_handle_error, lambda playlist: _print_playlist(playlist, as_yaml)),
    )


@app.command(name="parse")
def parse_file(
    file_path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        help=get_message("help_file"),
    ),
    as_yaml: bool = typer.Option(False, "--yaml", help=get_message("help_yaml")),
):
    """Extracts a playlist from a saved HTML page."""
    logger.info(f"Command 'parse' initiated for file: {file_path}")
    if not as_yaml:
        console.print(f"📄 {escape(get_message('parsing_file', file_path=file_path))}")

    try:
        body = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error while reading '{file_path}': {e}", exc_info=True)
        _handle_error(AppError(get_message("file_error", file_path=file_path, error=e)))
        return

    extract_playlist(body).either(
        _handle_error, lambda playlist: _print_playlist(playlist, as_yaml)
    )


@app.command(name="resolve")
def resolve(
    reference: str = typer.Argument(..., help=get_message("help_reference")),
):
    """Prints the page that would be fetched for a reference."""
    logger.info(f"Command 'resolve' initiated for: {reference}")

    def on_success(target: PlaylistTarget) -> None:
        console.print(escape(get_message("target_kind", kind=target.kind)))
        console.print(escape(get_message("target_id", identifier=target.identifier)))
        console.print(escape(get_message("target_url", link=target.link)))

    resolve_reference(reference).either(_handle_error, on_success)


if __name__ == "__main__":
    app()
