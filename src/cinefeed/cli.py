"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from typing import Optional

import typer
from rich import print
from rich.table import Table

from cinefeed.appctx import AppContext
from cinefeed.application.services.task_runner import InlineTaskRunner
from cinefeed.config import FEED_ERROR_TEXT, NO_TRAILER_TEXT, YOUTUBE_WATCH_URL
from cinefeed.domain.models import Item, Query
from cinefeed.errors import CineFeedError, SettingsError

app = typer.Typer(help="Browse the movie catalog from the terminal")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SettingsError as exc:
            typer.echo(f"Settings error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except CineFeedError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _context() -> AppContext:
    return AppContext.create(InlineTaskRunner())


def _render_feed(context: AppContext) -> None:
    state = context.feed.state
    if state.error:
        print(f"[red]{FEED_ERROR_TEXT}")
        raise typer.Exit(1)

    table = Table(title=f"{context.feed.query.value} (page {state.page})")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Year")
    table.add_column("Rating", justify="right")
    for item in state.items:
        rating = f"{item.vote_average:.1f}" if item.vote_average is not None else ""
        table.add_row(str(item.id), item.title, (item.release_date or "")[:4], rating)
    print(table)
    more = "more available" if state.has_more else "end of results"
    print(f"{len(state.items)} of {context.feed.total_available} movies ({more})")


def _paginate(context: AppContext, pages: int) -> None:
    for _ in range(pages - 1):
        if not context.feed.load_next_page():
            break


@app.command()
@_handle_errors
def feed(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search term; omit to discover"),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Number of pages to load"),
) -> None:
    """Load the feed directly, the way the window does on startup."""

    context = _context()
    try:
        context.feed.attach(Query.from_text(query))
        _paginate(context, pages)
        _render_feed(context)
    finally:
        context.dispose()


@app.command()
@_handle_errors
def search(
    text: str = typer.Argument(..., help="Search term"),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Number of pages to load"),
) -> None:
    """Dispatch a search through the result store and show the feed it produces."""

    context = _context()
    try:
        context.search.search(text)
        _paginate(context, pages)
        _render_feed(context)
    finally:
        context.dispose()


@app.command()
@_handle_errors
def trailer(movie_id: int = typer.Argument(..., help="Movie identifier")) -> None:
    """Print the trailer URL for MOVIE_ID."""

    context = _context()
    try:
        key = context.trailer_resolver.resolve(Item(id=movie_id))
    finally:
        context.dispose()
    if key is None:
        print(f"[yellow]{NO_TRAILER_TEXT}")
        return
    print(YOUTUBE_WATCH_URL.format(key=key))


if __name__ == "__main__":  # pragma: no cover
    app()
