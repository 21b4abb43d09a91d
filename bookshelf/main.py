from __future__ import annotations

import json
import sys

import typer

from bookshelf.catalog.abstract import BookSink
from bookshelf.config import get_settings
from bookshelf.domain.builder import build_record
from bookshelf.infrastructure.notifications import EchoNotifier
from bookshelf.library import get_library
from bookshelf.reporter import print_results
from bookshelf.scenarios import available_scenarios, run_scenarios
from bookshelf.utils.logging import configure_logging

app = typer.Typer(help="Bookshelf design pattern demonstrations.")


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | locale={settings.locale} | "
        f"allow_writes={settings.allow_writes} | decorator_layers={settings.decorator_layers} | "
        f"log_level={settings.log_level} json={settings.log_json}"
    )


@app.command()
def run(
    scenario: str = typer.Option(
        "all",
        "--scenario",
        "--scenarios",
        "-s",
        help="Scenario to run (e.g., builder, adapter, decorator, facade, proxy, singleton, all, list).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON instead of a table."),
) -> None:
    """
    Run one or all pattern scenarios and show the notifications they emit.
    """
    if scenario == "list":
        typer.echo("Available scenarios: " + ", ".join(available_scenarios()))
        return

    _setup_logging()
    names = ["all"] if scenario == "all" else [scenario]
    try:
        results = run_scenarios(names)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--scenario") from exc

    if as_json:
        typer.echo(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        print_results(results)


@app.command()
def add(
    title: str = typer.Argument(..., help="Book title."),
    author: str = typer.Option("", "--author", "-a", help="Author name."),
    year: int = typer.Option(0, "--year", "-y", help="Publication year."),
    details: bool = typer.Option(False, "--details", help="Report each field before adding."),
    guarded: bool = typer.Option(
        False, "--guarded", help="Check BOOKSHELF_ALLOW_WRITES before adding."
    ),
) -> None:
    """
    Add a book through the facade, or through decorated / guarded sinks.
    """
    _setup_logging()
    library = get_library()
    with library.hub.subscribed(EchoNotifier(locale=library.locale)):
        if not (details or guarded):
            library.facade().add_book(title, author, year)
            return

        sink: BookSink = library.repository
        if guarded:
            sink = library.proxy(inner=sink)
        if details:
            sink = library.decorated(inner=sink)
        sink.add(build_record(title, author, year))


@app.command()
def remove(title: str = typer.Argument(..., help="Book title.")) -> None:
    """
    Remove a book by title through the facade.
    """
    _setup_logging()
    library = get_library()
    with library.hub.subscribed(EchoNotifier(locale=library.locale)):
        library.facade().remove_book(title)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
