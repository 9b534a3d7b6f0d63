"""Typer CLI application."""

import contextlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from term_edit import __version__
from term_edit.core.constants import MESSAGE_TIMEOUT, TAB_STOP
from term_edit.core.errors import TermEditError
from term_edit.core.session import EditorConfig
from term_edit.log import configure_logging

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        print(f"term-edit {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="term-edit",
        help="A minimal full-screen terminal text editor.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[str], typer.Argument(help="File to open")] = None,
        tab_stop: Annotated[int, typer.Option("--tab-stop", "-t", min=1, help="Columns per tab stop")] = TAB_STOP,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write a debug log here")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at debug level")] = False,
        version: Annotated[
            bool,
            typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = False,
    ) -> None:
        """Open PATH (or an empty buffer) in the editor. [bold]Ctrl-Q[/] quits."""
        from term_edit.cli.core.terminal import Terminal
        from term_edit.cli.studio.editor import EditorApp

        configure_logging(log_file, verbose)
        config = EditorConfig(tab_stop=tab_stop, message_timeout=MESSAGE_TIMEOUT)
        terminal = Terminal()

        try:
            EditorApp(path, config, terminal=terminal).run()
        except TermEditError as exc:
            with contextlib.suppress(TermEditError, OSError):
                terminal.clear()
            logger.error("Fatal: %s", exc)
            console.print(f"[red]term-edit:[/] {escape(str(exc))}")
            raise typer.Exit(1)

    return app
