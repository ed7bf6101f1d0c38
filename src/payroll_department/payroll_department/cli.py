"""CLI entry point for payroll-department."""

from __future__ import annotations

import logging

import click

from . import __version__
from .container import build_container
from .main import create_app, load_settings
from .shell.console import ConsoleShell


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Payroll department: register work types and compute average pay."""
    settings = load_settings()
    _configure_logging(bool(getattr(settings, "DEBUG", False)))
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_obj
def shell(settings) -> None:
    """Run the interactive console menu."""
    container = build_container(settings=settings)
    ConsoleShell(container.registry, precision=container.average_precision).run()


@main.command()
@click.option("--host", default=None, help="Interface to bind (defaults to WEB_HOST).")
@click.option("--port", type=int, default=None, help="Port to listen on (defaults to WEB_PORT).")
@click.pass_obj
def serve(settings, host, port) -> None:
    """Run the JSON API on the Flask development server."""
    app = create_app(settings)
    app.run(
        host=host or getattr(settings, "WEB_HOST", "127.0.0.1"),
        port=port or int(getattr(settings, "WEB_PORT", 5000)),
        threaded=False,
    )
