"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console

from kubeui import __version__
from kubeui.cli.commands import contexts, pods
from kubeui.cli.commands.common import CLISettings
from kubeui.logging.config import configure_logging

app = typer.Typer(
    name="kubeui",
    help="Terminal UIs for switching Kubernetes contexts and browsing pods.",
    add_completion=True,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kubeui version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log at INFO level.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log at DEBUG level.",
    ),
    kubeconfig: str | None = typer.Option(
        None,
        "--kubeconfig",
        "-c",
        help="Path to the kubeconfig file (defaults to $KUBECONFIG or ~/.kube/config).",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Render without colours.",
    ),
) -> None:
    """kubeui - Kubernetes context switcher and pod browser."""
    # The TUI owns the terminal, so logs only go to the file.
    configure_logging(verbose=verbose, debug=debug, console=False)
    ctx.obj = CLISettings(kubeconfig=kubeconfig, no_color=no_color)


app.command(name="cxs")(contexts.cxs)
app.command(name="pods")(pods.pods)


if __name__ == "__main__":
    app()
