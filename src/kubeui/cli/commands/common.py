"""Helpers shared by the subcommands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

import structlog
import typer
from rich.console import Console

from kubeui.config import KubeUIConfig
from kubeui.tui.theme import DEFAULT_THEME, MONOCHROME_THEME, Theme

console = Console(stderr=True)
logger = structlog.get_logger()


@dataclass
class CLISettings:
    """Global options collected by the top-level callback."""

    kubeconfig: str | None = None
    no_color: bool = False

    @property
    def theme(self) -> Theme:
        return MONOCHROME_THEME if self.no_color else DEFAULT_THEME

    def load_config(self) -> KubeUIConfig:
        """Environment configuration with ``--kubeconfig`` taking precedence."""
        config = KubeUIConfig.from_env()
        if self.kubeconfig:
            config = KubeUIConfig.model_validate(
                {**config.model_dump(), "kubeconfig": self.kubeconfig}
            )
        return config


def settings_from(ctx: typer.Context) -> CLISettings:
    return ctx.obj if isinstance(ctx.obj, CLISettings) else CLISettings()


def fail(command: str, error: Exception) -> NoReturn:
    """Report a startup failure and exit with status 1."""
    logger.error("startup_failed", command=command, error=str(error))
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(code=1)
