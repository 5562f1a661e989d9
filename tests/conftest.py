"""Shared pytest fixtures for kubeui tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
import typer
import yaml
from typer.testing import CliRunner

from kubeui.cli.main import app

KUBECONFIG = {
    "apiVersion": "v1",
    "kind": "Config",
    "current-context": "dev",
    "clusters": [
        {"name": "dev-cluster", "cluster": {"server": "https://dev.example:6443"}},
        {"name": "prod-cluster", "cluster": {"server": "https://prod.example:6443"}},
    ],
    "users": [
        {"name": "dev-user", "user": {"token": "dev-token"}},
        {"name": "prod-user", "user": {"token": "prod-token"}},
    ],
    "contexts": [
        {"name": "dev", "context": {"cluster": "dev-cluster", "user": "dev-user"}},
        {
            "name": "prod",
            "context": {"cluster": "prod-cluster", "user": "prod-user", "namespace": "shop"},
        },
    ],
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def kubeconfig_file(tmp_path: Path) -> Path:
    """Write a two-context kubeconfig and return its path."""
    path = tmp_path / "config"
    path.write_text(yaml.safe_dump(KUBECONFIG, sort_keys=False))
    return path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    # Clear any KUBEUI_ prefixed environment variables
    for key in list(os.environ.keys()):
        if key.startswith("KUBEUI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("KUBECONFIG", raising=False)


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path) -> Generator[Path]:
    """Keep file logging out of the real home directory."""
    from unittest.mock import patch

    log_dir = tmp_path / "logs"
    with patch("kubeui.logging.config.LOG_DIR", log_dir):
        yield log_dir


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
