"""Runtime configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class KubeUIConfig(BaseModel):
    """Settings shared by the backend collaborators and the views."""

    model_config = ConfigDict(extra="forbid")

    kubeconfig: str | None = None
    context: str | None = None
    request_timeout: float = 5.0
    log_timeout: float = 5.0
    log_tail_lines: int = 100
    page_size: int = 10

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        if v is None:
            return None
        return str(Path(v).expanduser())

    @field_validator("request_timeout", "log_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeouts are positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("log_tail_lines", "page_size")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("value must be non-negative")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubeUIConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            KUBEUI_KUBECONFIG: Path to the kubeconfig file
            KUBEUI_CONTEXT: Context to use instead of the kubeconfig's current one
            KUBEUI_TIMEOUT: Backend request timeout in seconds
            KUBEUI_PAGE_SIZE: Rows per page in list views
        """
        config_dict = base_config.copy() if base_config else {}

        if kubeconfig := os.environ.get("KUBEUI_KUBECONFIG"):
            config_dict["kubeconfig"] = kubeconfig

        if context := os.environ.get("KUBEUI_CONTEXT"):
            config_dict["context"] = context

        if timeout := os.environ.get("KUBEUI_TIMEOUT"):
            config_dict["request_timeout"] = float(timeout)

        if page_size := os.environ.get("KUBEUI_PAGE_SIZE"):
            config_dict["page_size"] = int(page_size)

        return cls.model_validate(config_dict)
