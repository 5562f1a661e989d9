"""Logging configuration for kubeui."""

from kubeui.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
