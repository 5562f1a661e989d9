"""Exceptions raised by the kubeui view engine."""

from __future__ import annotations


class KubeUIError(Exception):
    """Base exception for view engine errors."""


class UnknownRouteError(KubeUIError, LookupError):
    """Raised when navigating to a screen name that was never registered.

    Attributes:
        name: The unregistered screen name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"No screen registered under '{name}'")
        self.name = name
