"""Exceptions raised by the Kubernetes backend and the kubeconfig store."""

from __future__ import annotations


class KubernetesError(Exception):
    """Base exception for cluster and kubeconfig operations.

    Every collaborator failure a view can receive is one of these, so views
    only need a single fallback path.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the Kubernetes API (if applicable).
        resource_type: Type of resource involved (e.g., "Pod", "Namespace").
        resource_name: Name of the resource involved.
        namespace: Namespace of the resource (if applicable).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.resource_type and self.resource_name:
            loc = f"[{self.resource_type}/{self.resource_name}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)


class KubernetesConnectionError(KubernetesError):
    """The cluster could not be reached or the client could not be built."""

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """Authentication or authorization failed (401/403)."""

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """A requested resource does not exist (404)."""

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' not found"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=404,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesValidationError(KubernetesError):
    """The API rejected the request as invalid (400/422)."""

    def __init__(
        self,
        message: str = "Invalid request",
        status_code: int | None = 422,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class KubernetesConflictError(KubernetesError):
    """The resource was modified or removed concurrently (409)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' conflicts with its current state"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=409,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesTimeoutError(KubernetesError):
    """A backend call exceeded its time bound."""

    def __init__(
        self,
        message: str = "Kubernetes operation timed out",
        timeout_seconds: float | None = None,
    ) -> None:
        if timeout_seconds:
            message = f"{message} (after {timeout_seconds:g}s)"
        super().__init__(message=message)
        self.timeout_seconds = timeout_seconds


class KubeconfigError(KubernetesError):
    """The kubeconfig file could not be read, modified or written.

    Attributes:
        path: The kubeconfig file involved, if known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message=message)
        self.path = path
