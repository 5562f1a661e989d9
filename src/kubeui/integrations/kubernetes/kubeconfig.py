"""Kubeconfig-backed context store.

Reads and rewrites the kubeconfig YAML file directly so that switching and
deleting contexts persists for kubectl and every other kubeconfig consumer.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog
import yaml

from kubeui.integrations.kubernetes.exceptions import KubeconfigError

logger = structlog.get_logger()

DEFAULT_NAMESPACE = "default"


def default_kubeconfig_path() -> Path:
    """Resolve the kubeconfig path the way kubectl does.

    The first entry of ``$KUBECONFIG`` wins, otherwise ``~/.kube/config``.
    """
    env_value = os.environ.get("KUBECONFIG", "")
    for entry in env_value.split(os.pathsep):
        if entry:
            return Path(entry).expanduser()
    return Path.home() / ".kube" / "config"


def _named(entries: list[dict[str, Any]] | None, name: str) -> dict[str, Any] | None:
    for entry in entries or []:
        if entry.get("name") == name:
            return entry
    return None


class KubeconfigStore:
    """Context store persisted in a kubeconfig file.

    Args:
        path: Explicit kubeconfig path, or None for default discovery.

    Raises:
        KubeconfigError: If the file cannot be read or parsed.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path).expanduser() if path else default_kubeconfig_path()
        self._log = logger.bind(kubeconfig=str(self._path))
        self._config = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        try:
            with self._path.open(encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except OSError as e:
            raise KubeconfigError(
                f"Cannot read kubeconfig: {e.strerror or e}", path=str(self._path)
            ) from e
        except yaml.YAMLError as e:
            raise KubeconfigError(f"Invalid kubeconfig YAML: {e}", path=str(self._path)) from e

        if not isinstance(data, dict):
            raise KubeconfigError("Kubeconfig must be a mapping", path=str(self._path))

        for section in ("contexts", "clusters", "users"):
            data[section] = data.get(section) or []
        self._log.debug("loaded_kubeconfig", contexts=len(data["contexts"]))
        return data

    def _save(self) -> None:
        tmp_path = self._path.with_name(f".{self._path.name}.tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as fh:
                yaml.safe_dump(self._config, fh, default_flow_style=False, sort_keys=False)
            tmp_path.replace(self._path)
        except OSError as e:
            raise KubeconfigError(
                f"Cannot write kubeconfig: {e.strerror or e}", path=str(self._path)
            ) from e

    # =========================================================================
    # Queries
    # =========================================================================

    def list_contexts(self) -> list[str]:
        """List context names in file order."""
        return [ctx["name"] for ctx in self._config["contexts"] if ctx.get("name")]

    def current_context(self) -> str:
        """Name of the current context, or an empty string when none is set."""
        return self._config.get("current-context") or ""

    def context_namespace(self, name: str | None = None) -> str:
        """Default namespace of a context (the current one when name is None)."""
        entry = _named(self._config["contexts"], name or self.current_context())
        if entry is None:
            return DEFAULT_NAMESPACE
        return (entry.get("context") or {}).get("namespace") or DEFAULT_NAMESPACE

    def has_context(self, name: str) -> bool:
        return _named(self._config["contexts"], name) is not None

    # =========================================================================
    # Mutations
    # =========================================================================

    def switch_context(self, name: str, namespace: str | None = None) -> None:
        """Make ``name`` the current context, optionally setting its default namespace.

        Raises:
            KubeconfigError: If the context does not exist or the file cannot be written.
        """
        entry = _named(self._config["contexts"], name)
        if entry is None:
            raise KubeconfigError(f"Context '{name}' does not exist", path=str(self._path))

        if namespace:
            details = entry.get("context") or {}
            details["namespace"] = namespace
            entry["context"] = details

        self._config["current-context"] = name
        self._save()
        self._log.info("switched_context", context=name, namespace=namespace)

    def delete_context(self, name: str) -> None:
        """Remove a context entry, clearing current-context if it pointed at it."""
        self._remove("contexts", name, "Context")
        if self._config.get("current-context") == name:
            self._config["current-context"] = ""
        self._save()
        self._log.info("deleted_context", context=name)

    def delete_user(self, name: str) -> None:
        """Remove a user (auth info) entry."""
        self._remove("users", name, "User")
        self._save()
        self._log.info("deleted_user", user=name)

    def delete_cluster_entry(self, name: str) -> None:
        """Remove a cluster entry."""
        self._remove("clusters", name, "Cluster")
        self._save()
        self._log.info("deleted_cluster_entry", cluster=name)

    def remove_context(self, name: str) -> None:
        """Delete a context together with the cluster and user entries it references.

        Cluster and user entries that are missing from the file are skipped.
        """
        entry = _named(self._config["contexts"], name)
        if entry is None:
            raise KubeconfigError(f"Context '{name}' does not exist", path=str(self._path))
        details = entry.get("context") or {}
        cluster = details.get("cluster") or name
        user = details.get("user") or name

        self.delete_context(name)
        if _named(self._config["clusters"], cluster) is not None:
            self.delete_cluster_entry(cluster)
        if _named(self._config["users"], user) is not None:
            self.delete_user(user)

    def _remove(self, section: str, name: str, label: str) -> None:
        entries = self._config[section]
        remaining = [entry for entry in entries if entry.get("name") != name]
        if len(remaining) == len(entries):
            raise KubeconfigError(f"{label} '{name}' does not exist", path=str(self._path))
        self._config[section] = remaining
