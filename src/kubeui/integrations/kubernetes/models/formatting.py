"""kubectl-compatible formatting of pod status, restarts and ages.

The functions here accept kubernetes SDK objects (``V1Pod``, ``CoreV1Event``)
or anything shaped like them and produce the strings kubectl prints in
``kubectl get pods``.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, NamedTuple

from kubeui.integrations.kubernetes.models.base import _safe_get


class PodFormat(NamedTuple):
    """Display values for one pod row."""

    name: str
    ready: str
    status: str
    restarts: str
    age: str


class EventFormat(NamedTuple):
    """Display values for one event row."""

    type: str
    reason: str
    age: str
    source: str
    message: str


def human_duration(delta: timedelta) -> str:
    """Render a duration the way kubectl does ("45s", "3m20s", "5h", "12d", "2y30d")."""
    seconds = int(delta.total_seconds())
    if seconds < -1:
        return "<invalid>"
    if seconds < 0:
        return "0s"
    if seconds < 60 * 2:
        return f"{seconds}s"

    minutes = seconds // 60
    if minutes < 10:
        rest = seconds % 60
        return f"{minutes}m" if rest == 0 else f"{minutes}m{rest}s"
    if minutes < 60 * 3:
        return f"{minutes}m"

    hours = seconds // 3600
    if hours < 8:
        rest = minutes % 60
        return f"{hours}h" if rest == 0 else f"{hours}h{rest}m"
    if hours < 48:
        return f"{hours}h"
    if hours < 24 * 8:
        rest = hours % 24
        return f"{hours // 24}d" if rest == 0 else f"{hours // 24}d{rest}h"
    if hours < 24 * 365 * 2:
        return f"{hours // 24}d"
    if hours < 24 * 365 * 8:
        rest = (hours // 24) % 365
        years = hours // 24 // 365
        return f"{years}y" if rest == 0 else f"{years}y{rest}d"
    return f"{hours // 24 // 365}y"


def age_since(timestamp: datetime | str | None, now: datetime | None = None) -> str:
    """Human duration between ``timestamp`` and ``now``, or "<unknown>"."""
    if timestamp is None:
        return "<unknown>"
    if isinstance(timestamp, str):
        try:
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        except ValueError:
            return "<unknown>"
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    return human_duration(now - timestamp)


def _later(current: datetime | None, candidate: datetime | None) -> datetime | None:
    if candidate is None:
        return current
    if current is None or current < candidate:
        return candidate
    return current


def _last_finished_at(container: Any) -> datetime | None:
    return _safe_get(container, "last_state", "terminated", "finished_at")


def _termination_reason(terminated: Any, prefix: str = "") -> str:
    reason = getattr(terminated, "reason", None)
    if reason:
        # kubectl prints a space after "Init:" only for named reasons
        return f"{prefix} {reason}" if prefix else reason
    signal = getattr(terminated, "signal", None)
    if signal:
        return f"{prefix}Signal:{signal}"
    return f"{prefix}ExitCode:{getattr(terminated, 'exit_code', 0) or 0}"


def ready_count(pod: Any) -> int:
    """Number of containers that are both ready and running."""
    statuses = _safe_get(pod, "status", "container_statuses") or []
    return sum(
        1 for c in statuses if getattr(c, "ready", False) and _safe_get(c, "state", "running")
    )


def _initializing_status(pod: Any, status: str) -> tuple[bool, str, datetime | None]:
    initializing = False
    last_restart: datetime | None = None
    init_statuses = _safe_get(pod, "status", "init_container_statuses") or []
    init_total = len(_safe_get(pod, "spec", "init_containers") or [])

    for index, container in enumerate(init_statuses):
        last_restart = _later(last_restart, _last_finished_at(container))

        terminated = _safe_get(container, "state", "terminated")
        waiting_reason = _safe_get(container, "state", "waiting", "reason")

        if terminated is not None and (getattr(terminated, "exit_code", 0) or 0) == 0:
            continue
        if terminated is not None:
            status = _termination_reason(terminated, prefix="Init:")
            initializing = True
        elif waiting_reason and waiting_reason != "PodInitializing":
            status = f"Init:{waiting_reason}"
            initializing = True
        else:
            status = f"Init:{index}/{init_total}"
            initializing = True

    return initializing, status, last_restart


def _running_status(
    pod: Any, status: str, last_restart: datetime | None
) -> tuple[str, datetime | None, int]:
    max_restarts = 0
    has_running = False
    statuses = _safe_get(pod, "status", "container_statuses") or []

    for container in reversed(statuses):
        max_restarts = max(max_restarts, getattr(container, "restart_count", 0) or 0)
        last_restart = _later(last_restart, _last_finished_at(container))

        waiting_reason = _safe_get(container, "state", "waiting", "reason")
        terminated = _safe_get(container, "state", "terminated")
        if waiting_reason:
            status = waiting_reason
            continue
        if terminated is not None:
            status = _termination_reason(terminated)
            continue
        if getattr(container, "ready", False) and _safe_get(container, "state", "running"):
            has_running = True

    if status == "Completed" and has_running:
        conditions = _safe_get(pod, "status", "conditions") or []
        pod_ready = any(
            getattr(c, "type", None) == "Ready" and getattr(c, "status", None) == "True"
            for c in conditions
        )
        status = "Running" if pod_ready else "NotReady"

    return status, last_restart, max_restarts


def pod_status(pod: Any) -> tuple[str, datetime | None, int]:
    """Compute kubectl's STATUS column, the last restart time and the max restart count."""
    status = _safe_get(pod, "status", "reason") or _safe_get(
        pod, "status", "phase", default="Unknown"
    )
    initializing, status, last_restart = _initializing_status(pod, status)
    max_restarts = 0
    if not initializing:
        status, last_restart, max_restarts = _running_status(pod, status, last_restart)

    if _safe_get(pod, "metadata", "deletion_timestamp") is not None:
        status = "Unknown" if _safe_get(pod, "status", "reason") == "NodeLost" else "Terminating"

    return status, last_restart, max_restarts


def format_pod(pod: Any, now: datetime | None = None) -> PodFormat:
    """Build the NAME/READY/STATUS/RESTARTS/AGE values for a pod."""
    now = now or datetime.now(UTC)
    status, last_restart, max_restarts = pod_status(pod)
    total = len(_safe_get(pod, "status", "container_statuses") or [])

    restarts = str(max_restarts)
    if last_restart is not None:
        restarts += f" ({age_since(last_restart, now)} ago)"

    return PodFormat(
        name=_safe_get(pod, "metadata", "name", default=""),
        ready=f"{ready_count(pod)}/{total}",
        status=status,
        restarts=restarts,
        age=age_since(_safe_get(pod, "metadata", "creation_timestamp"), now),
    )


def format_event(event: Any, now: datetime | None = None) -> EventFormat:
    """Build the TYPE/REASON/AGE/FROM/MESSAGE values for an event."""
    timestamp = (
        getattr(event, "last_timestamp", None)
        or getattr(event, "event_time", None)
        or _safe_get(event, "metadata", "creation_timestamp")
    )
    return EventFormat(
        type=getattr(event, "type", None) or "",
        reason=getattr(event, "reason", None) or "",
        age=age_since(timestamp, now),
        source=_safe_get(event, "source", "component", default=""),
        message=(getattr(event, "message", None) or "").strip(),
    )
