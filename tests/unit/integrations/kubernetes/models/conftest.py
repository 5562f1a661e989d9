"""Builders for kubernetes SDK objects used by the model tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from kubernetes.client import (
    V1ContainerState,
    V1ContainerStateRunning,
    V1ContainerStateTerminated,
    V1ContainerStateWaiting,
    V1ContainerStatus,
    V1ObjectMeta,
    V1Pod,
    V1PodCondition,
    V1PodStatus,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


def running() -> V1ContainerState:
    return V1ContainerState(running=V1ContainerStateRunning(started_at=NOW))


def waiting(reason: str) -> V1ContainerState:
    return V1ContainerState(waiting=V1ContainerStateWaiting(reason=reason))


def terminated(
    exit_code: int = 0,
    reason: str | None = None,
    signal: int | None = None,
    finished_at: datetime | None = None,
) -> V1ContainerState:
    return V1ContainerState(
        terminated=V1ContainerStateTerminated(
            exit_code=exit_code, reason=reason, signal=signal, finished_at=finished_at
        )
    )


def container_status(
    name: str = "app",
    state: V1ContainerState | None = None,
    ready: bool = True,
    restart_count: int = 0,
    last_state: V1ContainerState | None = None,
) -> V1ContainerStatus:
    return V1ContainerStatus(
        name=name,
        image="nginx:1.27",
        image_id="",
        ready=ready,
        restart_count=restart_count,
        state=state or running(),
        last_state=last_state,
    )


def make_v1_pod(
    name: str = "web-1",
    phase: str = "Running",
    statuses: list[V1ContainerStatus] | None = None,
    init_statuses: list[V1ContainerStatus] | None = None,
    spec: object | None = None,
    reason: str | None = None,
    deleting: bool = False,
    ready_condition: str | None = None,
    age: timedelta = timedelta(hours=2),
) -> V1Pod:
    """A V1Pod in namespace ``shop`` created ``age`` before ``NOW``."""
    conditions = None
    if ready_condition is not None:
        conditions = [V1PodCondition(type="Ready", status=ready_condition)]
    return V1Pod(
        metadata=V1ObjectMeta(
            name=name,
            namespace="shop",
            uid=f"uid-{name}",
            creation_timestamp=NOW - age,
            deletion_timestamp=NOW if deleting else None,
            labels={"app": "web"},
            annotations={"team": "storefront"},
        ),
        spec=spec,
        status=V1PodStatus(
            phase=phase,
            reason=reason,
            container_statuses=statuses if statuses is not None else [container_status()],
            init_container_statuses=init_statuses,
            conditions=conditions,
        ),
    )


@pytest.fixture
def now() -> datetime:
    return NOW
