"""Fixtures for the pods app screens."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubeui.integrations.kubernetes.models import EventSummary, PodDetail, PodSummary
from kubeui.tui.apps.pods.state import PodsState


def make_pod(
    name: str, status: str = "Running", containers: list[str] | None = None
) -> PodSummary:
    return PodSummary(
        name=name,
        namespace="shop",
        ready="1/1",
        status=status,
        restarts="0",
        age="5m",
        containers=containers or ["app"],
        labels={"app": "web"},
        annotations={"owner": "team-a"},
    )


@pytest.fixture
def pods() -> list[PodSummary]:
    return [make_pod("web-1"), make_pod("web-2"), make_pod("db-1", status="CrashLoopBackOff")]


@pytest.fixture
def detail() -> PodDetail:
    return PodDetail(
        pod=make_pod("web-1", containers=["app", "sidecar"]),
        events=[
            EventSummary(
                name="web-1.1",
                type="Normal",
                reason="Pulled",
                age="2m",
                source="kubelet",
                message="Container image pulled",
            )
        ],
        logs={
            "app": "starting\n{\"level\": \"info\", \"msg\": \"ready\"}\n",
            "sidecar": "proxy up\n",
        },
    )


@pytest.fixture
def backend(pods: list[PodSummary], detail: PodDetail) -> MagicMock:
    backend = MagicMock()
    backend.list_namespaces.return_value = ["default", "kube-system", "shop"]
    backend.list_pods.return_value = pods
    backend.get_pod.return_value = detail
    backend.delete_pod.side_effect = lambda namespace, name: name
    return backend


@pytest.fixture
def store() -> MagicMock:
    return MagicMock()


@pytest.fixture
def state(backend: MagicMock, store: MagicMock) -> PodsState:
    return PodsState(backend=backend, store=store, context="dev", namespace="shop")
