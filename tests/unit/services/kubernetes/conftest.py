"""Shared fixtures for Kubernetes service tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubeui.integrations.kubernetes.client import KubernetesClient


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock Kubernetes client.

    Errors go through the real translation and retries are disabled, so
    tests see exactly the exception a manager raises.
    """
    mock_client = MagicMock()
    mock_client.timeout = 5
    mock_client.log_timeout = 5
    mock_client.log_tail_lines = 100
    mock_client.translate_api_exception.side_effect = KubernetesClient.translate_api_exception
    mock_client.make_retry_decorator.return_value = lambda fn: fn
    return mock_client
