"""Unit tests for Kubernetes client."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from kubernetes.client import ApiException
from kubernetes.config import ConfigException
from urllib3.exceptions import MaxRetryError, ProtocolError, ReadTimeoutError

from kubeui.config import KubeUIConfig
from kubeui.integrations.kubernetes.client import KubernetesClient
from kubeui.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesClientInitialization:
    """Test KubernetesClient initialization."""

    @patch("kubernetes.config")
    def test_init_with_default_config(self, mock_config: MagicMock) -> None:
        """Test client initialization with default kubeconfig discovery."""
        mock_config.list_kube_config_contexts.return_value = ([], {"name": "dev"})
        config = KubeUIConfig()

        client = KubernetesClient(config)

        assert client._config == config
        assert client._retries == 2
        mock_config.load_kube_config.assert_called_once()
        kwargs = mock_config.load_kube_config.call_args.kwargs
        assert kwargs["config_file"] is None
        assert kwargs["context"] is None
        assert client._current_context == "dev"

    @patch("kubernetes.config")
    def test_init_with_explicit_context(self, mock_config: MagicMock) -> None:
        """Test an explicit kubeconfig and context are passed through."""
        config = KubeUIConfig(kubeconfig="/path/to/config", context="prod")

        client = KubernetesClient(config)

        kwargs = mock_config.load_kube_config.call_args.kwargs
        assert kwargs["config_file"] == "/path/to/config"
        assert kwargs["context"] == "prod"
        assert client._current_context == "prod"

    @patch("kubernetes.config.load_incluster_config")
    @patch("kubernetes.config.load_kube_config")
    def test_init_fallback_to_incluster(
        self, mock_load: MagicMock, mock_incluster: MagicMock
    ) -> None:
        """Test client falls back to in-cluster config without a kubeconfig."""
        mock_load.side_effect = ConfigException("no kubeconfig")

        client = KubernetesClient(KubeUIConfig())

        mock_incluster.assert_called_once()
        assert client._current_context == "in-cluster"

    @patch("kubernetes.config.load_incluster_config")
    @patch("kubernetes.config.load_kube_config")
    def test_explicit_kubeconfig_does_not_fall_back(
        self, mock_load: MagicMock, mock_incluster: MagicMock
    ) -> None:
        """Test a broken explicit kubeconfig is reported instead of ignored."""
        mock_load.side_effect = ConfigException("bad file")

        with pytest.raises(KubernetesConnectionError, match="Cannot load kubeconfig"):
            KubernetesClient(KubeUIConfig(kubeconfig="/path/to/config"))
        mock_incluster.assert_not_called()

    @patch("kubernetes.config.load_incluster_config")
    @patch("kubernetes.config.load_kube_config")
    def test_no_configuration_at_all(self, mock_load: MagicMock, mock_incluster: MagicMock) -> None:
        """Test failure when neither kubeconfig nor in-cluster config exists."""
        mock_load.side_effect = ConfigException("no kubeconfig")
        mock_incluster.side_effect = ConfigException("not in cluster")

        with pytest.raises(KubernetesConnectionError, match="Cannot load Kubernetes configuration"):
            KubernetesClient(KubeUIConfig())


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesClientProperties:
    """Test lazily created APIs, timeouts and lifecycle."""

    @patch("kubernetes.config")
    def test_core_v1_is_cached(self, mock_config: MagicMock) -> None:
        """Test CoreV1Api is created once."""
        client = KubernetesClient(KubeUIConfig(context="dev"))
        assert client.core_v1 is client.core_v1

    @patch("kubernetes.config")
    def test_timeouts_from_config(self, mock_config: MagicMock) -> None:
        """Test timeouts and log tail come from the configuration."""
        client = KubernetesClient(
            KubeUIConfig(context="dev", request_timeout=3, log_timeout=4, log_tail_lines=50)
        )
        assert client.timeout == 3
        assert client.log_timeout == 4
        assert client.log_tail_lines == 50

    @patch("kubernetes.config")
    def test_context_manager_closes(self, mock_config: MagicMock) -> None:
        """Test leaving the context closes the API client."""
        with KubernetesClient(KubeUIConfig(context="dev")) as client:
            assert client._api_client is not None
        assert client._api_client is None


@pytest.mark.unit
@pytest.mark.kubernetes
class TestTranslateApiException:
    """Test mapping of API and transport errors."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (401, KubernetesAuthError),
            (403, KubernetesAuthError),
            (404, KubernetesNotFoundError),
            (409, KubernetesConflictError),
            (400, KubernetesValidationError),
            (422, KubernetesValidationError),
        ],
    )
    def test_status_codes(self, status: int, expected: type[KubernetesError]) -> None:
        """Test each status maps to its error type."""
        error = KubernetesClient.translate_api_exception(
            ApiException(status=status, reason="Reason"), "Pod", "web-1", "shop"
        )
        assert type(error) is expected

    def test_not_found_names_resource(self) -> None:
        error = KubernetesClient.translate_api_exception(
            ApiException(status=404, reason="Not Found"), "Pod", "web-1", "shop"
        )
        assert str(error).startswith("Pod 'web-1' not found in namespace 'shop'")

    def test_other_status(self) -> None:
        """Test unmapped statuses keep the code."""
        error = KubernetesClient.translate_api_exception(
            ApiException(status=500, reason="Internal Server Error")
        )
        assert type(error) is KubernetesError
        assert error.status_code == 500

    def test_read_timeout(self) -> None:
        """Test a transport timeout becomes a timeout error."""
        error = KubernetesClient.translate_api_exception(
            ReadTimeoutError(None, "/api/v1/pods", "read timed out"), timeout=5
        )
        assert isinstance(error, KubernetesTimeoutError)
        assert error.timeout_seconds == 5

    def test_connection_reset(self) -> None:
        """Test other transport errors become connection errors."""
        cause = ProtocolError("connection reset")
        error = KubernetesClient.translate_api_exception(
            MaxRetryError(None, "/api/v1/pods", reason=cause)
        )
        assert isinstance(error, KubernetesConnectionError)

    def test_kubernetes_error_passes_through(self) -> None:
        original = KubernetesNotFoundError()
        assert KubernetesClient.translate_api_exception(original) is original

    def test_unexpected_error(self) -> None:
        error = KubernetesClient.translate_api_exception(ValueError("odd"), "Pod", "web-1")
        assert type(error) is KubernetesError
        assert error.message == "odd"
