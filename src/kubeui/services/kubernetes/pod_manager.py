"""Pod operations: list, inspect, tail logs and delete."""

from __future__ import annotations

from typing import Any

from kubeui.integrations.kubernetes.models import EventSummary, PodDetail, PodSummary
from kubeui.services.kubernetes.base import K8sBaseManager


class PodManager(K8sBaseManager):
    """Manager for pods in a single namespace at a time."""

    _entity_name = "pod"

    def list_pods(self, namespace: str) -> list[PodSummary]:
        """List pods in a namespace.

        Args:
            namespace: Target namespace.

        Returns:
            List of pod summaries in API order.
        """
        self._log.debug("listing_pods", namespace=namespace)
        try:
            result = self._client.core_v1.list_namespaced_pod(
                namespace=namespace, **self._bounded()
            )
            pods = [PodSummary.from_k8s_object(pod) for pod in result.items]
            self._log.debug("listed_pods", namespace=namespace, count=len(pods))
            return pods
        except Exception as e:
            self._handle_api_error(e, "Pod", None, namespace)

    def get_pod(self, name: str, namespace: str) -> PodDetail:
        """Fetch a pod with its events and the log tail of every container.

        Args:
            name: Pod name.
            namespace: Target namespace.

        Returns:
            The pod detail.
        """
        self._log.debug("getting_pod", name=name, namespace=namespace)
        try:
            pod = self._client.core_v1.read_namespaced_pod(
                name=name, namespace=namespace, **self._bounded()
            )
            events = self._client.core_v1.list_namespaced_event(
                namespace=namespace,
                field_selector=f"involvedObject.name={name}",
                **self._bounded(),
            )
        except Exception as e:
            self._handle_api_error(e, "Pod", name, namespace)

        summary = PodSummary.from_k8s_object(pod)
        logs = {
            container: self.get_pod_logs(name, namespace, container=container)
            for container in summary.containers
        }
        return PodDetail(
            pod=summary,
            events=[EventSummary.from_k8s_object(event) for event in events.items],
            logs=logs,
        )

    def get_pod_logs(
        self,
        name: str,
        namespace: str,
        *,
        container: str | None = None,
        tail_lines: int | None = None,
    ) -> str:
        """Get the tail of a container's logs.

        Args:
            name: Pod name.
            namespace: Target namespace.
            container: Container name (required for multi-container pods).
            tail_lines: Lines from the end of the log; defaults to the configured tail.

        Returns:
            Log content as string.
        """
        self._log.debug("getting_pod_logs", name=name, namespace=namespace, container=container)
        try:
            kwargs: dict[str, Any] = {
                "name": name,
                "namespace": namespace,
                "tail_lines": tail_lines or self._client.log_tail_lines,
                **self._bounded(self._client.log_timeout),
            }
            if container:
                kwargs["container"] = container

            logs: str = self._client.core_v1.read_namespaced_pod_log(**kwargs)
            return logs
        except Exception as e:
            self._handle_api_error(e, "Pod", name, namespace)

    def delete_pod(self, name: str, namespace: str) -> str:
        """Delete a pod.

        Returns:
            The name of the deleted pod.
        """
        self._log.info("deleting_pod", name=name, namespace=namespace)
        try:
            self._client.core_v1.delete_namespaced_pod(
                name=name, namespace=namespace, **self._bounded()
            )
        except Exception as e:
            self._handle_api_error(e, "Pod", name, namespace)
        self._log.info("deleted_pod", name=name, namespace=namespace)
        return name
