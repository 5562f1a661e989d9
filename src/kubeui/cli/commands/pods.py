"""``kubeui pods``: interactive pod browser."""

from __future__ import annotations

import structlog
import typer

from kubeui.cli.commands.common import fail, settings_from
from kubeui.integrations.kubernetes.client import KubernetesClient
from kubeui.integrations.kubernetes.exceptions import KubeconfigError, KubernetesError
from kubeui.integrations.kubernetes.kubeconfig import KubeconfigStore
from kubeui.services.kubernetes.backend import KubeBackend
from kubeui.tui.app import KubeUIApp
from kubeui.tui.apps.pods import ERROR_INFO, PodsState, build_router

logger = structlog.get_logger()


def pods(ctx: typer.Context) -> None:
    """Browse, inspect and delete pods in the current context.

    Starts on the namespace picker while the context's namespace is
    "default", otherwise on the pod list.

    Examples:
        kubeui pods
        KUBEUI_CONTEXT=staging kubeui pods
    """
    settings = settings_from(ctx)
    try:
        config = settings.load_config()
        store = KubeconfigStore(config.kubeconfig)
        context = config.context or store.current_context()
        if not context:
            raise KubeconfigError("No current context is set", path=str(store.path))
        client = KubernetesClient(config)
    except (KubernetesError, ValueError) as e:
        fail("pods", e)

    state = PodsState(
        backend=KubeBackend(client),
        store=store,
        context=context,
        namespace=store.context_namespace(context),
        page_size=config.page_size,
    )
    logger.info("starting_pod_browser", context=context, namespace=state.namespace)
    with client:
        KubeUIApp(build_router(state), error_route=ERROR_INFO, view_theme=settings.theme).run()
    logger.info("pod_browser_exited", context=context, namespace=state.namespace)
