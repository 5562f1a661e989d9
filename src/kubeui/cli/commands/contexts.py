"""``kubeui cxs``: interactive kubeconfig context switcher."""

from __future__ import annotations

import structlog
import typer

from kubeui.cli.commands.common import fail, settings_from
from kubeui.integrations.kubernetes.exceptions import KubernetesError
from kubeui.integrations.kubernetes.kubeconfig import KubeconfigStore
from kubeui.tui.app import KubeUIApp
from kubeui.tui.apps.contexts import ContextsState, build_router

logger = structlog.get_logger()


def cxs(ctx: typer.Context) -> None:
    """Switch or delete kubeconfig contexts.

    Examples:
        kubeui cxs
        kubeui --kubeconfig ~/.kube/staging cxs
    """
    settings = settings_from(ctx)
    try:
        config = settings.load_config()
        store = KubeconfigStore(config.kubeconfig)
    except (KubernetesError, ValueError) as e:
        fail("cxs", e)

    logger.info("starting_context_switcher", kubeconfig=str(store.path))
    router = build_router(ContextsState(store=store, page_size=config.page_size))
    KubeUIApp(router, view_theme=settings.theme).run()
    logger.info("context_switcher_exited", context=store.current_context())
