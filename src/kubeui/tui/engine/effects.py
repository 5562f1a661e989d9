"""Deferred work returned by screens and the bookkeeping for stale results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import structlog

from kubeui.integrations.kubernetes.exceptions import KubernetesError
from kubeui.tui.engine.events import EffectResult, Event, Failed

logger = structlog.get_logger()


@dataclass(frozen=True)
class Effect:
    """A unit of blocking work whose result re-enters the loop as an event.

    Attributes:
        operation: Logical name ("list_pods", "get_pod", ...). Results of an
            older issue of the same operation are dropped once a newer one is issued.
        run: Zero-argument callable returning the resulting event.
        target: Route name of the screen that issued the effect. The loop fills
            it in when the effect is applied.
    """

    operation: str
    run: Callable[[], Event]
    target: str = ""

    def execute(self) -> Event:
        """Run the effect, turning collaborator failures into ``Failed`` events."""
        try:
            return self.run()
        except KubernetesError as e:
            logger.warning("effect_failed", operation=self.operation, error=str(e))
            return Failed(operation=self.operation, message=str(e))


class Scheduler(Protocol):
    """Runs effects off the update path and feeds their results back."""

    def submit(self, effect: Effect, generation: int) -> None: ...


class EffectTracker:
    """Hands out monotonic generations per operation."""

    def __init__(self) -> None:
        self._latest: dict[str, int] = {}

    def issue(self, effect: Effect) -> int:
        generation = self._latest.get(effect.operation, 0) + 1
        self._latest[effect.operation] = generation
        return generation

    def is_current(self, result: EffectResult) -> bool:
        return self._latest.get(result.operation) == result.generation


class ImmediateScheduler:
    """Runs effects synchronously and queues their results.

    Used by tests and by any host that drains ``pending`` itself.
    """

    def __init__(self) -> None:
        self.pending: list[EffectResult] = []

    def submit(self, effect: Effect, generation: int) -> None:
        result = EffectResult(effect.operation, generation, effect.execute(), effect.target)
        self.pending.append(result)

    def drain(self) -> list[EffectResult]:
        results, self.pending = self.pending, []
        return results
