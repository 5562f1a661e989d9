"""Events processed by the view loop.

Every event a screen can receive is one of the dataclasses below; ``Event``
is their union. Screens dispatch with ``match`` and always end with a
``case _`` arm so unrecognized input is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.models import PodDetail, PodSummary


@dataclass(frozen=True)
class KeyPress:
    """A key from the terminal, named the way Textual names keys."""

    key: str
    character: str | None = None

    @property
    def is_printable(self) -> bool:
        return bool(self.character) and self.character.isprintable()


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class NamespacesLoaded:
    namespaces: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PodsLoaded:
    pods: list[PodSummary] = field(default_factory=list)


@dataclass(frozen=True)
class PodLoaded:
    pod: PodDetail


@dataclass(frozen=True)
class PodDeleted:
    name: str


@dataclass(frozen=True)
class Failed:
    """A collaborator call failed or timed out."""

    operation: str
    message: str


@dataclass(frozen=True)
class EffectResult:
    """Envelope carrying an effect's outcome back into the loop.

    Attributes:
        operation: Logical operation the effect was issued for.
        generation: Issue number used to discard superseded results.
        event: The event the effect produced.
        target: Route name of the screen the event is meant for.
    """

    operation: str
    generation: int
    event: Event
    target: str = ""


Event = (
    KeyPress
    | Resize
    | NamespacesLoaded
    | PodsLoaded
    | PodLoaded
    | PodDeleted
    | Failed
    | EffectResult
)
