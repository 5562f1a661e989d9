"""View engine: events, effects, screens, router and the top-level loop."""

from kubeui.tui.engine.effects import Effect, EffectTracker, ImmediateScheduler, Scheduler
from kubeui.tui.engine.events import (
    EffectResult,
    Event,
    Failed,
    KeyPress,
    NamespacesLoaded,
    PodDeleted,
    PodLoaded,
    PodsLoaded,
    Resize,
)
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys, KeyBinding
from kubeui.tui.engine.router import Router, Transition
from kubeui.tui.engine.screen import Command, PopView, PushView, Quit, Screen

__all__ = [
    "DEFAULT_GLOBAL_KEYS",
    "Command",
    "Effect",
    "EffectResult",
    "EffectTracker",
    "Event",
    "Failed",
    "GlobalKeys",
    "ImmediateScheduler",
    "KeyBinding",
    "KeyPress",
    "NamespacesLoaded",
    "PodDeleted",
    "PodLoaded",
    "PodsLoaded",
    "PopView",
    "PushView",
    "Quit",
    "Resize",
    "Router",
    "Scheduler",
    "Screen",
    "Transition",
]
