"""Key binding value objects shared by every screen."""

from __future__ import annotations

from dataclasses import dataclass

from kubeui.tui.engine.events import KeyPress


@dataclass(frozen=True)
class KeyBinding:
    """A named action bound to one or more keys.

    Attributes:
        keys: Textual key names that trigger the action.
        help_keys: How the keys are shown in help ("ctrl+c,ctrl+q").
        description: What the action does.
    """

    keys: tuple[str, ...]
    help_keys: str
    description: str

    def matches(self, event: KeyPress) -> bool:
        return event.key in self.keys


def binding(*keys: str, description: str, help_keys: str | None = None) -> KeyBinding:
    return KeyBinding(keys=keys, help_keys=help_keys or ",".join(keys), description=description)


@dataclass(frozen=True)
class GlobalKeys:
    """Keys handled the same way no matter which screen is active."""

    quit: KeyBinding = binding("ctrl+c", "ctrl+q", description="Quit")
    help: KeyBinding = binding("ctrl+h", "f1", description="Toggle help")
    exit_view: KeyBinding = binding("escape", help_keys="esc", description="Exit current view")
    refresh: KeyBinding = binding("ctrl+r", description="Refresh the data")


@dataclass(frozen=True)
class ListKeys:
    """Navigation keys of the list engine."""

    up: KeyBinding = binding("up", description="Move cursor up")
    down: KeyBinding = binding("down", description="Move cursor down")
    previous_page: KeyBinding = binding("left", description="Previous page")
    next_page: KeyBinding = binding("right", description="Next page")
    search: KeyBinding = binding("ctrl+s", "ctrl+f", description="Search")
    select: KeyBinding = binding("enter", description="Select")
    delete: KeyBinding = binding("delete", description="Delete")
    exit_search: KeyBinding = binding(
        "enter", "escape", "down", help_keys="enter,esc,down", description="Leave search"
    )


@dataclass(frozen=True)
class DialogKeys:
    left: KeyBinding = binding("left", description="Move left")
    right: KeyBinding = binding("right", description="Move right")
    confirm: KeyBinding = binding("enter", description="Press button")


DEFAULT_GLOBAL_KEYS = GlobalKeys()
DEFAULT_LIST_KEYS = ListKeys()
DEFAULT_DIALOG_KEYS = DialogKeys()
