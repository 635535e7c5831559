"""Maps from key strokes to action keys, and from action keys to actions."""

from __future__ import annotations

from typing import Any, Callable, Hashable

from tuikit.events import ActionEvent
from tuikit.listeners import ActionListener


class FunctionAction(ActionListener):
    """An always-enabled action that calls a function."""

    def __init__(self, function: Callable[[ActionEvent], Any]) -> None:
        self.function = function

    def is_enabled(self) -> bool:
        return True

    def action_performed(self, event: ActionEvent) -> None:
        self.function(event)


class ActionMap:
    """Actions by name, falling back to a parent map."""

    def __init__(self, parent: ActionMap | None = None) -> None:
        self.parent = parent
        self._actions: dict[str, ActionListener] = {}

    def get(self, key: str) -> ActionListener | None:
        """Return the action bound to key here or in an ancestor, or None."""
        action_map: ActionMap | None = self
        while action_map is not None:
            action = action_map._actions.get(key)
            if action is not None:
                return action
            action_map = action_map.parent
        return None

    def add(self, key: str, action: ActionListener | Callable[[ActionEvent], Any]) -> bool:
        """Bind an action, or a plain function, unless the key is already bound here."""
        if not isinstance(action, ActionListener):
            if not callable(action):
                raise TypeError(f"not an action or callable: {action!r}")
            action = FunctionAction(action)
        if key in self._actions:
            return False
        self._actions[key] = action
        return True

    def remove(self, key: str) -> None:
        """Drop the binding for key in this map, if any."""
        self._actions.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._actions

    def __len__(self) -> int:
        return len(self._actions)


class InputMap:
    """Action keys by key stroke, falling back to a parent map."""

    def __init__(self, parent: InputMap | None = None) -> None:
        self.parent = parent
        self._bindings: dict[Hashable, str] = {}

    def get(self, key_stroke: Hashable) -> str | None:
        """Return the action key bound to a stroke here or in an ancestor, or None."""
        input_map: InputMap | None = self
        while input_map is not None:
            if key_stroke in input_map._bindings:
                return input_map._bindings[key_stroke]
            input_map = input_map.parent
        return None

    def add(self, key_stroke: Hashable, action_key: str) -> bool:
        """Bind a stroke unless it is already bound here."""
        if key_stroke in self._bindings:
            return False
        self._bindings[key_stroke] = action_key
        return True

    def remove(self, key_stroke: Hashable) -> None:
        self._bindings.pop(key_stroke, None)

    def clear(self) -> None:
        self._bindings.clear()

    def keys(self) -> list[Hashable]:
        """Strokes bound in this map alone."""
        return list(self._bindings)

    def all_keys(self) -> list[Hashable]:
        """Strokes bound here and in every ancestor, the farthest ancestor's first."""
        chain: list[InputMap] = []
        input_map: InputMap | None = self
        while input_map is not None:
            chain.append(input_map)
            input_map = input_map.parent
        return [key for ancestor in reversed(chain) for key in ancestor._bindings]

    def __len__(self) -> int:
        return len(self._bindings)