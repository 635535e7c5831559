import pytest

from tuikit.events import ActionEvent
from tuikit.keymaps import ActionMap, FunctionAction, InputMap
from tuikit.listeners import ActionListener


class _Action(ActionListener):
    def __init__(self):
        self.events = []

    def action_performed(self, event):
        self.events.append(event)


def test_function_action_calls_function():
    received = []
    action = FunctionAction(received.append)
    event = ActionEvent(None, "go")
    action.action_performed(event)
    assert received == [event]
    assert action.is_enabled() is True


def test_action_map_get_and_parent_fallback():
    parent = ActionMap()
    child = ActionMap(parent)
    parent_action = _Action()
    child_action = _Action()
    parent.add("copy", parent_action)
    child.add("paste", child_action)
    assert child.get("paste") is child_action
    assert child.get("copy") is parent_action
    assert parent.get("paste") is None
    assert child.get("missing") is None


def test_action_map_child_shadows_parent():
    parent = ActionMap()
    child = ActionMap(parent)
    parent_action, child_action = _Action(), _Action()
    parent.add("copy", parent_action)
    child.add("copy", child_action)
    assert child.get("copy") is child_action


def test_action_map_add_does_not_replace():
    action_map = ActionMap()
    first, second = _Action(), _Action()
    assert action_map.add("copy", first) is True
    assert action_map.add("copy", second) is False
    assert action_map.get("copy") is first


def test_action_map_wraps_callables():
    received = []
    action_map = ActionMap()
    action_map.add("run", received.append)
    action = action_map.get("run")
    event = ActionEvent(None, "run")
    action.action_performed(event)
    assert isinstance(action, FunctionAction)
    assert received == [event]


def test_action_map_rejects_non_callable():
    with pytest.raises(TypeError):
        ActionMap().add("run", 42)


def test_action_map_remove():
    action_map = ActionMap()
    action_map.add("copy", _Action())
    action_map.remove("copy")
    action_map.remove("copy")
    assert action_map.get("copy") is None
    assert "copy" not in action_map


def test_input_map_get_with_parent():
    parent = InputMap()
    child = InputMap(parent)
    parent.add("ctrl+c", "copy")
    child.add("ctrl+v", "paste")
    assert child.get("ctrl+c") == "copy"
    assert child.get("ctrl+v") == "paste"
    assert parent.get("ctrl+v") is None


def test_input_map_add_does_not_replace():
    input_map = InputMap()
    assert input_map.add("enter", "accept")
    assert not input_map.add("enter", "other")
    assert input_map.get("enter") == "accept"


def test_input_map_remove_and_clear():
    input_map = InputMap()
    input_map.add("a", "x")
    input_map.add("b", "y")
    input_map.remove("a")
    assert input_map.keys() == ["b"]
    input_map.clear()
    assert input_map.keys() == []
    assert input_map.get("b") is None


def test_input_map_all_keys_parent_first():
    grandparent = InputMap()
    parent = InputMap(grandparent)
    child = InputMap(parent)
    grandparent.add("g", "one")
    parent.add("p", "two")
    child.add("c", "three")
    assert child.keys() == ["c"]
    assert child.all_keys() == ["g", "p", "c"]
    assert len(child.all_keys()) == len(grandparent) + len(parent) + len(child)