"""Listener interfaces for each event class, and dispatch of events to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar

from tuikit.events import (
    ActionEvent,
    Event,
    FocusEvent,
    FocusEventType,
    ItemEvent,
    KeyEvent,
    KeyEventType,
    MouseClickEvent,
    MouseDragEvent,
    MouseEvent,
    MouseEventType,
    MouseMoveEvent,
    MouseOverEvent,
    MouseOverEventType,
    MouseWheelEvent,
    WindowEvent,
    WindowEventType,
)


class EventListener(ABC):
    """Base of all listeners; `event_type` names the event class a listener handles."""

    event_type: ClassVar[type[Event] | None] = None


class ActionListener(EventListener):
    event_type = ActionEvent

    @abstractmethod
    def action_performed(self, event: ActionEvent) -> None:
        ...


class ItemListener(EventListener):
    event_type = ItemEvent

    @abstractmethod
    def item_state_changed(self, event: ItemEvent) -> None:
        ...


class KeyListener(EventListener):
    event_type = KeyEvent

    @abstractmethod
    def key_pressed(self, event: KeyEvent) -> None:
        ...

    @abstractmethod
    def key_typed(self, event: KeyEvent) -> None:
        ...


class MouseListener(EventListener):
    event_type = MouseEvent

    @abstractmethod
    def mouse_pressed(self, event: MouseEvent) -> None:
        ...

    @abstractmethod
    def mouse_released(self, event: MouseEvent) -> None:
        ...


class MouseClickListener(EventListener):
    event_type = MouseClickEvent

    @abstractmethod
    def mouse_clicked(self, event: MouseClickEvent) -> None:
        ...


class MouseOverListener(EventListener):
    event_type = MouseOverEvent

    @abstractmethod
    def mouse_entered(self, event: MouseOverEvent) -> None:
        ...

    @abstractmethod
    def mouse_exited(self, event: MouseOverEvent) -> None:
        ...


class MouseMoveListener(EventListener):
    event_type = MouseMoveEvent

    @abstractmethod
    def mouse_moved(self, event: MouseMoveEvent) -> None:
        ...


class MouseDragListener(EventListener):
    event_type = MouseDragEvent

    @abstractmethod
    def mouse_dragged(self, event: MouseDragEvent) -> None:
        ...


class MouseWheelListener(EventListener):
    event_type = MouseWheelEvent

    @abstractmethod
    def mouse_wheel_moved(self, event: MouseWheelEvent) -> None:
        ...


class FocusListener(EventListener):
    event_type = FocusEvent

    @abstractmethod
    def focus_gained(self, event: FocusEvent) -> None:
        ...

    @abstractmethod
    def focus_lost(self, event: FocusEvent) -> None:
        ...


class WindowListener(EventListener):
    event_type = WindowEvent

    @abstractmethod
    def window_opened(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_closing(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_closed(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_activated(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_deactivated(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_gained_focus(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_lost_focus(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_iconified(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_deiconified(self, event: WindowEvent) -> None:
        ...

    @abstractmethod
    def window_state_changed(self, event: WindowEvent) -> None:
        ...


# For each event class: the listener interface, and the handler name by event id
# (a single name where every id goes to the same handler).
_Route = tuple[type[EventListener], "str | dict[int, str]"]

_ROUTES: dict[type[Event], _Route] = {
    ActionEvent: (ActionListener, "action_performed"),
    ItemEvent: (ItemListener, "item_state_changed"),
    KeyEvent: (
        KeyListener,
        {KeyEventType.KEY_PRESSED: "key_pressed", KeyEventType.KEY_TYPED: "key_typed"},
    ),
    MouseEvent: (
        MouseListener,
        {MouseEventType.MOUSE_PRESSED: "mouse_pressed", MouseEventType.MOUSE_RELEASED: "mouse_released"},
    ),
    MouseClickEvent: (MouseClickListener, "mouse_clicked"),
    MouseMoveEvent: (MouseMoveListener, "mouse_moved"),
    MouseDragEvent: (MouseDragListener, "mouse_dragged"),
    MouseWheelEvent: (MouseWheelListener, "mouse_wheel_moved"),
    MouseOverEvent: (
        MouseOverListener,
        {MouseOverEventType.MOUSE_ENTERED: "mouse_entered", MouseOverEventType.MOUSE_EXITED: "mouse_exited"},
    ),
    FocusEvent: (
        FocusListener,
        {FocusEventType.FOCUS_GAINED: "focus_gained", FocusEventType.FOCUS_LOST: "focus_lost"},
    ),
    WindowEvent: (
        WindowListener,
        {
            WindowEventType.WINDOW_OPENED: "window_opened",
            WindowEventType.WINDOW_CLOSING: "window_closing",
            WindowEventType.WINDOW_CLOSED: "window_closed",
            WindowEventType.WINDOW_ACTIVATED: "window_activated",
            WindowEventType.WINDOW_DEACTIVATED: "window_deactivated",
            WindowEventType.WINDOW_GAINED_FOCUS: "window_gained_focus",
            WindowEventType.WINDOW_LOST_FOCUS: "window_lost_focus",
            WindowEventType.WINDOW_ICONIFIED: "window_iconified",
            WindowEventType.WINDOW_DEICONIFIED: "window_deiconified",
            WindowEventType.WINDOW_STATE_CHANGED: "window_state_changed",
        },
    ),
}


def event_type_of_listener(listener: Any) -> type[Event] | None:
    """Return the event class a listener (instance or class) handles, or None."""
    event_type = getattr(listener, "event_type", None)
    if isinstance(event_type, type) and issubclass(event_type, Event):
        return event_type
    return None


def _route_for(event: Event) -> _Route:
    for cls in type(event).__mro__:
        route = _ROUTES.get(cls)
        if route is not None:
            return route
    raise TypeError(f"no listener interface handles {type(event).__name__}")


def dispatch_event(listener: EventListener, event: Event) -> None:
    """Call the listener method that matches the event's class and id.

    Events whose id has no handler are ignored.
    """
    interface, handlers = _route_for(event)
    if not isinstance(listener, interface):
        raise TypeError(f"{type(listener).__name__} is not a {interface.__name__}")
    if isinstance(handlers, str):
        name: str | None = handlers
    else:
        name = handlers.get(int(event.id))
    if name is None:
        return
    handler: Callable[[Event], None] = getattr(listener, name)
    handler(event)