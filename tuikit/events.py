"""Event classes delivered to components and listeners."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum, IntEnum, IntFlag
from typing import Any, Callable

from tuikit.event_id import EventId, EventType, event_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_event_id(identifier: EventId | EventType | int) -> EventId:
    if isinstance(identifier, EventType):
        return EventId.from_parts(identifier, 0)
    return EventId(int(identifier))


class Event:
    """Base of all events: an identifier, a source and a consumed flag."""

    def __init__(self, source: Any, identifier: EventId | EventType | int) -> None:
        self.id = _to_event_id(identifier)
        self.source = source
        self.consumed = False
        self.system_generated = False
        self.is_posted = False
        self.is_being_dispatched_by_focus_manager = False

    @property
    def event_type(self) -> EventType:
        return self.id.event_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, consumed={self.consumed})"


class Modifier(IntFlag):
    """Keyboard modifiers and mouse buttons held during an input event."""

    NO_MODIFIERS = 0
    SHIFT_DOWN = 1 << 0
    CTRL_DOWN = 1 << 1
    ALT_DOWN = 1 << 2
    META_DOWN = 1 << 4
    LEFT_BUTTON_DOWN = 1 << 5
    MIDDLE_BUTTON_DOWN = 1 << 6
    RIGHT_BUTTON_DOWN = 1 << 7


class InputEvent(Event):
    """An event carrying modifiers and a timestamp."""

    def __init__(
        self,
        source: Any,
        identifier: EventId | EventType | int,
        modifiers: Modifier | int = Modifier.NO_MODIFIERS,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, identifier)
        self.modifiers = Modifier(modifiers)
        self.when = when if when is not None else _now()


class KeyCode(IntEnum):
    """Virtual key codes."""

    VK_UNDEFINED = 0
    VK_TAB = ord("\t")
    VK_ENTER = ord("\r")
    VK_ESCAPE = 0x1B
    VK_SPACE = ord(" ")
    VK_EXCLAMATION_MARK = ord("!")
    VK_DOUBLE_QUOTE = ord('"')
    VK_NUMBER_SIGN = ord("#")
    VK_DOLLAR = ord("$")
    VK_PERCENT = ord("%")
    VK_AMPERSAND = ord("&")
    VK_QUOTE = ord("'")
    VK_LEFT_PARENTHESIS = ord("(")
    VK_RIGHT_PARENTHESIS = ord(")")
    VK_ASTERISK = ord("*")
    VK_PLUS = ord("+")
    VK_COMMA = ord(",")
    VK_MINUS = ord("-")
    VK_PERIOD = ord(".")
    VK_SLASH = ord("/")
    VK_0 = ord("0")
    VK_1 = ord("1")
    VK_2 = ord("2")
    VK_3 = ord("3")
    VK_4 = ord("4")
    VK_5 = ord("5")
    VK_6 = ord("6")
    VK_7 = ord("7")
    VK_8 = ord("8")
    VK_9 = ord("9")
    VK_COLON = ord(":")
    VK_SEMICOLON = ord(";")
    VK_LESS = ord("<")
    VK_EQUALS = ord("=")
    VK_GREATER = ord(">")
    VK_QUESTION_MARK = ord("?")
    VK_AT = ord("@")
    VK_A = ord("A")
    VK_B = ord("B")
    VK_C = ord("C")
    VK_D = ord("D")
    VK_E = ord("E")
    VK_F = ord("F")
    VK_G = ord("G")
    VK_H = ord("H")
    VK_I = ord("I")
    VK_J = ord("J")
    VK_K = ord("K")
    VK_L = ord("L")
    VK_M = ord("M")
    VK_N = ord("N")
    VK_O = ord("O")
    VK_P = ord("P")
    VK_Q = ord("Q")
    VK_R = ord("R")
    VK_S = ord("S")
    VK_T = ord("T")
    VK_U = ord("U")
    VK_V = ord("V")
    VK_W = ord("W")
    VK_X = ord("X")
    VK_Y = ord("Y")
    VK_Z = ord("Z")
    VK_OPEN_BRACKET = ord("[")
    VK_BACK_SLASH = ord("\\")
    VK_CLOSE_BRACKET = ord("]")
    VK_CARET = ord("^")
    VK_UNDERSCORE = ord("_")
    VK_BACK_QUOTE = ord("`")
    VK_LEFT_BRACE = ord("{")
    VK_PIPE = ord("|")
    VK_RIGHT_BRACE = ord("}")
    VK_DEAD_TILDE = ord("~")
    VK_BACK_SPACE = 127
    # Special keys overlap the C1 control range.
    VK_HOME = 128
    VK_INSERT = 129
    VK_DELETE = 130
    VK_END = 131
    VK_PAGE_UP = 132
    VK_PAGE_DOWN = 133
    VK_F1 = 138
    VK_F2 = 139
    VK_F3 = 140
    VK_F4 = 141
    VK_F5 = 142
    VK_F6 = 144
    VK_F7 = 145
    VK_F8 = 146
    VK_F9 = 147
    VK_F10 = 148
    VK_F11 = 150
    VK_F12 = 151
    VK_DOWN = 152
    VK_UP = 153
    VK_LEFT = 154
    VK_RIGHT = 155
    VK_BACK_TAB = 156


CHAR_UNDEFINED = "\0"

_ACTION_KEYS = frozenset(
    {
        KeyCode.VK_HOME,
        KeyCode.VK_END,
        KeyCode.VK_PAGE_UP,
        KeyCode.VK_PAGE_DOWN,
        KeyCode.VK_UP,
        KeyCode.VK_DOWN,
        KeyCode.VK_LEFT,
        KeyCode.VK_RIGHT,
        KeyCode.VK_F1,
        KeyCode.VK_F2,
        KeyCode.VK_F3,
        KeyCode.VK_F4,
        KeyCode.VK_F5,
        KeyCode.VK_F6,
        KeyCode.VK_F7,
        KeyCode.VK_F8,
        KeyCode.VK_F9,
        KeyCode.VK_F10,
        KeyCode.VK_F11,
        KeyCode.VK_F12,
        KeyCode.VK_INSERT,
    }
)


class KeyEventType(IntEnum):
    KEY_TYPED = event_id(EventType.KEY, 0)
    KEY_PRESSED = event_id(EventType.KEY, 1)


class KeyEvent(InputEvent):
    """A key press, carrying a key code, or a typed character."""

    def __init__(
        self,
        source: Any,
        type: KeyEventType | int,
        key_code: KeyCode | int,
        modifiers: Modifier | int = Modifier.NO_MODIFIERS,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, KeyEventType(type), modifiers, when)
        self._key_code = KeyCode(key_code)
        self._char = CHAR_UNDEFINED

    @classmethod
    def typed(
        cls,
        source: Any,
        char: str,
        modifiers: Modifier | int = Modifier.NO_MODIFIERS,
    ) -> KeyEvent:
        """Build a KEY_TYPED event for one character."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"a typed key needs exactly one character: {char!r}")
        event = cls(source, KeyEventType.KEY_TYPED, KeyCode.VK_UNDEFINED, modifiers)
        event._char = char
        return event

    @property
    def key_code(self) -> KeyCode:
        return self._key_code if self.id != KeyEventType.KEY_TYPED else KeyCode.VK_UNDEFINED

    @property
    def key_char(self) -> str:
        return self._char if self.id == KeyEventType.KEY_TYPED else CHAR_UNDEFINED

    def is_action_key(self) -> bool:
        """Tell whether the key fires no character and is not a modifier."""
        return self.key_code in _ACTION_KEYS


class MouseButton(IntEnum):
    LEFT_BUTTON = 0
    MIDDLE_BUTTON = 1
    RIGHT_BUTTON = 2
    NO_BUTTON = 3


def to_modifier(button: MouseButton) -> Modifier:
    """Return the button-down modifier that belongs to a mouse button."""
    button = MouseButton(button)
    if button is MouseButton.NO_BUTTON:
        return Modifier.NO_MODIFIERS
    return Modifier(1 << (button.value + 5))


_BUTTON_DOWN_MASK = Modifier.LEFT_BUTTON_DOWN | Modifier.MIDDLE_BUTTON_DOWN | Modifier.RIGHT_BUTTON_DOWN


class MouseEventBase(InputEvent):
    """Common part of mouse events: a button and a position."""

    def __init__(
        self,
        source: Any,
        identifier: EventId | EventType | int,
        button: MouseButton | int,
        modifiers: Modifier | int,
        x: int,
        y: int,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, identifier, modifiers, when)
        self.button = MouseButton(button)
        self.x = x
        self.y = y

    def was_button_down_before(self) -> bool:
        """Tell whether any mouse button was held just before this event."""
        modifiers = self.modifiers
        if self.id in (MouseEventType.MOUSE_PRESSED, MouseEventType.MOUSE_RELEASED):
            modifiers ^= to_modifier(self.button)
        return bool(modifiers & _BUTTON_DOWN_MASK)


class MouseEventType(IntEnum):
    MOUSE_PRESSED = event_id(EventType.MOUSE, 0)
    MOUSE_RELEASED = event_id(EventType.MOUSE, 1)


class MouseEvent(MouseEventBase):
    """A mouse button pressed or released."""

    def __init__(
        self,
        source: Any,
        type: MouseEventType | int,
        button: MouseButton | int,
        modifiers: Modifier | int,
        x: int,
        y: int,
        is_popup_trigger: bool = False,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, MouseEventType(type), button, modifiers, x, y, when)
        self.is_popup_trigger = is_popup_trigger


class MouseOverEventType(IntEnum):
    MOUSE_ENTERED = event_id(EventType.MOUSE_OVER, 0)
    MOUSE_EXITED = event_id(EventType.MOUSE_OVER, 1)


class MouseOverEvent(MouseEventBase):
    """The pointer entered or left a component."""

    def __init__(
        self,
        source: Any,
        type: MouseOverEventType | int,
        button: MouseButton | int,
        modifiers: Modifier | int,
        x: int,
        y: int,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, MouseOverEventType(type), button, modifiers, x, y, when)


class MouseClickEvent(MouseEventBase):
    """A completed mouse click."""

    MOUSE_CLICKED = event_id(EventType.MOUSE_CLICK)

    def __init__(
        self,
        source: Any,
        button: MouseButton | int,
        modifiers: Modifier | int,
        x: int,
        y: int,
        click_count: int = 1,
        is_popup_trigger: bool = False,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, self.MOUSE_CLICKED, button, modifiers, x, y, when)
        self.click_count = click_count
        self.is_popup_trigger = is_popup_trigger


class MouseWheelEvent(MouseEventBase):
    """A mouse wheel turned."""

    MOUSE_WHEEL = event_id(EventType.MOUSE_WHEEL)

    def __init__(
        self,
        source: Any,
        modifiers: Modifier | int,
        x: int,
        y: int,
        wheel_rotation: int,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, self.MOUSE_WHEEL, MouseButton.NO_BUTTON, modifiers, x, y, when)
        self.wheel_rotation = wheel_rotation


class MouseMoveEvent(MouseEventBase):
    """The pointer moved with no button held."""

    MOUSE_MOVED = event_id(EventType.MOUSE_MOVE)

    def __init__(
        self,
        source: Any,
        modifiers: Modifier | int,
        x: int,
        y: int,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, self.MOUSE_MOVED, MouseButton.NO_BUTTON, modifiers, x, y, when)


class MouseDragEvent(MouseEventBase):
    """The pointer moved with a button held."""

    MOUSE_DRAGGED = event_id(EventType.MOUSE_DRAG)

    def __init__(
        self,
        source: Any,
        button: MouseButton | int,
        modifiers: Modifier | int,
        x: int,
        y: int,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, self.MOUSE_DRAGGED, button, modifiers, x, y, when)


class ActionEvent(Event):
    """A component-defined action took place."""

    def __init__(
        self,
        source: Any,
        action_command: str,
        modifiers: Modifier | int = Modifier.NO_MODIFIERS,
        when: datetime | None = None,
    ) -> None:
        super().__init__(source, EventType.ACTION)
        self.action_command = action_command
        self.modifiers = Modifier(modifiers)
        self.when = when if when is not None else _now()


class ComponentEventType(IntEnum):
    COMPONENT_SHOWN = event_id(EventType.COMPONENT, 0)
    COMPONENT_HIDDEN = event_id(EventType.COMPONENT, 1)


class ComponentEvent(Event):
    """A component was shown or hidden."""

    def __init__(self, source: Any, type: ComponentEventType | int) -> None:
        super().__init__(source, ComponentEventType(type))


class ContainerEventType(IntEnum):
    COMPONENT_ADDED = event_id(EventType.CONTAINER, 0)
    COMPONENT_REMOVED = event_id(EventType.CONTAINER, 1)


class ContainerEvent(Event):
    """A child was added to or removed from a container."""

    def __init__(self, source: Any, type: ContainerEventType | int, child: Any) -> None:
        super().__init__(source, ContainerEventType(type))
        self.child = child


class FocusEventType(IntEnum):
    FOCUS_LOST = event_id(EventType.FOCUS, 0)
    FOCUS_GAINED = event_id(EventType.FOCUS, 1)


class FocusCause(Enum):
    """Why focus moved."""

    UNKNOWN = "unknown"
    MOUSE_EVENT = "mouse_event"
    TRAVERSAL = "traversal"
    TRAVERSAL_UP = "traversal_up"
    TRAVERSAL_DOWN = "traversal_down"
    TRAVERSAL_FORWARD = "traversal_forward"
    TRAVERSAL_BACKWARD = "traversal_backward"
    ROLLBACK = "rollback"
    UNEXPECTED = "unexpected"
    ACTIVATION = "activation"
    CLEAR_GLOBAL_FOCUS_OWNER = "clear_global_focus_owner"


class FocusEvent(Event):
    """A component gained or lost keyboard focus."""

    def __init__(
        self,
        source: Any,
        type: FocusEventType | int,
        temporary: bool = False,
        opposite: Any = None,
        cause: FocusCause = FocusCause.UNKNOWN,
    ) -> None:
        super().__init__(source, FocusEventType(type))
        self.cause = FocusCause(cause)
        self.temporary = temporary
        self.opposite = opposite


class _BasicHierarchyEvent(Event):
    def __init__(self, source: Any, identifier: int, changed: Any, changed_parent: Any) -> None:
        super().__init__(source, identifier)
        self.changed = changed
        self.changed_parent = changed_parent


class HierarchyEventType(IntEnum):
    PARENT_CHANGED = event_id(EventType.HIERARCHY, 0)
    DISPLAYABILITY_CHANGED = event_id(EventType.HIERARCHY, 1)
    SHOWING_CHANGED = event_id(EventType.HIERARCHY, 2)


class HierarchyEvent(_BasicHierarchyEvent):
    """The hierarchy a component belongs to changed."""

    def __init__(self, source: Any, type: HierarchyEventType | int, changed: Any, changed_parent: Any) -> None:
        super().__init__(source, HierarchyEventType(type), changed, changed_parent)


class HierarchyBoundsEventType(IntEnum):
    ANCESTOR_MOVED = event_id(EventType.HIERARCHY_BOUNDS, 0)
    ANCESTOR_RESIZED = event_id(EventType.HIERARCHY_BOUNDS, 1)


class HierarchyBoundsEvent(_BasicHierarchyEvent):
    """An ancestor of a component moved or was resized."""

    def __init__(
        self, source: Any, type: HierarchyBoundsEventType | int, changed: Any, changed_parent: Any
    ) -> None:
        super().__init__(source, HierarchyBoundsEventType(type), changed, changed_parent)


class InvocationEvent(Event):
    """Runs a callable when dispatched."""

    INVOCATION = event_id(EventType.INVOCATION)

    def __init__(self, target: Callable[[], object]) -> None:
        super().__init__(None, self.INVOCATION)
        self.target = target

    def dispatch(self) -> None:
        self.target()


class ItemEventType(IntEnum):
    SELECTED = event_id(EventType.ITEM, 0)
    DESELECTED = event_id(EventType.ITEM, 1)


class ItemEvent(Event):
    """An item was selected or deselected."""

    def __init__(self, source: Any, type: ItemEventType | int) -> None:
        super().__init__(source, ItemEventType(type))


class WindowEventType(IntEnum):
    WINDOW_OPENED = event_id(EventType.WINDOW, 0)
    WINDOW_CLOSING = event_id(EventType.WINDOW, 1)
    WINDOW_CLOSED = event_id(EventType.WINDOW, 2)
    WINDOW_ACTIVATED = event_id(EventType.WINDOW, 3)
    WINDOW_DEACTIVATED = event_id(EventType.WINDOW, 4)
    WINDOW_GAINED_FOCUS = event_id(EventType.WINDOW, 5)
    WINDOW_LOST_FOCUS = event_id(EventType.WINDOW, 6)
    WINDOW_ICONIFIED = event_id(EventType.WINDOW, 7)
    WINDOW_DEICONIFIED = event_id(EventType.WINDOW, 8)
    WINDOW_STATE_CHANGED = event_id(EventType.WINDOW, 9)


class WindowEvent(Event):
    """A change in a window's state, activation or focus."""

    def __init__(self, source: Any, type: WindowEventType | int, opposite_window: Any = None) -> None:
        super().__init__(source, WindowEventType(type))
        self.opposite_window = opposite_window

    @property
    def window(self) -> Any:
        return self.source