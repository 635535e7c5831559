"""Event categories and packed event identifiers."""

from __future__ import annotations

from enum import Flag

SUB_TYPE_BITS = 8
_SUB_TYPE_MASK = (1 << SUB_TYPE_BITS) - 1


class EventType(Flag):
    """Broad event categories; combinations of members act as masks."""

    KEY = 1 << 0
    ITEM = 1 << 1
    FOCUS = 1 << 2
    MOUSE = 1 << 3
    MOUSE_OVER = 1 << 4
    MOUSE_MOVE = 1 << 5
    MOUSE_DRAG = 1 << 6
    MOUSE_CLICK = 1 << 7
    MOUSE_WHEEL = 1 << 8
    ACTION = 1 << 9
    WINDOW = 1 << 10
    COMPONENT = 1 << 11
    CONTAINER = 1 << 12
    HIERARCHY = 1 << 13
    HIERARCHY_BOUNDS = 1 << 14
    INVOCATION = 1 << 15


EventTypeMask = EventType


class EventId(int):
    """An event identifier: the category in the high bits, a sub-type in the low eight."""

    __slots__ = ()

    def __new__(cls, value: int) -> EventId:
        number = int(value)
        if number < 0:
            raise ValueError(f"event id must not be negative: {number}")
        return super().__new__(cls, number)

    @classmethod
    def from_parts(cls, event_type: EventType, sub_type: int = 0) -> EventId:
        """Pack a category and a sub-type into one identifier."""
        if not isinstance(event_type, EventType):
            raise TypeError(f"event_type must be an EventType, not {type(event_type).__name__}")
        if not 0 <= sub_type <= _SUB_TYPE_MASK:
            raise ValueError(f"sub_type must be in [0, {_SUB_TYPE_MASK}]: {sub_type}")
        return cls((event_type.value << SUB_TYPE_BITS) | sub_type)

    @property
    def event_type(self) -> EventType:
        return EventType(int(self) >> SUB_TYPE_BITS)

    @property
    def sub_type(self) -> int:
        return int(self) & _SUB_TYPE_MASK

    def matches(self, mask: EventType) -> bool:
        """Tell whether this identifier's category is part of the mask."""
        return bool(mask & self.event_type)

    def __repr__(self) -> str:
        return f"EventId({self.event_type!r}, {self.sub_type})"


def event_id(event_type: EventType, sub_type: int = 0) -> EventId:
    """Build the identifier for a category and sub-type."""
    return EventId.from_parts(event_type, sub_type)