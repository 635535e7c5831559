"""Layout managers, and the border layout with its five regions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Protocol

from tuikit.geometry import Dimension, Insets


class LayoutComponent(Protocol):
    """What a layout needs from a component it arranges."""

    visible: bool
    width: int
    height: int

    def minimum_size(self) -> Dimension: ...

    def preferred_size(self) -> Dimension: ...

    def set_size(self, width: int, height: int) -> None: ...

    def set_bounds(self, x: int, y: int, width: int, height: int) -> None: ...


class LayoutTarget(Protocol):
    """What a layout needs from the container it lays out."""

    width: int
    height: int
    insets: Insets
    component_orientation: Any


class Layout(ABC):
    """Arranges the children of a container."""

    @abstractmethod
    def add_layout_component(self, target: Any, constraints: Any = None) -> None:
        """Record a child with its constraints."""

    @abstractmethod
    def remove_layout_component(self, target: Any) -> None:
        """Forget a child."""

    @abstractmethod
    def layout(self, target: LayoutTarget) -> None:
        """Place the children of the container."""

    @abstractmethod
    def minimum_layout_size(self, target: LayoutTarget) -> Dimension:
        """Smallest size the container can take."""

    @abstractmethod
    def preferred_layout_size(self, target: LayoutTarget) -> Dimension:
        """Size the container would like to take."""


def _is_left_to_right(orientation: Any) -> bool:
    if orientation is None:
        return True
    if isinstance(orientation, bool):
        return orientation
    check = getattr(orientation, "is_left_to_right", None)
    if check is None:
        raise TypeError(f"not a component orientation: {orientation!r}")
    return bool(check() if callable(check) else check)


class BorderLayout(Layout):
    """Lays out up to five children: one per edge and one in the centre.

    Relative constraints (PAGE_START, PAGE_END, LINE_START, LINE_END) take
    precedence over the absolute ones; LINE_START and LINE_END follow the
    container's orientation.
    """

    CENTER = "Center"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    PAGE_START = "First"
    PAGE_END = "Last"
    LINE_START = "Before"
    LINE_END = "After"

    _SLOTS = {
        CENTER: "center",
        NORTH: "north",
        SOUTH: "south",
        EAST: "east",
        WEST: "west",
        PAGE_START: "first_line",
        PAGE_END: "last_line",
        LINE_START: "first_item",
        LINE_END: "last_item",
    }

    def __init__(self, hgap: int = 0, vgap: int = 0) -> None:
        self.hgap = hgap
        self.vgap = vgap
        self.center: Any = None
        self.north: Any = None
        self.south: Any = None
        self.east: Any = None
        self.west: Any = None
        self.first_line: Any = None
        self.last_line: Any = None
        self.first_item: Any = None
        self.last_item: Any = None

    def add_layout_component(self, target: Any, constraints: Any = None) -> None:
        """Put a child in the region named by constraints; None means the centre."""
        if constraints is None:
            self.center = target
            return
        if not isinstance(constraints, str):
            raise TypeError("Cannot add to layout: constraint must be a string (or None)")
        slot = self._SLOTS.get(constraints)
        if slot is None:
            raise ValueError(f"Cannot add to layout: unknown constraint: {constraints}")
        setattr(self, slot, target)

    def remove_layout_component(self, target: Any) -> None:
        """Clear the absolute region and the relative region holding the child."""
        for slot in ("center", "north", "south", "east", "west"):
            if getattr(self, slot) is target:
                setattr(self, slot, None)
                break
        for slot in ("first_line", "last_line", "first_item", "last_item"):
            if getattr(self, slot) is target:
                setattr(self, slot, None)
                break

    def get_layout_component(self, constraints: Any = None, orientation: Any = None) -> Any:
        """Return the child in a region.

        Without an orientation the region is looked up as stored. With one,
        an absolute region is resolved against the relative ones.
        """
        if orientation is None:
            if constraints is None:
                return self.center
            if not isinstance(constraints, str):
                raise TypeError("Cannot get component: constraint must be a string")
            slot = self._SLOTS.get(constraints)
            if slot is None:
                raise ValueError(f"Cannot get component: unknown constraint: {constraints}")
            return getattr(self, slot)

        if not isinstance(constraints, str):
            raise TypeError("Cannot get component: constraint must be a string")
        resolvers: dict[str, Callable[[], Any]] = {
            self.NORTH: self.north_component,
            self.SOUTH: self.south_component,
            self.WEST: lambda: self.west_component(orientation),
            self.EAST: lambda: self.east_component(orientation),
            self.CENTER: lambda: self.center,
        }
        resolver = resolvers.get(constraints)
        if resolver is None:
            raise ValueError(f"Cannot get component: invalid constraint: {constraints}")
        return resolver()

    def north_component(self) -> Any:
        return self.first_line if self.first_line is not None else self.north

    def south_component(self) -> Any:
        return self.last_line if self.last_line is not None else self.south

    def east_component(self, orientation: Any = None) -> Any:
        relative = self.last_item if _is_left_to_right(orientation) else self.first_item
        return relative if relative is not None else self.east

    def west_component(self, orientation: Any = None) -> Any:
        relative = self.first_item if _is_left_to_right(orientation) else self.last_item
        return relative if relative is not None else self.west

    def get_constraints(self, target: Any) -> str | None:
        """Return the region a child was added under, or None."""
        if target is None:
            return None
        for name, slot in self._SLOTS.items():
            if getattr(self, slot) is target:
                return name
        return None

    def minimum_layout_size(self, target: LayoutTarget) -> Dimension:
        return self._layout_size(target, lambda c: c.minimum_size())

    def preferred_layout_size(self, target: LayoutTarget) -> Dimension:
        return self._layout_size(target, lambda c: c.preferred_size())

    def _layout_size(self, target: LayoutTarget, size_of: Callable[[Any], Dimension]) -> Dimension:
        width = height = 0
        orientation = target.component_orientation

        for side in (self.east_component(orientation), self.west_component(orientation)):
            if side is not None and side.visible:
                d = size_of(side)
                width += d.width + self.hgap
                height = max(d.height, height)

        if self.center is not None and self.center.visible:
            d = size_of(self.center)
            width += d.width
            height = max(d.height, height)

        for edge in (self.north_component(), self.south_component()):
            if edge is not None and edge.visible:
                d = size_of(edge)
                width = max(d.width, width)
                height += d.height + self.vgap

        insets = target.insets
        return Dimension(width + insets.left + insets.right, height + insets.top + insets.bottom)

    def layout(self, target: LayoutTarget) -> None:
        insets = target.insets
        top = insets.top
        bottom = target.height - insets.bottom
        left = insets.left
        right = target.width - insets.right
        orientation = target.component_orientation

        c = self.north_component()
        if c is not None and c.visible:
            c.set_size(right - left, c.height)
            d = c.preferred_size()
            c.set_bounds(left, top, right - left, d.height)
            top += d.height + self.vgap

        c = self.south_component()
        if c is not None and c.visible:
            c.set_size(right - left, c.height)
            d = c.preferred_size()
            c.set_bounds(left, bottom - d.height, right - left, d.height)
            bottom -= d.height + self.vgap

        c = self.east_component(orientation)
        if c is not None and c.visible:
            c.set_size(c.width, bottom - top)
            d = c.preferred_size()
            c.set_bounds(right - d.width, top, d.width, bottom - top)
            right -= d.width + self.hgap

        c = self.west_component(orientation)
        if c is not None and c.visible:
            c.set_size(c.width, bottom - top)
            d = c.preferred_size()
            c.set_bounds(left, top, d.width, bottom - top)
            left += d.width + self.hgap

        c = self.center
        if c is not None and c.visible:
            c.set_bounds(left, top, right - left, bottom - top)