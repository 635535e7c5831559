"""Integer geometry primitives: points, sizes, insets and rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A location in integer cell coordinates."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True, slots=True)
class Dimension:
    """A width and a height."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True, slots=True)
class Insets:
    """Blank space to leave inside each edge of a container."""

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """A rectangle described by its four edges."""

    left: int
    right: int
    top: int
    bottom: int

    def to_rectangle(self) -> Rectangle:
        """Return the equivalent origin-and-size rectangle."""
        return Rectangle(self.left, self.top, self.right - self.left, self.bottom - self.top)


@dataclass(slots=True)
class Rectangle:
    """A mutable rectangle given by its origin and size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Dimension:
        return Dimension(self.width, self.height)

    def contains(self, x: int, y: int, width: int | None = None, height: int | None = None) -> bool:
        """Tell whether a point, or a whole rectangle when a size is given, lies inside."""
        if width is None and height is None:
            return self._contains_point(x, y)
        if width is None or height is None:
            raise TypeError("width and height must be given together")
        return self._contains_rectangle(x, y, width, height)

    def _contains_point(self, x: int, y: int) -> bool:
        if (self.width | self.height) < 0:
            return False
        if x < self.x or y < self.y:
            return False
        right = self.x + self.width
        bottom = self.y + self.height
        return (right < self.x or right > x) and (bottom < self.y or bottom > y)

    def _contains_rectangle(self, x: int, y: int, width: int, height: int) -> bool:
        if (self.width | self.height | width | height) < 0:
            return False
        # A zero dimension anywhere makes the tests below fail.
        if x < self.x or y < self.y:
            return False

        right = self.x + self.width
        end_x = x + width
        if end_x <= x:
            if right >= self.x or end_x > right:
                return False
        elif right >= self.x and end_x > right:
            return False

        bottom = self.y + self.height
        end_y = y + height
        if end_y <= y:
            if bottom >= self.y or end_y > bottom:
                return False
        elif bottom >= self.y and end_y > bottom:
            return False

        return True

    def intersection(self, other: Rectangle) -> Rectangle:
        """Return the overlap of two rectangles; its size is not positive when they are apart."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        return Rectangle(left, top, right - left, bottom - top)

    def union(self, other: Rectangle) -> Rectangle:
        """Return the smallest rectangle holding both rectangles."""
        left = min(self.x, other.x)
        right = max(self.x + self.width, other.x + other.width)
        top = min(self.y, other.y)
        bottom = max(self.y + self.height, other.y + other.height)
        return Rectangle(left, top, right - left, bottom - top)

    def __and__(self, other: Rectangle) -> Rectangle:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.intersection(other)

    def __or__(self, other: Rectangle) -> Rectangle:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.union(other)

    def translate(self, dx: int, dy: int) -> None:
        """Move the rectangle in place."""
        self.x += dx
        self.y += dy

    def set_bounds(self, x: int, y: int, width: int, height: int) -> None:
        """Replace origin and size in place."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def to_bounding_box(self) -> BoundingBox:
        """Return the rectangle as its four edges."""
        return BoundingBox(self.left, self.right, self.top, self.bottom)