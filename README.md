# tuikit

Building blocks for text user interfaces, in plain Python with no
third-party dependencies.

## What is inside

- `tuikit.geometry`: frozen `Point`, `Dimension`, `Insets` and `BoundingBox`,
  and a mutable `Rectangle` with `contains` (a point, or a whole rectangle when
  a width and height are given), `intersection` (also `&`), `union` (also `|`),
  `translate`, `set_bounds` and `to_bounding_box`.
  `BoundingBox.to_rectangle` converts the other way.
- `tuikit.style`: terminal colours (`ColorIndex` and the sixteen palette
  constants such as `RED_COLOR`, `DefaultColor` / `DEFAULT_COLOR`, `RGB`,
  `HSL`, `TrueColor`), the conversions `hsl_to_rgb` and `rgb_to_hsl`, and the
  `Stroke` line styles. `RGB.from_hex(0x7F9860)` splits a packed value into
  its channels.
- `tuikit.event_id`: `EventType`, a flag enum of event categories that also
  serves as a mask, and `EventId`, an `int` holding a category in its high
  bits and an 8-bit sub-type in its low bits (`event_id(EventType.KEY, 1)`).
- `tuikit.events`: the event classes: `KeyEvent` (with `KeyEvent.typed` for a
  typed character, `key_code`, `key_char`, `is_action_key`), the mouse events
  (`MouseEvent`, `MouseOverEvent`, `MouseClickEvent`, `MouseWheelEvent`,
  `MouseMoveEvent`, `MouseDragEvent`), `ActionEvent`, `ItemEvent`,
  `FocusEvent`, `WindowEvent`, `ComponentEvent`, `ContainerEvent`,
  `HierarchyEvent`, `HierarchyBoundsEvent` and `InvocationEvent`, together
  with `Modifier`, `KeyCode`, `MouseButton` and the per-class type enums.
- `tuikit.listeners`: abstract listener interfaces (`ActionListener`,
  `KeyListener`, `MouseListener`, `FocusListener`, `WindowListener` and the
  rest), `event_type_of_listener`, and `dispatch_event`, which calls the
  listener method matching an event's class and id.
- `tuikit.event_queue`: a thread-safe `EventQueue` with `push`, a blocking
  `pop` that takes an optional timeout in seconds and returns `None` when it
  runs out, `empty`, and `current_event` for the event last popped.
- `tuikit.keymaps`: `InputMap` (key stroke to action key) and `ActionMap`
  (action key to action), each falling back to a parent map. `ActionMap.add`
  accepts an `ActionListener` or a plain function, which it wraps in a
  `FunctionAction`; `add` leaves an existing binding in place and returns
  `False`.
- `tuikit.border_layout`: the abstract `Layout` and `BorderLayout`, which
  places children north, south, east, west and in the centre, honours the
  relative regions `PAGE_START`, `PAGE_END`, `LINE_START` and `LINE_END`, and
  computes minimum and preferred sizes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from tuikit.geometry import Rectangle
from tuikit.style import RGB, hsl_to_rgb, rgb_to_hsl

area = Rectangle(0, 0, 10, 5)
overlap = area & Rectangle(5, 2, 10, 10)   # Rectangle(5, 2, 5, 3)
both = area | Rectangle(5, 2, 10, 10)      # Rectangle(0, 0, 15, 12)

colour = RGB.from_hex(0x7F9860)
hsl = rgb_to_hsl(colour)
approx = hsl_to_rgb(hsl)
```

`BorderLayout` works with any objects of the right shape. A child needs
`visible`, `width`, `height`, `minimum_size()`, `preferred_size()`,
`set_size(width, height)` and `set_bounds(x, y, width, height)`; the container
needs `width`, `height`, `insets` (an `Insets`) and `component_orientation`
(`None` or `True` for left to right, or an object with `is_left_to_right`).

```python
from tuikit.border_layout import BorderLayout

layout = BorderLayout(hgap=1, vgap=0)
layout.add_layout_component(header, BorderLayout.NORTH)
layout.add_layout_component(body)          # no constraint: the centre
layout.layout(container)
size = layout.preferred_layout_size(container)
```

## What this package does not do

It provides no components or widgets, no container tree, no screen drawing
and no terminal input. There is no object that keeps listeners per
component and routes events to them, and no focus handling: moving keyboard
focus between components is left to the code built on top of these pieces.