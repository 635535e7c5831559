"""Building blocks for text user interfaces: geometry, colours, events, listeners, an event queue, key maps and a border layout."""

__version__ = "1.0.0"