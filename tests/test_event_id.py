import pytest

from tuikit.event_id import EventId, EventType, event_id


@pytest.mark.parametrize("event_type", list(EventType))
@pytest.mark.parametrize("sub_type", [0, 1, 9, 255])
def test_parts_round_trip(event_type, sub_type):
    identifier = EventId.from_parts(event_type, sub_type)
    assert identifier.event_type == event_type
    assert identifier.sub_type == sub_type


def test_event_id_function_matches_from_parts():
    assert event_id(EventType.WINDOW, 3) == EventId.from_parts(EventType.WINDOW, 3)
    assert event_id(EventType.ACTION) == EventId.from_parts(EventType.ACTION, 0)


def test_packed_layout_puts_type_above_sub_type():
    assert int(event_id(EventType.KEY, 0)) == 256


@pytest.mark.parametrize("sub_type", [-1, 256])
def test_sub_type_out_of_range(sub_type):
    with pytest.raises(ValueError):
        event_id(EventType.KEY, sub_type)


def test_event_type_must_be_enum():
    with pytest.raises(TypeError):
        EventId.from_parts(1, 0)


def test_negative_raw_value_rejected():
    with pytest.raises(ValueError):
        EventId(-5)


def test_ids_are_distinct_across_types_and_sub_types():
    ids = {event_id(t, s) for t in EventType for s in range(4)}
    assert len(ids) == len(EventType) * 4


def test_sub_type_never_reaches_next_type():
    assert event_id(EventType.KEY, 255) < event_id(EventType.ITEM, 0)


def test_matches_mask():
    identifier = event_id(EventType.MOUSE, 1)
    assert identifier.matches(EventType.MOUSE | EventType.KEY)
    assert not identifier.matches(EventType.KEY | EventType.FOCUS)


def test_raw_value_round_trip():
    identifier = event_id(EventType.HIERARCHY, 2)
    rebuilt = EventId(int(identifier))
    assert rebuilt == identifier
    assert rebuilt.event_type is EventType.HIERARCHY
    assert rebuilt.sub_type == 2