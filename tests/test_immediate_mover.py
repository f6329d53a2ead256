"""Tests for the zero-duration move strategy."""

from cropme.animation import FrameClock, ImmediateMover


def test_start_writes_synchronously_and_never_stays_active():
    values = []
    clock = FrameClock()
    mover = ImmediateMover(
        name="test-move",
        clock=clock,
        read_value=lambda: 0.0,
        write_value=lambda value: values.append(value) or True,
    )
    ends = []
    mover.add_end_listener(lambda canceled, value, velocity: ends.append(canceled))

    mover.start(42.0)

    assert values == [42.0]
    assert not mover.is_active()
    assert not clock.has_pending()
    assert ends == [False]


def test_failed_write_is_silent():
    mover = ImmediateMover(
        name="test-move",
        clock=FrameClock(),
        read_value=lambda: None,
        write_value=lambda value: False,
    )
    updates = []
    mover.add_update_listener(lambda value, velocity: updates.append(value))

    mover.start(42.0)

    assert updates == []
    assert not mover.is_active()
