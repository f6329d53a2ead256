"""Tests for the momentum fling strategy."""

import pytest

from cropme.animation import DragForce, FrameClock, MomentumFling


class Box:
    def __init__(self, value=0.0):
        self.value = value
        self.attached = True

    def read(self):
        return self.value if self.attached else None

    def write(self, value):
        if not self.attached:
            return False
        self.value = value
        return True


@pytest.fixture
def clock():
    return FrameClock()


@pytest.fixture
def box():
    return Box(0.0)


@pytest.fixture
def fling(box, clock):
    return MomentumFling(
        name="test-fling", clock=clock, read_value=box.read, write_value=box.write
    )


def run(clock, max_frames=1000):
    frames = 0
    while clock.has_pending() and frames < max_frames:
        clock.advance(16)
        frames += 1
    assert not clock.has_pending(), "fling did not stop"
    return frames


def test_drag_force_travel_distance():
    force = DragForce(friction=1.75, velocity_threshold=62.5)
    assert force.friction == pytest.approx(-7.35)
    assert force.travel_distance(1000.0) == pytest.approx(1000.0 / 7.35)


def test_drag_force_decays_velocity():
    force = DragForce(friction=1.75, velocity_threshold=62.5)
    value, velocity = force.update_values(0.0, 1000.0, 100.0)
    assert 0.0 < velocity < 1000.0
    assert 0.0 < value < 100.0


def test_drag_force_snaps_slow_velocity_to_zero():
    force = DragForce(friction=1.75, velocity_threshold=62.5)
    _, velocity = force.update_values(0.0, 63.0, 16.0)
    assert velocity == 0.0


def test_fling_decelerates_and_stops(box, clock, fling):
    velocities = []
    ends = []
    fling.add_update_listener(lambda value, velocity: velocities.append(velocity))
    fling.add_end_listener(lambda canceled, value, velocity: ends.append(canceled))

    assert fling.start(1000.0)
    run(clock)

    travel = 1000.0 / 7.35
    assert travel - 9.0 < box.value <= travel
    assert velocities == sorted(velocities, reverse=True)
    assert velocities[-1] == 0.0
    assert ends == [False]
    assert not fling.is_active()


def test_negative_fling_moves_backwards(box, clock, fling):
    fling.start(-1000.0)
    run(clock)
    assert box.value < -100.0


def test_update_listener_runs_once_per_frame(clock, fling):
    calls = []
    fling.add_update_listener(lambda value, velocity: calls.append(velocity))
    fling.start(2000.0)

    clock.advance(16)
    clock.advance(16)
    assert len(calls) == 2


def test_slow_fling_ends_on_first_frame(box, clock, fling):
    ends = []
    fling.add_end_listener(lambda canceled, value, velocity: ends.append(canceled))
    fling.start(10.0)
    clock.advance(16)
    assert ends == [False]
    assert not fling.is_active()


def test_removed_listener_is_not_called(clock, fling):
    calls = []

    def listener(value, velocity):
        calls.append(velocity)

    fling.add_update_listener(listener)
    fling.add_update_listener(listener)
    fling.remove_update_listener(listener)
    fling.start(2000.0)
    clock.advance(16)
    assert calls == []


def test_listener_cancel_stops_the_frame(box, clock, fling):
    """A listener that cancels the fling prevents it from finishing normally."""
    ends = []
    fling.add_update_listener(lambda value, velocity: fling.cancel())
    fling.add_end_listener(lambda canceled, value, velocity: ends.append(canceled))

    fling.start(2000.0)
    clock.advance(16)

    assert ends == [True]
    assert not fling.is_active()
    assert not clock.has_pending()


def test_detached_surface_stops_fling(box, clock, fling):
    fling.start(2000.0)
    clock.advance(16)
    moved_to = box.value
    box.attached = False
    clock.advance(16)
    assert not fling.is_active()
    assert box.value == moved_to
