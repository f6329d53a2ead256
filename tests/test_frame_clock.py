"""Tests for frame scheduling."""

from cropme.animation import FrameClock, TimerFrameClock


class FakeStrategy:
    def __init__(self, on_frame=None):
        self.frames = []
        self._on_frame = on_frame

    def do_frame(self, delta_ms):
        self.frames.append(delta_ms)
        if self._on_frame is not None:
            self._on_frame()
        return False


def test_advance_runs_registered_strategies():
    clock = FrameClock()
    first, second = FakeStrategy(), FakeStrategy()
    clock.register(first)
    clock.register(second)
    clock.register(first)

    clock.advance(16)

    assert first.frames == [16]
    assert second.frames == [16]


def test_unregister_is_idempotent():
    clock = FrameClock()
    strategy = FakeStrategy()
    clock.register(strategy)
    assert clock.has_pending()

    clock.unregister(strategy)
    clock.unregister(strategy)

    assert not clock.has_pending()
    clock.advance(16)
    assert strategy.frames == []


def test_strategy_registered_mid_frame_waits_for_next_frame():
    clock = FrameClock()
    late = FakeStrategy()
    early = FakeStrategy(on_frame=lambda: clock.register(late))
    clock.register(early)

    clock.advance(16)
    assert late.frames == []

    clock.advance(16)
    assert late.frames == [16]


def test_strategy_canceled_mid_frame_is_skipped():
    clock = FrameClock()
    victim = FakeStrategy()
    canceller = FakeStrategy(on_frame=lambda: clock.unregister(victim))
    clock.register(canceller)
    clock.register(victim)

    clock.advance(16)

    assert canceller.frames == [16]
    assert victim.frames == []


def test_timer_clock_arms_only_while_pending(qapp):
    clock = TimerFrameClock(interval_ms=16)
    strategy = FakeStrategy()
    assert not clock.is_running()

    clock.register(strategy)
    assert clock.is_running()

    clock.unregister(strategy)
    assert not clock.is_running()


def test_timer_tick_advances_by_elapsed_time(qapp):
    clock = TimerFrameClock()
    strategy = FakeStrategy()
    clock.register(strategy)

    clock._handle_tick()

    assert len(strategy.frames) == 1
    assert strategy.frames[0] >= 0.0
    clock.unregister(strategy)
