import pytest

from virtual_stick.throttle import ThrottleGate


class TestThrottleGate:
    def test_zero_duration_admits_everything(self, clock):
        gate = ThrottleGate(0, clock=clock)
        assert all(gate.admit() for _ in range(5))

    def test_first_candidate_is_always_admitted(self, clock):
        clock.now = 0.0
        gate = ThrottleGate(100, clock=clock)
        assert gate.admit()
        assert gate.last_emit_ms == 0.0

    def test_suppression_window(self, clock):
        gate = ThrottleGate(100, clock=clock)
        assert gate.admit()
        clock.advance(50)
        assert not gate.admit()
        clock.advance(60)
        assert gate.admit()

    def test_suppressed_candidate_does_not_move_window(self, clock):
        gate = ThrottleGate(100, clock=clock)
        start = clock.now
        gate.admit()
        clock.advance(99)
        gate.admit()
        assert gate.last_emit_ms == start
        clock.advance(1)
        assert gate.admit()

    def test_reset_forgets_last_emit(self, clock):
        gate = ThrottleGate(100, clock=clock)
        gate.admit()
        gate.reset()
        assert gate.last_emit_ms is None
        assert gate.admit()

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError):
            ThrottleGate(-1)
        gate = ThrottleGate()
        with pytest.raises(ValueError):
            gate.duration_ms = -5

    def test_default_clock_is_used(self):
        gate = ThrottleGate(10_000)
        assert gate.admit()
        assert not gate.admit()
