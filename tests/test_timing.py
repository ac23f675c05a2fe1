import pytest

from physimos.timing import FRAME_DURATION_MS, FRAME_DURATION_S, FrameClock


def _fixed_wall(value=0.0):
    return lambda: value


def test_one_frame_advances_by_integer_milliseconds():
    clock = FrameClock(wall_clock=_fixed_wall())
    clock.new_frame()
    assert clock.world_time == pytest.approx(0.016)
    assert clock.world_epoch == pytest.approx(0.016)


def test_new_frame_advances_clocks():
    clock = FrameClock(wall_clock=_fixed_wall())
    for _ in range(10):
        clock.new_frame()
    assert clock.frame_count == 10
    assert clock.world_time == pytest.approx(10 * FRAME_DURATION_S)
    assert clock.world_epoch == pytest.approx(clock.world_time)


def test_pause_stops_epoch_only():
    clock = FrameClock(wall_clock=_fixed_wall())
    clock.new_frame()
    clock.pause()
    assert clock.is_paused
    epoch = clock.world_epoch
    clock.new_frame()
    clock.new_frame()
    assert clock.world_epoch == epoch
    assert clock.world_time == pytest.approx(3 * FRAME_DURATION_S)
    clock.resume()
    assert not clock.is_paused
    clock.new_frame()
    assert clock.world_epoch == pytest.approx(epoch + FRAME_DURATION_S)


def test_reset_world_epoch():
    clock = FrameClock(wall_clock=_fixed_wall())
    for _ in range(100):
        clock.new_frame()
    clock.reset_world_epoch()
    assert clock.world_epoch == 0.0
    assert clock.world_time_last_reset == int(clock.world_time)


def test_fps_counts_frames_per_second():
    seconds = iter([0.0, 0.2, 0.5, 1.1])
    clock = FrameClock(wall_clock=lambda: next(seconds))
    clock.new_frame()
    assert clock.fps == 1
    clock.new_frame()
    clock.new_frame()
    assert clock.fps == 1
    clock.new_frame()
    assert clock.fps == 3


def test_wait_sleeps_for_remaining_budget():
    times = iter([0.005, 0.020])
    slept = []
    clock = FrameClock(clock=lambda: next(times), sleep=slept.append)
    clock.wait_for_next_frame()
    assert len(slept) == 1
    assert slept[0] == pytest.approx((FRAME_DURATION_MS - 5) / 1000)


def test_wait_skips_sleep_when_frame_is_late():
    times = iter([10.0, 10.0, 10.5, 10.5])
    slept = []
    clock = FrameClock(clock=lambda: next(times), sleep=slept.append)
    clock.wait_for_next_frame()
    clock.wait_for_next_frame()
    assert slept == []