from whisker.timer import Timer, TimerStatus


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_elapsed_while_active():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 5.0
    assert timer.elapsed() == 5.0
    assert timer.status() is TimerStatus.ACTIVE


def test_pause_freezes_elapsed():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 5.0
    timer.pause()
    clock.now = 9.0
    assert timer.status() is TimerStatus.PAUSED
    assert timer.elapsed() == 5.0


def test_resume_excludes_paused_time():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 5.0
    timer.pause()
    clock.now = 9.0
    timer.resume()
    clock.now = 12.0
    assert timer.status() is TimerStatus.ACTIVE
    assert timer.elapsed() == 5.0 + (12.0 - 9.0)


def test_pause_twice_keeps_first():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 2.0
    timer.pause()
    clock.now = 7.0
    timer.pause()
    assert timer.elapsed() == 2.0


def test_resume_while_active_is_noop():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 3.0
    timer.resume()
    assert timer.elapsed() == 3.0


def test_reset_restarts():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 4.0
    timer.pause()
    timer.reset()
    assert timer.status() is TimerStatus.ACTIVE
    assert timer.elapsed() == 0.0
    clock.now = 6.0
    assert timer.elapsed() == 2.0


def test_real_clock_monotonic():
    timer = Timer()
    first = timer.elapsed()
    second = timer.elapsed()
    assert 0.0 <= first <= second