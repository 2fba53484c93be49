from src.mazechase.power import PowerState, TickTimer


def test_tick_timer_fires_once_after_its_delay():
    fired = []
    timer = TickTimer(3, lambda: fired.append(True))
    assert not timer.tick()
    assert not timer.tick()
    assert timer.tick()
    assert fired == [True]
    assert not timer.armed
    assert not timer.tick()
    assert fired == [True]


def test_cancelled_tick_timer_never_fires():
    fired = []
    timer = TickTimer(2, lambda: fired.append(True))
    timer.tick()
    timer.cancel()
    for _ in range(5):
        timer.tick()
    assert fired == []


def test_power_state_deadlines(cfg):
    power = PowerState(cfg.power_ticks, cfg.power_warning_ticks)
    power.activate()
    assert power.active and not power.about_to_expire
    assert power.pending_timers == 2

    for _ in range(3 * cfg.fps - 1):
        power.tick()
    assert not power.about_to_expire
    power.tick()
    assert power.about_to_expire
    assert power.active

    for _ in range(3 * cfg.fps - 1):
        power.tick()
    assert power.active
    power.tick()
    assert not power.active
    assert not power.about_to_expire
    assert power.pending_timers == 0


def test_reactivation_restarts_both_deadlines(cfg):
    power = PowerState(cfg.power_ticks, cfg.power_warning_ticks)
    power.activate()
    for _ in range(300):
        power.tick()
    assert power.about_to_expire

    power.activate()
    assert power.active and not power.about_to_expire
    assert power.pending_timers == 2

    # the first activation's expiry (150 ticks away) must not fire
    for _ in range(3 * cfg.fps - 1):
        power.tick()
    assert power.active and not power.about_to_expire
    power.tick()
    assert power.about_to_expire

    for _ in range(3 * cfg.fps - 1):
        power.tick()
    assert power.active
    power.tick()
    assert not power.active


def test_reset_clears_window_and_timers(cfg):
    power = PowerState(cfg.power_ticks, cfg.power_warning_ticks)
    power.activate()
    power.reset()
    assert not power.active and not power.about_to_expire
    assert power.pending_timers == 0
    for _ in range(cfg.power_ticks + 1):
        power.tick()
    assert not power.active
