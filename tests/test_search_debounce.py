"""Tests for search input debouncing and stale-response suppression."""
import threading

from jobtracker.client.search import LatestRequestRegister, SearchDebouncer
from helpers import fake_timer_factory


def test_only_latest_ticket_is_current():
    register = LatestRequestRegister()
    first = register.issue()
    assert register.is_current(first)

    second = register.issue()
    assert not register.is_current(first)
    assert register.is_current(second)

    register.invalidate()
    assert not register.is_current(second)


def test_rapid_input_collapses_to_last_value():
    calls = []
    factory, timers = fake_timer_factory()
    debouncer = SearchDebouncer(calls.append, delay=0.3, timer_factory=factory)

    for value in ("g", "go", "goo", "google"):
        debouncer.submit(value)

    assert len(timers) == 4
    assert all(timer.cancelled for timer in timers[:-1])
    assert timers[-1].interval == 0.3
    assert timers[-1].started

    timers[-1].fire()
    assert calls == ["google"]
    assert not debouncer.pending


def test_cancelled_timer_firing_late_is_ignored():
    calls = []
    factory, timers = fake_timer_factory()
    debouncer = SearchDebouncer(calls.append, timer_factory=factory)

    debouncer.submit("goo")
    debouncer.submit("google")
    timers[0].fire()
    assert calls == []

    timers[1].fire()
    assert calls == ["google"]


def test_cancel_drops_pending_value():
    calls = []
    factory, timers = fake_timer_factory()
    debouncer = SearchDebouncer(calls.append, timer_factory=factory)

    debouncer.submit("google")
    debouncer.cancel()
    timers[0].fire()

    assert calls == []
    assert timers[0].cancelled


def test_flush_runs_pending_value_once():
    calls = []
    factory, timers = fake_timer_factory()
    debouncer = SearchDebouncer(calls.append, timer_factory=factory)

    debouncer.flush()
    assert calls == []

    debouncer.submit("google")
    debouncer.flush()
    timers[0].fire()
    assert calls == ["google"]


def test_real_timer_fires_after_quiet_period():
    settled = threading.Event()
    calls = []

    def on_settled(value):
        calls.append(value)
        settled.set()

    debouncer = SearchDebouncer(on_settled, delay=0.05)
    debouncer.submit("a")
    debouncer.submit("ab")

    assert settled.wait(timeout=2)
    assert calls == ["ab"]
