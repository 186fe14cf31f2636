"""Builders for job rows and API records used across unit tests."""
from datetime import date

from jobtracker.core.models import JobApplication


def make_job(company, title, status="applied", date_applied=date(2024, 1, 1), notes=""):
    return JobApplication(
        company=company, title=title, status=status, date_applied=date_applied, notes=notes
    )


def make_record(job_id, status="applied", date_applied="2024-01-01", company="Acme", title="Engineer"):
    """A job as the API returns it."""
    return {
        "id": job_id,
        "company": company,
        "title": title,
        "status": status,
        "date_applied": date_applied,
        "notes": "",
    }


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.cancelled = False
        self.started = False
        self.daemon = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        """Run the callback as a real timer thread would, even if cancelled late."""
        self.function(*self.args, **self.kwargs)


def fake_timer_factory():
    """Return a Timer-compatible factory and the list of timers it creates."""
    timers = []

    def factory(interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        timers.append(timer)
        return timer

    return factory, timers
