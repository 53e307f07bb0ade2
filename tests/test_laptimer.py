from mockdecoder.laptimer import LapTracker, passing_seconds
from mockdecoder.passing import PassingRecord


def passing(transponder, time, number=1):
    return PassingRecord(number, transponder, "2024-03-09", time)


def test_passing_seconds():
    assert passing_seconds(passing("12345", "01:02:03.500")) == 3723.5


def test_first_passing_has_no_lap():
    tracker = LapTracker()
    assert tracker.update(passing("12345", "10:00:00.000")) is None


def test_lap_per_transponder():
    tracker = LapTracker()
    tracker.update(passing("12345", "10:00:00.000"))
    tracker.update(passing("67890", "10:00:05.000"))
    assert tracker.update(passing("12345", "10:00:31.250")) == 31.25
    assert tracker.update(passing("67890", "10:00:35.000")) == 30.0


def test_long_lap_ignored_but_resets_reference():
    tracker = LapTracker()
    tracker.update(passing("12345", "10:00:00.000"))
    assert tracker.update(passing("12345", "10:05:00.000")) is None
    assert tracker.update(passing("12345", "10:05:40.000")) == 40.0


def test_lap_across_midnight():
    tracker = LapTracker()
    tracker.update(passing("12345", "23:59:50.000"))
    assert tracker.update(passing("12345", "00:00:20.000")) == 30.0
