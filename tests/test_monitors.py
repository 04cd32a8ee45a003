"""
Tests for the request activity monitor.
"""

from core.monitors import ActivityMonitor


def test_monitor_is_singleton():
    assert ActivityMonitor() is ActivityMonitor()


def test_get_recent_newest_last():
    monitor = ActivityMonitor()
    for mode in ("encode", "decode", "rot13"):
        monitor.emit(mode, 200)
    assert [e["mode"] for e in monitor.get_recent(2)] == ["decode", "rot13"]


def test_get_recent_mode_older_than_window():
    monitor = ActivityMonitor()
    monitor.emit("rot13", 200, text_length=5)
    for _ in range(5):
        monitor.emit("brute", 200)
    events = monitor.get_recent(1, mode="rot13")
    assert len(events) == 1
    assert events[0]["payload"] == {"text_length": 5}


def test_get_recent_mode_takes_newest_n():
    monitor = ActivityMonitor()
    for status in (200, 400, 200):
        monitor.emit("auto", status)
        monitor.emit("encode", 200)
    assert [e["status"] for e in monitor.get_recent(2, mode="auto")] == [400, 200]


def test_get_recent_non_positive_n():
    monitor = ActivityMonitor()
    monitor.emit("encode", 200)
    assert monitor.get_recent(0) == []


def test_counts_and_clear():
    monitor = ActivityMonitor()
    monitor.emit("encode", 200)
    monitor.emit("encode", 400)
    monitor.emit(None, 400)
    assert monitor.counts() == {"encode": 2, "invalid": 1}
    monitor.clear()
    assert monitor.counts() == {}
    assert monitor.get_recent() == []
