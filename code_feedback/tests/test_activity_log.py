from __future__ import annotations

from code_feedback.base.notifications import ActivityLog, LogCategory


def test_log_is_capped_at_fifty_entries():
    log = ActivityLog()
    for i in range(60):
        log.append(f"line {i}")
    assert len(log) == 50
    assert log.capacity == 50
    assert log.messages()[0] == "line 10"
    assert log.messages()[-1] == "line 59"


def test_entries_carry_category_and_timestamp():
    log = ActivityLog(clock=lambda: 123.0)
    entry = log.append("❌ Connection issue - Retrying...", LogCategory.ERROR)
    assert entry.category is LogCategory.ERROR
    assert entry.timestamp == 123.0
    assert log.entries() == [entry]


def test_category_accepts_plain_string():
    log = ActivityLog()
    assert log.append("x", "ai").category is LogCategory.AI


def test_on_append_listener_and_its_failures():
    seen = []
    log = ActivityLog(on_append=seen.append)
    log.append("a")
    assert [e.message for e in seen] == ["a"]

    def broken(_entry) -> None:
        raise RuntimeError("panel disposed")

    log = ActivityLog(on_append=broken)
    log.append("b")
    assert log.messages() == ["b"]


def test_clear():
    log = ActivityLog(capacity=3)
    log.append("a")
    log.clear()
    assert len(log) == 0
