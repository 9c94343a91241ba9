from __future__ import annotations

import logging

import pytest

from wavelab.tools import debug


def test_time_block_is_silent_when_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(debug, "DEBUG_WAVELAB", False)
    messages: list[str] = []
    with debug.time_block("work", emitter=messages.append):
        pass
    assert messages == []


def test_time_block_reports_elapsed_time(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(debug, "DEBUG_WAVELAB", True)
    assert debug.debug_enabled()
    messages: list[str] = []
    with debug.time_block("plot data", emitter=messages.append):
        sum(range(1000))
    assert len(messages) == 1
    assert messages[0].startswith("plot data took ")
    assert messages[0].endswith(" ms")


def test_time_block_logs_without_emitter(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(debug, "DEBUG_WAVELAB", True)
    with caplog.at_level(logging.DEBUG, logger="wavelab.tools.debug"):
        with pytest.raises(RuntimeError):
            with debug.time_block("failing step"):
                raise RuntimeError("boom")
    assert any("failing step took" in r.getMessage() for r in caplog.records)
