"""Tests for the shared log."""

from __future__ import annotations

from core.log import Log


def test_verbosity_filters(verbose_log):
    Log.set_verbosity(1)
    Log.debug("kept", 1)
    Log.debug("dropped", 2)
    messages = Log.messages()
    assert any(m.endswith("kept") for m in messages)
    assert not any(m.endswith("dropped") for m in messages)


def test_debug_tags_caller_file(verbose_log):
    Log.debug("hello", 0)
    assert Log.messages()[-1] == "[test_log.py] hello"


def test_clear_resets(verbose_log):
    Log.add("one")
    Log.clear()
    assert Log.count() == 1
    assert Log.messages() == ["Log cleared"]


def test_write_to_file(verbose_log, tmp_path):
    Log.add("written")
    path = tmp_path / "treedrop.log"
    Log.write_to_file(str(path))
    text = path.read_text(encoding="utf-8")
    assert "] written\n" in text
    assert Log.messages()[-1].startswith("Log written to file")


def test_write_failure_is_logged(verbose_log, tmp_path):
    Log.write_to_file(str(tmp_path / "missing" / "x.log"))
    assert Log.messages()[-1].startswith("Failed to write log")
