"""Tests for clipboard access."""

import subprocess

from xlinks import clipboard


class _Completed:
    def __init__(self, returncode=0, stderr=""):
        self.returncode = returncode
        self.stderr = stderr


def test_copy_to_clipboard_without_tool_returns_false(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda _name: None)

    assert clipboard.copy_to_clipboard("text") is False


def test_copy_to_clipboard_pipes_text_to_first_available_tool(monkeypatch):
    calls = {}

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/xclip" if name == "xclip" else None)

    def _fake_run(cmd, **kwargs):
        calls["cmd"] = cmd
        calls["input"] = kwargs["input"]
        return _Completed()

    monkeypatch.setattr(clipboard.subprocess, "run", _fake_run)

    assert clipboard.copy_to_clipboard("alice\nbob") is True
    assert calls == {"cmd": ["xclip", "-selection", "clipboard"], "input": "alice\nbob"}


def test_copy_to_clipboard_reports_tool_failure(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda _name: "/usr/bin/pbcopy")
    monkeypatch.setattr(clipboard.subprocess, "run", lambda *a, **k: _Completed(returncode=1, stderr="denied"))

    assert clipboard.copy_to_clipboard("text") is False


def test_copy_to_clipboard_handles_timeout(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda _name: "/usr/bin/pbcopy")

    def _timeout(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

    monkeypatch.setattr(clipboard.subprocess, "run", _timeout)

    assert clipboard.copy_to_clipboard("text") is False
