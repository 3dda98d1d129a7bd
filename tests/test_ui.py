import re

import pytest

from exercisekit import ui

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text: str) -> str:
    return _ANSI.sub("", text)


@pytest.fixture
def plain_env(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_EMOJI", "1")


@pytest.fixture
def emoji_env(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_without_emoji(plain_env, capsys):
    ui.warn("Ran example with errors")
    assert _plain(capsys.readouterr().out) == "! Ran example with errors\n"


def test_success_without_emoji(plain_env, capsys):
    ui.success("Successfully ran example")
    assert _plain(capsys.readouterr().out) == "✓ Successfully ran example\n"


def test_warn_with_emoji(emoji_env, capsys):
    ui.warn("hello")
    assert _plain(capsys.readouterr().out) == "⚠️  hello\n"


def test_success_with_emoji(emoji_env, capsys):
    ui.success("hello")
    assert _plain(capsys.readouterr().out) == "✅ hello\n"


def test_markup_is_printed_literally(plain_env, capsys):
    ui.warn("[bold]x[/bold]")
    assert "[bold]x[/bold]" in _plain(capsys.readouterr().out)


def test_long_message_is_not_wrapped(plain_env, capsys):
    message = "word " * 60
    ui.success(message.strip())
    out = _plain(capsys.readouterr().out)
    assert out.count("\n") == 1