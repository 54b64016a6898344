import pytest

from drillkit.ui import no_emoji, success, warn


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_no_emoji_is_set_even_when_empty(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "")
    assert no_emoji() is True


def test_no_emoji_unset(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert no_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran pending.rs with errors")
    captured = capsys.readouterr()
    assert captured.out.strip() == "! Ran pending.rs with errors"
    assert captured.err == ""


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("Ran pending.rs with errors")
    assert capsys.readouterr().out.strip() == "⚠️  Ran pending.rs with errors"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran pending.rs")
    assert capsys.readouterr().out.strip() == "✓ Successfully ran pending.rs"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("Successfully ran pending.rs")
    assert capsys.readouterr().out.strip() == "✅ Successfully ran pending.rs"


def test_message_with_brackets_is_printed_verbatim(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]not markup[/bold]")
    assert "[bold]not markup[/bold]" in capsys.readouterr().out