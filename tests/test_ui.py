import pytest

from rustlings.ui import success, warn


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Compiling of x.rs failed!")
    assert capsys.readouterr().out == "! Compiling of x.rs failed!\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran x.rs")
    assert capsys.readouterr().out == "✓ Successfully ran x.rs\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("boom")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith("boom")


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done [bold]here[/bold]")
    out = capsys.readouterr().out
    assert out.startswith("✅")
    assert "done [bold]here[/bold]" in out