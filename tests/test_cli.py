"""
==============================================================================
CLI Tests
==============================================================================
"""

from typer.testing import CliRunner

from catalog import cli

runner = CliRunner()


def test_serve_uses_configured_port(monkeypatch):
    calls = {}

    def fake_run(target, **kwargs):
        calls["target"] = target
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    monkeypatch.setenv("PORT", "5000")
    cli.get_settings.cache_clear()

    result = runner.invoke(cli.app, ["serve"])
    assert result.exit_code == 0
    assert calls["target"] == "catalog.main:app"
    assert calls["port"] == 5000
    assert calls["lifespan"] == "on"


def test_serve_port_override(monkeypatch):
    calls = {}
    monkeypatch.setattr(cli.uvicorn, "run", lambda target, **kwargs: calls.update(kwargs))

    result = runner.invoke(cli.app, ["serve", "--port", "8081"])
    assert result.exit_code == 0
    assert calls["port"] == 8081


def test_shop_opens_storefront(monkeypatch):
    opened = []
    monkeypatch.setattr(cli, "run_shell", lambda control, console: opened.append(control))

    result = runner.invoke(cli.app, ["shop", "--base-url", "http://shop.example.com"])
    assert result.exit_code == 0
    assert len(opened) == 1
