"""Tests for Rich rendering of autoload errors."""

from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from autoload_cli.errors import AlreadyLoaded
from autoload_cli.errors import NotDeclared
from autoload_cli.errors import NotReadable
from autoload_cli.schema import AutoloadSettings
from autoload_cli.settings import SettingsError
from autoload_cli.ui.error_display import display_autoload_error
from autoload_cli.ui.error_display import display_settings_error


def make_console() -> Console:
    return Console(record=True, width=120, force_terminal=False)


def test_not_readable_shows_trail():
    console = make_console()
    error = NotReadable("pkg.Widget", ["/a (prefix pkg.)", "/b (prefix pkg.)"])

    assert display_autoload_error(console, error) is True

    output = console.export_text()
    assert "Symbol File Not Found" in output
    assert "pkg.Widget" in output
    assert "/a (prefix pkg.)" in output
    assert "/b (prefix pkg.)" in output
    assert "autoload prefix add" in output


def test_not_readable_without_trail():
    console = make_console()
    display_autoload_error(console, NotReadable("pkg.Widget"))
    assert "No locations were tried" in console.export_text()


def test_not_declared_tip():
    console = make_console()
    display_autoload_error(console, NotDeclared("pkg.Widget"))
    output = console.export_text()
    assert "Symbol Not Declared" in output
    assert "__namespace__" in output


def test_already_loaded_title():
    console = make_console()
    display_autoload_error(console, AlreadyLoaded("pkg.Widget"))
    assert "Symbol Already Loaded" in console.export_text()


def test_other_errors_not_handled():
    console = make_console()
    assert display_autoload_error(console, RuntimeError("x")) is False
    assert display_settings_error(console, RuntimeError("x")) is False
    assert console.export_text() == ""


def test_settings_error_panel():
    try:
        AutoloadSettings.model_validate({"mode": "loud"})
    except ValidationError as e:
        error = SettingsError(Path("settings.yaml"), e)

    console = make_console()
    assert display_settings_error(console, error) is True
    output = console.export_text()
    assert "Invalid Settings" in output
    assert "mode" in output
