"""Unit tests for config.py"""

import pytest

from hdiff.config import Settings, highlight_colors, load_config
from hdiff.core.errors import DuplicateHighlightColors
from hdiff.core.models import Numbering, OpKind


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults(monkeypatch):
    monkeypatch.delenv("HDIFF_OUTPUT", raising=False)
    settings = load_config()
    assert settings.output == "diff-report.htm"
    assert settings.numbering == Numbering.off
    assert settings.truncate is None
    assert settings.tab_width == 8


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("numbering: bracketed\nupdates_only: true\n")
    settings = load_config()
    assert settings.numbering == Numbering.bracketed
    assert settings.updates_only is True


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """HDIFF_TAB_WIDTH takes precedence over config.yaml and is coerced to int."""
    (tmp_path / "config.yaml").write_text("tab_width: 4\n")
    monkeypatch.setenv("HDIFF_TAB_WIDTH", "2")
    assert load_config().tab_width == 2


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("HDIFF_OUTPUT", "env.htm")
    settings = load_config(overrides={"output": "cli.htm", "truncate": None})
    assert settings.output == "cli.htm"
    assert settings.truncate is None


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_rejects_bad_truncate():
    with pytest.raises(ValueError):
        load_config(overrides={"truncate": 0})


# --- colours ---

def test_color_normalized():
    """Six hex digits with or without '#' are stored upper-case with '#'."""
    settings = Settings(add_color="00ff00", change_color="#abcdef")
    assert settings.add_color == "#00FF00"
    assert settings.change_color == "#ABCDEF"


@pytest.mark.parametrize("value", ["fff", "#12345g", "red", "1234567"])
def test_color_invalid(value):
    with pytest.raises(ValueError, match="Invalid color code"):
        Settings(delete_color=value)


def test_highlight_colors_default():
    colors = highlight_colors(Settings())
    assert colors == {OpKind.add: "#FF8C00", OpKind.change: "#FFFF00", OpKind.delete: "#C0C0C0"}


def test_highlight_colors_duplicates():
    """Colours that collide after normalization are rejected."""
    with pytest.raises(DuplicateHighlightColors, match="duplicate"):
        highlight_colors(Settings(add_color="ffff00"))


def test_load_config_rejects_duplicate_colors():
    with pytest.raises(DuplicateHighlightColors):
        load_config(overrides={"delete_color": "#FF8C00"})
