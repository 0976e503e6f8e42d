"""Tests for .envedit.toml config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from envedit.config import EnveditConfig, find_config_file, load_config


def test_load_config_invalid_toml_syntax(tmp_path):
    """Invalid TOML syntax in project file raises when loading config."""
    toml = tmp_path / ".envedit.toml"
    toml.write_text("[envedit\nenv_file = \"x\"")  # unclosed bracket
    with pytest.raises(ValueError):  # TOMLDecodeError subclasses ValueError
        load_config(toml)


def test_load_config_from_file(tmp_path):
    toml = tmp_path / ".envedit.toml"
    toml.write_text("""\
[envedit]
env_file = "config/.env.local"
mask = false
""")
    cfg = load_config(toml)
    assert cfg.env_file == tmp_path / "config" / ".env.local"
    assert cfg.mask is False
    assert cfg.config_path == toml


def test_load_config_absolute_env_file(tmp_path):
    target = tmp_path / "elsewhere.env"
    toml = tmp_path / ".envedit.toml"
    toml.write_text(f'[envedit]\nenv_file = "{target.as_posix()}"\n')
    assert load_config(toml).env_file == target


def test_load_config_missing_section_uses_defaults(tmp_path):
    toml = tmp_path / ".envedit.toml"
    toml.write_text("[other]\nkey = 1\n")
    cfg = load_config(toml)
    assert cfg.env_file == tmp_path / ".env"
    assert cfg.mask is True


def test_load_config_defaults():
    cfg = load_config(path=None)
    assert cfg == EnveditConfig()
    assert cfg.env_file == Path(".env")


def test_env_var_overrides_config(tmp_path, monkeypatch):
    toml = tmp_path / ".envedit.toml"
    toml.write_text('[envedit]\nenv_file = "from-config.env"\n')
    monkeypatch.setenv("ENVEDIT_FILE", "/tmp/from-env.env")
    assert load_config(toml).env_file == Path("/tmp/from-env.env")


def test_find_config_file_walks_upward(tmp_path):
    toml = tmp_path / ".envedit.toml"
    toml.write_text("[envedit]\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == toml.resolve()


def test_load_config_discovers_from_cwd(tmp_path):
    (tmp_path / ".envedit.toml").write_text('[envedit]\nenv_file = "app.env"\n')
    cfg = load_config()
    assert cfg.env_file == tmp_path.resolve() / "app.env"
