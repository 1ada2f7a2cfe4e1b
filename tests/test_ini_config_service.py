# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from pywp.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def user_dir(monkeypatch, tmp_path) -> Path:
    """Point platformdirs' user config dir into tmp; returns the would-be config file."""
    monkeypatch.setattr(
        "pywp.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "usercfg" / appname),
    )
    return tmp_path / "usercfg" / IniConfigService.DEFAULT_APP_DIR / IniConfigService.DEFAULT_FILE


def test_defaults_when_no_config_files(user_dir):
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"

    # getters with defaults
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_bool("app", "nope", False) is False


def test_project_root_config_is_used_when_present(user_dir, tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[app]\nversion = 1.2.3\n[links]\nescape = false\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.2.3"
    assert cfg.get_bool("links", "escape", None) is False


def test_user_config_preferred_over_project_root(user_dir, tmp_path):
    proj_root = tmp_path / "repo"
    write_ini(user_dir, "[app]\nversion = 2.0.0\n")
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"


def test_explicit_path_overrides_everything(user_dir, tmp_path):
    proj_root = tmp_path / "repo"
    explicit_path = tmp_path / "explicit.ini"

    write_ini(user_dir, "[app]\nversion = 2.0.0\n")
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")
    write_ini(explicit_path, "[app]\nversion = 9.9.9\n")

    cfg = IniConfigService(explicit_path=explicit_path, project_root=proj_root)
    assert cfg.app_version() == "9.9.9"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        (" True ", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("no", False),
        ("off", False),
        ("0", False),
        ("maybe", None),
        ("", None),
    ],
)
def test_get_bool_parsing(user_dir, raw, expected):
    write_ini(user_dir, f"[links]\nescape = {raw}\n")

    cfg = IniConfigService()
    assert cfg.get_bool("links", "escape", None) is expected


def test_malformed_config_is_ignored_and_next_candidate_used(user_dir, tmp_path):
    user_dir.parent.mkdir(parents=True, exist_ok=True)
    user_dir.write_text("this is not INI at all", encoding="utf-8")
    proj_root = tmp_path / "repo"
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.1.1\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.1.1"


def test_malformed_config_alone_falls_back_to_defaults(user_dir):
    user_dir.parent.mkdir(parents=True, exist_ok=True)
    user_dir.write_text("this is not INI at all", encoding="utf-8")

    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
