from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

from pywp.domain.interfaces import IAppConfig
from pywp.services.config.ini_config_service import IniConfigService
from pywp.utils.constants import DEFAULT_FILENAME

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Project root that also works in PyInstaller bundles (sys._MEIPASS);
    in dev mode walk up from pywp/services/config/app_config.py.
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None
    return m.group(1)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter over IniConfigService with typed accessors for the editor's settings.

    Version precedence:
      1) <project_root>/version file (e.g. v1.0.0)
      2) [app] version from the INI
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- editor settings ----

    def document_encoding(self) -> str:
        return (self.get("document", "encoding", "utf-8") or "").strip() or "utf-8"

    def default_filename(self) -> str:
        return (self.get("document", "default_name", DEFAULT_FILENAME) or "").strip() or DEFAULT_FILENAME

    def escape_links(self) -> bool:
        v = self.get_bool("links", "escape", True)
        return True if v is None else v

    def log_level(self) -> str:
        return self.get("logging", "level", "INFO") or "INFO"

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
