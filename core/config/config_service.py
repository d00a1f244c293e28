"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

def _find_project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "core").is_dir():
            return parent
    return here.parent

PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "core" / "config"
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
MACHINE_INI = CONFIG_DIR / "config.ini"

ENV_PREFIX = "GUESTREG_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "General": {
        "app_name": "Guest Registration Desk",
        "version": "1.0.0",
        "language": "fr",
    },
    "Logging": {
        "level": "INFO",
        "log_file": "",
    },
    "Roster": {
        "min_guests": "1",
        "max_guests": "6",
        "default_guest_count": "1",
        "moroccan_token": "Morocco",
        "countries_file": (PROJECT_ROOT / "guests" / "data" / "countries.json").as_posix(),
    },
    "Signature": {
        "width_wide": "500",
        "width_narrow": "250",
        "narrow_breakpoint": "640",
        "height": "200",
        "stroke_color": "#ffffff",
        "stroke_width": "2",
    },
    "Uploads": {
        "max_files": "5",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class GeneralConfig:
    app_name: str = "Guest Registration Desk"
    version: str = "1.0.0"
    language: str = "fr"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: str = ""


@dataclass
class RosterConfig:
    min_guests: int = 1
    max_guests: int = 6
    default_guest_count: int = 1
    moroccan_token: str = "Morocco"
    countries_file: Path = PROJECT_ROOT / "guests" / "data" / "countries.json"


@dataclass
class SignatureConfig:
    width_wide: int = 500
    width_narrow: int = 250
    narrow_breakpoint: int = 640
    height: int = 200
    stroke_color: str = "#ffffff"
    stroke_width: int = 2


@dataclass
class UploadsConfig:
    max_files: int = 5


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    # field.type is a string under postponed annotations
    if isinstance(typ, str):
        typ = {"Path": Path, "bool": bool, "int": int, "float": float, "str": str}.get(typ, str)
    if typ is Path:
        return Path(str(value)).expanduser()
    if typ is bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ is int:
        return int(value)
    if typ is float:
        return float(value)
    return typ(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        kwargs[field.name] = _cast(val, field.type)
    return cls(**kwargs)


def _env_overlays(environ: Mapping[str, str]) -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "GuestReg" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "guestreg" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety.

    Precedence (lowest first): embedded defaults, defaults.ini, environment
    (``GUESTREG_<SECTION>__<KEY>``), machine config.ini, user config.ini.
    """

    def __init__(
        self,
        *,
        defaults_ini: Optional[Path] = None,
        machine_ini: Optional[Path] = None,
        user_ini: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._lock = RLock()
        self._defaults_ini = defaults_ini or DEFAULTS_INI
        self._machine_ini = machine_ini or MACHINE_INI
        self._user_ini = user_ini or _user_config_path()
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if self._defaults_ini.exists():
                _apply(merged, _read_ini(self._defaults_ini), "defaults.ini", str(self._defaults_ini), sources)

            # Layer 2: environment variables
            env = _env_overlays(os.environ if self._environ is None else self._environ)
            _apply(merged, env, "env", "os.environ", sources)

            # Layer 3: machine config
            if self._machine_ini.exists():
                _apply(merged, _read_ini(self._machine_ini), "machine", str(self._machine_ini), sources)

            # Layer 4: user overrides
            if self._user_ini.exists():
                _apply(merged, _read_ini(self._user_ini), "user", str(self._user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.general = _build_dataclass(GeneralConfig, merged.get("General", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))
            self.roster = _build_dataclass(RosterConfig, merged.get("Roster", {}))
            self.signature = _build_dataclass(SignatureConfig, merged.get("Signature", {}))
            self.uploads = _build_dataclass(UploadsConfig, merged.get("Uploads", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
