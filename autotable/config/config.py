#!/usr/bin/env python3
# autotable/config/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, autotable.ini, autotable.json, autotable.toml
  3) Environment variables prefixed with AUTOTABLE_ (prefix stripped)

Validation:
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
  - SHOW_FOOTER / STRICT_ALIGNMENT: bool
  - INDEX_HEADER: str (may be empty)
  - MENU_DELIMITER: non-empty str
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import configparser
import json
import os
import re
import tomllib

from autotable.exceptions import ConfigError

ENV_PREFIX = "AUTOTABLE_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "LOG_LEVEL": None,              # 'DEBUG'/'INFO'/'WARNING'/'ERROR'/'CRITICAL'
    "LOG_FILE_PATH": None,
    "SHOW_FOOTER": True,
    "STRICT_ALIGNMENT": False,      # raise on unknown alignment instead of falling back
    "INDEX_HEADER": "#",
    "MENU_DELIMITER": ".",
}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    log_level: str | None = None
    log_file_path: Path | None = None

    show_footer: bool = True
    strict_alignment: bool = False

    index_header: str = "#"
    menu_delimiter: str = "."

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    try:
        cfg.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigError(f"Cannot parse {path.name}: {exc}") from exc
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Cannot parse {path.name}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Cannot parse {path.name}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'menu': {'delimiter': ')'}} -> {'MENU_DELIMITER': ')'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path | None = None) -> list[Path]:
    cwd = base or Path.cwd()
    return [
        cwd / ".env",
        cwd / "autotable.ini",
        cwd / "autotable.json",
        cwd / "autotable.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigError(f"{key} expects a boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str | None:
    lv = _as_opt_str(val)
    if lv is None:
        return None
    up = lv.upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ConfigError(
            f"LOG_LEVEL must be one of {sorted(allowed)}, got {lv!r}")
    return up


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    # expand both ~ and env vars
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- merge & load ----------

def _merge_sources(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if not file.is_file():
            continue
        if file.suffix == ".env":
            loaded = _load_env_file(file)
            # .env may use prefixed or bare keys
            merged.update({k.removeprefix(ENV_PREFIX): v for k, v in _normalize_keys(loaded).items()})
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only AUTOTABLE_* keys
    env = os.environ if environ is None else environ
    merged.update({
        k[len(ENV_PREFIX):]: v for k, v in env.items() if k.startswith(ENV_PREFIX)
    })
    return merged


# ---------- validation ----------

def _validate_and_build(config: Mapping[str, Any]) -> AppConfig:
    log_level = _as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]))
    log_file_path = _as_opt_path(config.get("LOG_FILE_PATH", DEFAULTS["LOG_FILE_PATH"]))
    show_footer = _as_bool("SHOW_FOOTER", config.get("SHOW_FOOTER", DEFAULTS["SHOW_FOOTER"]))
    strict_alignment = _as_bool(
        "STRICT_ALIGNMENT", config.get("STRICT_ALIGNMENT", DEFAULTS["STRICT_ALIGNMENT"]))

    index_header_raw = config.get("INDEX_HEADER", DEFAULTS["INDEX_HEADER"])
    index_header = "" if index_header_raw is None else str(index_header_raw)

    menu_delimiter = _as_opt_str(config.get("MENU_DELIMITER", DEFAULTS["MENU_DELIMITER"]))
    if menu_delimiter is None:
        raise ConfigError("MENU_DELIMITER must not be empty")

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        log_level=log_level,
        log_file_path=log_file_path,
        show_footer=show_footer,
        strict_alignment=strict_alignment,
        index_header=index_header,
        menu_delimiter=menu_delimiter,
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.

    `base` replaces the CWD as the directory searched for config files and
    `environ` replaces os.environ; both exist mainly for tests.
    Raises ConfigError on invalid values.
    """
    return _validate_and_build(_merge_sources(base, environ))
