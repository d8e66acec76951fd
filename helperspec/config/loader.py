# helperspec/config/loader.py
"""
Handles loading and merging of settings from TOML files.
"""
import toml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import fields as dataclass_fields
import structlog

from helperspec.exceptions import ConfigError

from .settings import HelperSettings, LogLevel

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".helperspec.toml", "helperspec.toml", "pyproject.toml"]

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file(): return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Could not read config file {file_path}: {e}") from e
    return data.get("tool", {}).get("helperspec", {}) if file_path.name == "pyproject.toml" else data

def load_config_data(search_dir: Optional[Path] = None) -> Dict[str, Any]:
    # first matching project file wins; pyproject.toml only counts if it has a [tool.helperspec] table.
    base = search_dir or Path.cwd()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = base / filename
        if candidate.is_file():
            data = _load_toml_file_data(candidate)
            if data:
                log.info("loading_project_local_config", path=str(candidate))
                return data
    log.debug("no_configuration_files_loaded", search_dir=str(base))
    return {}

def settings_from_mapping(data: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None) -> HelperSettings:
    """Builds HelperSettings from file data, then applies non-None overrides (CLI flags)."""
    known = {f.name for f in dataclass_fields(HelperSettings)}
    merged: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            log.warning("unknown_config_key_ignored", key=key)
            continue
        merged[key] = value
    for key, value in (overrides or {}).items():
        if value is not None and key in known:
            merged[key] = value

    if "log_level" in merged and not isinstance(merged["log_level"], LogLevel):
        merged["log_level"] = LogLevel.from_string(str(merged["log_level"]))
    helper_modules = merged.get("helper_modules")
    if helper_modules is not None:
        if isinstance(helper_modules, str): helper_modules = [helper_modules]
        if not isinstance(helper_modules, (list, tuple)) or not all(isinstance(m, str) for m in helper_modules):
            raise ConfigError("helper_modules must be a list of 'module:attribute' strings")
        merged["helper_modules"] = list(helper_modules)
    if "force_json_logs" in merged and not isinstance(merged["force_json_logs"], bool):
        raise ConfigError("force_json_logs must be true or false")
    return HelperSettings(**merged)

def load_settings(search_dir: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> HelperSettings:
    return settings_from_mapping(load_config_data(search_dir), overrides)
