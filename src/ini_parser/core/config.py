from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ini_parser.core.errors import ConfigError
from ini_parser.core.models import OutputConfig, UIConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


# Project config (closest one in the parent chain of the working dir)
DEFAULT_PROJECT_CONFIG_FILES = (".ini-parser.toml",)

# Global config (applies on this machine for every run)
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/ini-parser/config.toml",
    "~/.ini-parser.toml",
)


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _expand_paths(paths: tuple[str, ...]) -> list[Path]:
    return [Path(p).expanduser().resolve() for p in paths]


def find_project_config(start_dir: Path) -> Optional[Path]:
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_PROJECT_CONFIG_FILES:
            p = parent / rel
            if p.is_file():
                return p
    return None


def find_global_config() -> Optional[Path]:
    for p in _expand_paths(DEFAULT_GLOBAL_CONFIG_FILES):
        if p.is_file():
            return p
    return None


def _section(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = merged.get(name) or {}
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class LoadedConfig:
    output: OutputConfig
    ui: UIConfig
    global_path: Optional[Path]
    project_path: Optional[Path]


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
    *,
    use_global: bool = True,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (OutputConfig/UIConfig) ->
      global config ->
      project config (closest) ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config() if use_global else None
    project_path = find_project_config(start_dir)

    merged: Dict[str, Any] = {}
    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))
    if project_path:
        merged = _deep_merge(merged, _read_toml(project_path))

    # CLI overrides use the same namespaced shape as the TOML
    merged = _deep_merge(merged, cli_overrides)

    try:
        output = OutputConfig.model_validate(_section(merged, "output"))
        ui = UIConfig.model_validate(_section(merged, "ui"))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    return LoadedConfig(
        output=output,
        ui=ui,
        global_path=global_path,
        project_path=project_path,
    )
