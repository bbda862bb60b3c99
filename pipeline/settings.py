"""pipeline.settings

Build a :class:`~reek_runner.domain.RunConfiguration` for a project.

Sources, highest precedence first:

1. process environment (``REEK_EXECUTABLE``, ``REEK_CONFIG``, ``REEK_TIMEOUT_SECONDS``)
2. ``<project_root>/.env`` (loaded with python-dotenv, never overriding 1.)
3. ``<project_root>/.reek-runner.yml`` (``executable``, ``config``, ``timeout_seconds``)

The configuration is passed explicitly into the pipeline; nothing here is
cached or global.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values

from reek_runner.domain import RunConfiguration

ENV_EXECUTABLE = "REEK_EXECUTABLE"
ENV_CONFIG = "REEK_CONFIG"
ENV_TIMEOUT = "REEK_TIMEOUT_SECONDS"

SETTINGS_FILENAME = ".reek-runner.yml"
DOTENV_FILENAME = ".env"


def load_settings_file(project_root: Path) -> Dict[str, Any]:
    """Read the optional YAML settings file; ``{}`` when absent."""
    p = Path(project_root) / SETTINGS_FILENAME
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{p} must contain a mapping, got {type(data).__name__}")
    return data


def _merged_env(project_root: Path, env: Optional[Mapping[str, str]]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    dotenv_path = Path(project_root) / DOTENV_FILENAME
    if dotenv_path.exists():
        merged.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
    merged.update(os.environ if env is None else env)
    return merged


def _pick(env: Mapping[str, str], key: str, file_settings: Mapping[str, Any], file_key: str) -> Optional[str]:
    v = env.get(key)
    if v:
        return v
    v = file_settings.get(file_key)
    if v is None or str(v).strip() == "":
        return None
    return str(v)


def load_run_configuration(
    project_root: Path,
    env: Optional[Mapping[str, str]] = None,
) -> RunConfiguration:
    project_root = Path(project_root)
    file_settings = load_settings_file(project_root)
    merged = _merged_env(project_root, env)

    executable = _pick(merged, ENV_EXECUTABLE, file_settings, "executable")
    config = _pick(merged, ENV_CONFIG, file_settings, "config")
    if config and not Path(config).is_absolute():
        config = str(project_root / config)

    return RunConfiguration(
        explicit_executable_path=executable,
        explicit_config_file_path=config,
    )


def load_timeout_seconds(
    project_root: Path,
    env: Optional[Mapping[str, str]] = None,
    *,
    default: float,
) -> float:
    """Bounded wait for the analyzer; ``0`` disables it."""
    project_root = Path(project_root)
    raw = _pick(_merged_env(project_root, env), ENV_TIMEOUT, load_settings_file(project_root), "timeout_seconds")
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Invalid timeout_seconds: {raw!r}") from None
    if value < 0:
        raise ValueError(f"timeout_seconds must be >= 0, got {value}")
    return value
