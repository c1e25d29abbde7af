"""
Verifier configuration.

Loads config from:
  1. Defaults
  2. Global config (CLI --config, else $HYLE_HOME/verifier.json, else ~/.hyle/verifier.json)
  3. Workspace override (./.hyle/verifier.json)
  4. Environment variables

Files may be JSON or YAML (``.yaml`` / ``.yml``).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import shlex
from pathlib import Path
from typing import Any, Optional

import yaml

from .verifier import DEFAULT_COMMAND, DEFAULT_TIMEOUT

LOGGER = logging.getLogger(__name__)

CONFIG_NAMES = ("verifier.json", "verifier.yaml", "verifier.yml")

DEFAULT_CONFIG: dict[str, Any] = {
    "verifier": {
        "command": list(DEFAULT_COMMAND),
        "timeout_seconds": DEFAULT_TIMEOUT,
    },
    "output": {
        "format": "json",  # json or table
        "indent": None,
    },
    "log_level": "WARNING",
}


def load_config(config_path: Optional[Path] = None, workspace: Optional[Path] = None) -> dict:
    """Load verifier config.

    `config_path` (CLI --config) replaces the global user layer. The workspace
    layer is read from `workspace` if given, else from the current directory.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Tests must not depend on the real user config.
    is_pytest = bool(os.environ.get("PYTEST_CURRENT_TEST"))

    if config_path is not None:
        global_path: Optional[Path] = Path(config_path)
    elif is_pytest:
        global_path = None
    else:
        hyle_home = Path(os.environ["HYLE_HOME"]) if os.environ.get("HYLE_HOME") else Path.home() / ".hyle"
        global_path = _find_config(hyle_home)

    if global_path is not None and global_path.exists():
        config = _merge(config, _read_config(global_path))
        LOGGER.debug("loaded config from %s", global_path)

    ws_path = _find_config(Path(workspace or ".") / ".hyle")
    if ws_path is not None:
        config = _merge(config, _read_config(ws_path))
        LOGGER.debug("loaded workspace config from %s", ws_path)

    _apply_env_overrides(config)
    _normalize(config)
    return config


def _find_config(directory: Path) -> Optional[Path]:
    for name in CONFIG_NAMES:
        candidate = directory / name
        if candidate.exists():
            return candidate
    return None


def _read_config(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        LOGGER.warning("could not read config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        LOGGER.warning("ignoring config %s: top level must be a mapping", path)
        return {}
    return data


def _merge(base: dict, override: dict) -> dict:
    """Deep merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides(config: dict) -> None:
    verifier = config.setdefault("verifier", {})

    command = os.environ.get("HYLE_VERIFIER_COMMAND")
    if command:
        verifier["command"] = shlex.split(command)

    timeout = os.environ.get("HYLE_VERIFIER_TIMEOUT")
    if timeout:
        try:
            verifier["timeout_seconds"] = float(timeout)
        except ValueError:
            LOGGER.warning("invalid HYLE_VERIFIER_TIMEOUT=%r", timeout)

    log_level = os.environ.get("HYLE_LOG_LEVEL")
    if log_level:
        config["log_level"] = log_level.strip().upper()


def _normalize(config: dict) -> None:
    verifier = config["verifier"]
    if isinstance(verifier.get("command"), str):
        verifier["command"] = shlex.split(verifier["command"])
    if not verifier.get("command"):
        LOGGER.warning("empty verifier.command, using default %s", " ".join(DEFAULT_COMMAND))
        verifier["command"] = list(DEFAULT_COMMAND)
    try:
        verifier["timeout_seconds"] = float(verifier.get("timeout_seconds", DEFAULT_TIMEOUT))
    except (TypeError, ValueError):
        LOGGER.warning("invalid verifier.timeout_seconds=%r, using default", verifier.get("timeout_seconds"))
        verifier["timeout_seconds"] = DEFAULT_TIMEOUT


__all__ = ["DEFAULT_CONFIG", "load_config"]
