"""Configuration loader for vscode-mcp."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import os
import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
USER_CONFIG_PATH = Path.home() / ".config" / "vscode-mcp" / "config.yaml"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _truthy(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def load_config(
    default_path: Path | None = None,
    user_path: Path | None = None,
) -> Dict[str, Any]:
    default_path = default_path or DEFAULT_CONFIG_PATH
    user_path = user_path or USER_CONFIG_PATH
    data: Dict[str, Any] = {}
    if default_path.exists():
        data = yaml.safe_load(default_path.read_text()) or {}
    if user_path.exists():
        override = yaml.safe_load(user_path.read_text()) or {}
        data = _deep_merge(data, override)

    # Environment overrides - VS Code settings
    include_vscode = os.getenv("VSCODE_MCP_INCLUDE_VSCODE")
    if include_vscode is not None:
        data.setdefault("vscode", {})["enabled"] = _truthy(include_vscode)

    # Environment overrides - MCP config path
    mcp_config = os.getenv("VSCODE_MCP_CONFIG")
    if mcp_config:
        data["mcp_config_path"] = mcp_config

    # Environment overrides - Logging
    log_level = os.getenv("VSCODE_MCP_LOG_LEVEL")
    if log_level:
        data.setdefault("logging", {})["level"] = log_level.upper()

    return data


@dataclass
class Config:
    raw: Dict[str, Any]

    @property
    def vscode(self) -> Dict[str, Any]:
        return self.raw.get("vscode", {})

    @property
    def include_vscode(self) -> bool:
        return bool(self.vscode.get("enabled", True))

    @property
    def mcp_config_path(self) -> Path | None:
        path = self.raw.get("mcp_config_path")
        return Path(path).expanduser() if path else None

    @property
    def logging(self) -> Dict[str, Any]:
        return self.raw.get("logging", {})

    @property
    def log_level(self) -> str:
        """Root log level name. Default WARNING."""
        return str(self.logging.get("level", "WARNING")).upper()


def get_config() -> Config:
    return Config(load_config())
