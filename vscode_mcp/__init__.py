"""Reuse MCP server definitions from VS Code user settings."""
from __future__ import annotations

from vscode_mcp.paths import Edition, Platform, get_vscode_settings_path, resolve_settings_path
from vscode_mcp.settings import SettingsLoader, read_vscode_settings

__all__ = [
    "Edition",
    "Platform",
    "SettingsLoader",
    "get_vscode_settings_path",
    "read_vscode_settings",
    "resolve_settings_path",
]
