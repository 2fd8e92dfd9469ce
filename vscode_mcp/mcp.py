"""Lightweight MCP registry reader (no active tool calls)."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Any
import json
import logging
import os

from vscode_mcp.settings import MCP_SERVERS_KEY, SettingsLoader, read_vscode_settings

logger = logging.getLogger(__name__)

DEFAULT_MCP_CONFIG_PATH = Path.home() / ".mcp.json"


def _vscode_servers(loader: SettingsLoader | None) -> Dict[str, Any]:
    settings = loader.load() if loader is not None else read_vscode_settings()
    if not settings:
        return {}
    servers = settings.get(MCP_SERVERS_KEY)
    return dict(servers) if isinstance(servers, dict) else {}


def _file_servers(config_path: Path) -> Dict[str, Any]:
    if not os.path.exists(config_path):
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as e:
        logger.warning(f"Failed to load MCP config {config_path}: {e}")
        return {}
    servers = data.get(MCP_SERVERS_KEY) if isinstance(data, dict) else None
    return dict(servers) if isinstance(servers, dict) else {}


def load_mcp_servers(
    path: Path | None = None,
    *,
    include_vscode: bool = True,
    loader: SettingsLoader | None = None,
) -> Dict[str, Any]:
    """Return MCP server definitions from VS Code settings and ~/.mcp.json.

    Entries in the standalone file replace editor entries with the same name.
    """
    servers: Dict[str, Any] = {}
    if include_vscode:
        servers.update(_vscode_servers(loader))
    servers.update(_file_servers(path or DEFAULT_MCP_CONFIG_PATH))
    return servers
