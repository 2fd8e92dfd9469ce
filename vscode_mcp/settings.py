"""Best-effort reader for VS Code user settings."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional
import json
import logging
import os

from vscode_mcp.jsonc import strip_json_comments
from vscode_mcp.paths import get_vscode_settings_path

logger = logging.getLogger(__name__)

MCP_SERVERS_KEY = "mcpServers"

VscodeSettings = Dict[str, Any]


def get_error_message(err: BaseException) -> str:
    message = str(err)
    return message if message else type(err).__name__


@dataclass
class SettingsLoader:
    """Reads settings.json and keeps it only when it declares MCP servers.

    The file belongs to the editor, so nothing here raises: a missing,
    unreadable or malformed file all come back as ``None``. Read and parse
    failures are logged once per loader; later failures stay quiet.
    """
    resolve_path: Callable[[], str] = get_vscode_settings_path
    log: logging.Logger = logger
    has_logged_error: bool = False

    def load(self) -> Optional[VscodeSettings]:
        settings_path = self.resolve_path()
        if not settings_path or not os.path.exists(settings_path):
            return None

        try:
            content = Path(settings_path).read_text(encoding="utf-8")
            settings = json.loads(strip_json_comments(content))
        except (OSError, ValueError, RecursionError) as err:
            # ValueError covers JSONDecodeError and UnicodeDecodeError;
            # deeply nested input overflows the decoder.
            if not self.has_logged_error:
                self.log.error(
                    f"Error reading VS Code settings from {settings_path}: {get_error_message(err)}"
                )
                self.has_logged_error = True
            return None

        # Only mcpServers is consumed for now.
        if isinstance(settings, dict) and MCP_SERVERS_KEY in settings:
            return settings
        return None


_default_loader = SettingsLoader()


def read_vscode_settings() -> Optional[VscodeSettings]:
    """Load settings with the process-wide loader."""
    return _default_loader.load()
