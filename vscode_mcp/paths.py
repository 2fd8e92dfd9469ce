"""Locate the VS Code user settings file for the current platform."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Mapping
import ntpath
import os
import posixpath
import sys

EDITION_ENV = "GEMINI_VSCODE_EDITION"
INSIDERS_SENTINEL = "insiders"
APPDATA_ENV = "APPDATA"


class Platform(str, Enum):
    DARWIN = "darwin"
    WIN32 = "win32"
    LINUX = "linux"
    OTHER = "other"


class Edition(str, Enum):
    STABLE = "Code"
    INSIDERS = "Code - Insiders"


def current_platform(value: str | None = None) -> Platform:
    """Map a ``sys.platform`` string onto :class:`Platform`."""
    value = sys.platform if value is None else value
    if value == "darwin":
        return Platform.DARWIN
    if value == "win32":
        return Platform.WIN32
    # Older interpreters report linux2/linux3.
    if value.startswith("linux"):
        return Platform.LINUX
    return Platform.OTHER


def is_insiders(env: Mapping[str, str]) -> bool:
    return env.get(EDITION_ENV) == INSIDERS_SENTINEL


def edition_for(env: Mapping[str, str]) -> Edition:
    return Edition.INSIDERS if is_insiders(env) else Edition.STABLE


def resolve_settings_path(
    platform: Platform,
    *,
    insiders: bool,
    home: str | Path,
    env: Mapping[str, str],
) -> str:
    """Return the settings.json path, or "" when it cannot be resolved.

    Locations follow
    https://code.visualstudio.com/docs/getstarted/settings#_settings-file-locations

    ``home`` is only consulted on macOS and Linux; Windows derives the path
    from ``APPDATA`` in ``env`` and yields "" when it is unset or empty.
    Paths use the separator of the target platform, not the host.
    """
    folder = (Edition.INSIDERS if insiders else Edition.STABLE).value
    if platform is Platform.DARWIN:
        return posixpath.join(
            str(home), "Library", "Application Support", folder, "User", "settings.json"
        )
    if platform is Platform.WIN32:
        app_data = env.get(APPDATA_ENV)
        if not app_data:
            return ""
        return ntpath.join(app_data, folder, "User", "settings.json")
    if platform is Platform.LINUX:
        return posixpath.join(str(home), ".config", folder, "User", "settings.json")
    return ""


def get_vscode_settings_path(
    env: Mapping[str, str] | None = None,
    platform: Platform | None = None,
    home: str | Path | None = None,
) -> str:
    """Resolve the settings path from the live process environment."""
    env = os.environ if env is None else env
    platform = current_platform() if platform is None else platform
    home = Path.home() if home is None else home
    return resolve_settings_path(platform, insiders=is_insiders(env), home=home, env=env)
