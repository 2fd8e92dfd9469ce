"""Command line interface for vscode-mcp."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from vscode_mcp.config import Config, get_config
from vscode_mcp.mcp import load_mcp_servers
from vscode_mcp.paths import current_platform, edition_for, get_vscode_settings_path
from vscode_mcp.settings import read_vscode_settings


def _print(obj: Any) -> None:
    print(json.dumps(obj, indent=2))


def cmd_path(args: argparse.Namespace) -> None:
    path = get_vscode_settings_path()
    _print({
        "platform": current_platform().value,
        "edition": edition_for(os.environ).name.lower(),
        "path": path,
        "exists": bool(path) and Path(path).exists(),
    })


def cmd_settings(args: argparse.Namespace) -> None:
    settings = read_vscode_settings()
    _print(settings)
    if settings is None:
        sys.exit(1)


def cmd_servers(args: argparse.Namespace, config: Config) -> None:
    mcp_config = Path(args.mcp_config).expanduser() if args.mcp_config else config.mcp_config_path
    include_vscode = config.include_vscode and not args.no_vscode
    _print(load_mcp_servers(mcp_config, include_vscode=include_vscode))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vscode-mcp")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("path", help="Show where VS Code settings are expected")
    sub.add_parser("settings", help="Print the settings document if it declares mcpServers")

    servers = sub.add_parser("servers", help="Print merged MCP server definitions")
    servers.add_argument("--mcp-config", help="Standalone MCP config (default ~/.mcp.json)")
    servers.add_argument("--no-vscode", action="store_true", help="Skip VS Code settings")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "path":
        cmd_path(args)
    elif args.command == "settings":
        cmd_settings(args)
    elif args.command == "servers":
        cmd_servers(args, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
