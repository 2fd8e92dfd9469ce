"""Entry point for `python -m vscode_mcp`."""
from vscode_mcp.cli import main

main()
