"""
MCP tool implementations.

Tools are organized by domain:
- transposition - Line classification, chord parsing, transposition
- export - YAML song chart import/export
"""

from chuk_mcp_chords.tools.export import register_export_tools
from chuk_mcp_chords.tools.transposition import register_transposition_tools

__all__ = [
    "register_export_tools",
    "register_transposition_tools",
]
