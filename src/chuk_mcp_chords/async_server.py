#!/usr/bin/env python3
"""
Async Chord Chart MCP Server using chuk-mcp-server

This server provides MCP tools for working with worship-team chord charts:
song text where lines of chord symbols sit above lines of lyrics.

The server provides tools for:
- Classifying lines as chord lines or lyric lines
- Inspecting how chord symbols are read (root, quality, slash bass)
- Transposing charts into any of the 17 conventional keys
- Rendering charts as Nashville numbers
- Importing and exporting charts as YAML
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.tools import register_export_tools, register_transposition_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Register all tools
transposition_tools = register_transposition_tools(mcp)
export_tools = register_export_tools(mcp)

# Export tool functions for direct access
chords_list_keys = transposition_tools["chords_list_keys"]
chords_is_chord_line = transposition_tools["chords_is_chord_line"]
chords_parse_line = transposition_tools["chords_parse_line"]
chords_transpose = transposition_tools["chords_transpose"]

chords_export_yaml = export_tools["chords_export_yaml"]
chords_import_yaml = export_tools["chords_import_yaml"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Tools: {len(transposition_tools) + len(export_tools)}")
