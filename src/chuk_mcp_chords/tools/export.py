"""
Export tools - MCP tools for YAML song charts.

Tools for writing a chart in its canonical YAML format and for
reading one back in a chosen key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chords.core.scale import Key
from chuk_mcp_chords.models.chart import SongChart

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chart import/export tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_export_yaml(
        title: str,
        content: str,
        original_key: str,
        artist: str = "",
        target_key: str | None = None,
        nashville: bool = False,
    ) -> str:
        """
        Export a song chart as YAML.

        With a target_key (or nashville=True) the exported content is the
        transposed rendering; the stored key is the one the content is in.

        Args:
            title: Song title
            content: Song text with chord lines and lyric lines
            original_key: Key the song is written in
            artist: Optional artist or author
            target_key: Optional key to export the chart in
            nashville: Export chords as Nashville numbers

        Returns:
            JSON string containing the YAML content

        Example:
            chords_export_yaml(title="Amazing Grace", content="G  C  G", original_key="G")
        """
        try:
            chart = SongChart(
                title=title, artist=artist, original_key=original_key, content=content
            )
            if nashville:
                view = chart.transpose(use_nashville=True)
                chart = chart.model_copy(update={"content": view.content})
            elif target_key:
                target = Key.parse(target_key)
                view = chart.transpose(target)
                chart = chart.model_copy(update={"content": view.content, "original_key": target})

            yaml_content = yaml.safe_dump(
                chart.to_yaml_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True
            )

            return json.dumps(
                {
                    "status": "success",
                    "yaml": yaml_content,
                }
            )
        except (ValueError, ValidationError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_export_yaml"] = chords_export_yaml

    @mcp.tool  # type: ignore[arg-type]
    async def chords_import_yaml(
        yaml_content: str,
        target_key: str | None = None,
        nashville: bool = False,
    ) -> str:
        """
        Read a YAML song chart and render it in a key.

        Args:
            yaml_content: Chart in the canonical YAML format (schema: chart/v1)
            target_key: Key to render in (default: the chart's key)
            nashville: Render chords as Nashville numbers

        Returns:
            JSON string with the chart details and the rendered lines

        Example:
            chords_import_yaml(yaml_content=chart_yaml, target_key="E")
        """
        try:
            chart = SongChart.from_yaml_dict(yaml.safe_load(yaml_content))
            view = chart.transpose(target_key or None, nashville)

            return json.dumps(
                {
                    "status": "success",
                    "chart": view.model_dump(mode="json"),
                }
            )
        except yaml.YAMLError as e:
            return json.dumps({"status": "error", "message": f"Invalid YAML: {e}"})
        except (ValueError, ValidationError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to import YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_import_yaml"] = chords_import_yaml

    return tools
