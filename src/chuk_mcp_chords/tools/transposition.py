"""
Transposition tools - MCP tools for chord charts.

Tools for classifying lines, inspecting chord symbols, and
transposing song text into another key or into Nashville numbers.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.chart import (
    ChordToken,
    chord_density,
    display_key,
    get_transposed_content,
    has_chord_density,
    split_lines,
    tokenize,
)
from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.scale import ALL_KEYS, Key
from chuk_mcp_chords.models.chart import ChartLine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _chord_to_dict(chord: Chord) -> dict[str, Any]:
    return {
        "symbol": str(chord),
        "root": chord.root_spelling,
        "root_pitch_class": int(chord.root),
        "quality": chord.quality,
        "bass": chord.bass_spelling,
        "bass_pitch_class": int(chord.bass) if chord.bass is not None else None,
    }


def _tokens_to_list(line: str) -> list[dict[str, Any]]:
    return [
        {
            "offset": token.offset,
            "text": token.text,
            "chord": _chord_to_dict(token.chord) if isinstance(token, ChordToken) else None,
        }
        for token in tokenize(line)
    ]


def register_transposition_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chart classification and transposition tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_keys() -> str:
        """
        List the keys a song can be written in or transposed to.

        Returns:
            JSON string with each key, its pitch class and accidental preference

        Example:
            chords_list_keys()
        """
        return json.dumps(
            {
                "status": "success",
                "keys": [
                    {
                        "key": key.value,
                        "pitch_class": int(key.pitch_class),
                        "accidentals": "flats" if key.prefers_flats else "sharps",
                    }
                    for key in ALL_KEYS
                ],
            }
        )

    tools["chords_list_keys"] = chords_list_keys

    @mcp.tool  # type: ignore[arg-type]
    async def chords_is_chord_line(line: str) -> str:
        """
        Check whether a line of song text is a chord line.

        A line is a chord line when at least half of its words
        are chord symbols.

        Args:
            line: A single line of text

        Returns:
            JSON string with the classification and chord density

        Example:
            chords_is_chord_line(line="G   D/F#   Em   C")
        """
        try:
            tokens = tokenize(line)
            return json.dumps(
                {
                    "status": "success",
                    "is_chord_line": has_chord_density(tokens),
                    "tokens": len(tokens),
                    "chords": sum(1 for token in tokens if token.is_chord),
                    "density": chord_density(tokens),
                }
            )
        except Exception as e:
            logger.exception("Failed to classify line")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_is_chord_line"] = chords_is_chord_line

    @mcp.tool  # type: ignore[arg-type]
    async def chords_parse_line(line: str) -> str:
        """
        Break a line into tokens and show how each chord symbol was read.

        Words that are not chord symbols are listed with chord set to null.

        Args:
            line: A single line of text

        Returns:
            JSON string with tokens, offsets and parsed chord parts

        Example:
            chords_parse_line(line="Cmaj7  G/B  Am7")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "tokens": _tokens_to_list(line),
                }
            )
        except Exception as e:
            logger.exception("Failed to parse line")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_parse_line"] = chords_parse_line

    @mcp.tool  # type: ignore[arg-type]
    async def chords_transpose(
        content: str,
        original_key: str,
        target_key: str | None = None,
        nashville: bool = False,
    ) -> str:
        """
        Transpose the chord lines of a song.

        Lyric lines are returned unchanged. With nashville=True, chords are
        written as numbers relative to the original key and target_key is
        ignored.

        Args:
            content: Song text with chord lines and lyric lines
            original_key: Key the song is written in (e.g., 'G', 'Bb', 'F#')
            target_key: Key to transpose to (default: original key)
            nashville: Render chords as Nashville numbers

        Returns:
            JSON string with the transposed content and classified lines

        Example:
            chords_transpose(content="G  C  D\\nAmazing grace", original_key="G", target_key="A")
        """
        try:
            original = Key.parse(original_key)
            target = Key.parse(target_key) if target_key else original
            transposed = get_transposed_content(content, original, target, nashville)

            return json.dumps(
                {
                    "status": "success",
                    "original_key": original.value,
                    "display_key": display_key(original, target, nashville),
                    "nashville": nashville,
                    "content": transposed,
                    "lines": [
                        ChartLine.classify(text).model_dump(mode="json")
                        for text, _ in split_lines(transposed)
                    ],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose content")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_transpose"] = chords_transpose

    return tools
