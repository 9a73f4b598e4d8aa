"""
Chart engine - classification and transposition of song text.

This module provides:
- tokenize: Split a line into chord and text tokens
- is_chord_line: Chord line vs lyric line classification
- get_transposed_content: Rewrite chord lines into a target key
- to_nashville: Chords as scale-degree numbers
- parse_document / render_document: Line-preserving reassembly
"""

from chuk_mcp_chords.chart.classifier import chord_density, has_chord_density, is_chord_line
from chuk_mcp_chords.chart.document import (
    ChordLine,
    Line,
    LyricLine,
    parse_document,
    parse_line,
    render_document,
    split_lines,
)
from chuk_mcp_chords.chart.nashville import nashville_numeral, to_nashville
from chuk_mcp_chords.chart.tokenizer import ChordToken, TextToken, Token, tokenize
from chuk_mcp_chords.chart.transposer import (
    display_key,
    get_transposed_content,
    transpose_chord,
    transpose_interval,
)

__all__ = [
    # Tokens
    "ChordToken",
    "TextToken",
    "Token",
    "tokenize",
    # Classification
    "chord_density",
    "has_chord_density",
    "is_chord_line",
    # Documents
    "ChordLine",
    "LyricLine",
    "Line",
    "split_lines",
    "parse_line",
    "parse_document",
    "render_document",
    # Transposition
    "transpose_interval",
    "transpose_chord",
    "get_transposed_content",
    "display_key",
    # Nashville
    "nashville_numeral",
    "to_nashville",
]
