"""
Pydantic models for song charts.

This module provides:
- SongChart: A song's chords and lyrics in its original key
- TransposedChart: A chart rendered in a target key or as Nashville numbers
- ChartLine: A rendered line with its chord/lyric classification
"""

from chuk_mcp_chords.models.chart import ChartLine, SongChart, TransposedChart

__all__ = [
    "ChartLine",
    "SongChart",
    "TransposedChart",
]
