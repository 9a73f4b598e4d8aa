"""
Song chart model - a song's text, key and instrument notes.

A SongChart is what the surrounding application stores per song. The
engine only ever reads it: transposing a chart produces a TransposedChart
view and leaves the chart itself unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.chart import display_key, get_transposed_content, is_chord_line, split_lines
from chuk_mcp_chords.constants import DEFAULT_KEY, ErrorMessages, LineKind, SchemaVersion
from chuk_mcp_chords.core.scale import Key


class ChartLine(BaseModel):
    """A rendered line with its classification, for display styling."""

    text: str = Field(..., description="Line text without the line break")
    kind: LineKind = Field(..., description="Whether the line is chords or lyrics")

    model_config = {"frozen": True}

    @classmethod
    def classify(cls, text: str) -> ChartLine:
        """Build a ChartLine, classifying the text."""
        return cls(text=text, kind=LineKind.CHORD if is_chord_line(text) else LineKind.LYRIC)


class TransposedChart(BaseModel):
    """
    A chart rendered in a target key or as Nashville numbers.

    Lines are classified after transposition, which is how a viewer
    decides which lines to highlight.
    """

    title: str
    artist: str = ""
    original_key: Key
    display_key: str = Field(..., description="Key label, or '#' for Nashville numbers")
    nashville: bool = False
    content: str
    lines: list[ChartLine] = Field(default_factory=list)
    instrument_parts: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def chord_lines(self) -> list[ChartLine]:
        """Only the lines classified as chords."""
        return [line for line in self.lines if line.kind == LineKind.CHORD]


class SongChart(BaseModel):
    """
    A song as chords and lyrics in its original key.

    instrument_parts holds free-form notes per instrument (e.g. "Lead Guitar");
    they are never transposed.
    """

    schema_version: SchemaVersion = Field(
        "chart/v1", alias="schema", description="Schema version"
    )
    title: str = Field(..., min_length=1, description="Song title")
    artist: str = Field("", description="Artist or author")
    original_key: Key = Field(Key(DEFAULT_KEY), description="Key the content is written in")
    content: str = Field("", description="Chords and lyrics")
    instrument_parts: dict[str, str] = Field(
        default_factory=dict, description="Instrument name to free-form notes"
    )

    model_config = {"populate_by_name": True}

    @field_validator("original_key", mode="before")
    @classmethod
    def validate_key(cls, v: Any) -> Key:
        """Accept key spellings like 'C#' or 'Bb'."""
        if v is None or v == "":
            return Key(DEFAULT_KEY)
        if isinstance(v, Key):
            return v
        if not isinstance(v, str):
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=v))
        return Key.parse(v)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Strip surrounding whitespace from the title."""
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v

    def transpose(
        self,
        target_key: Key | str | None = None,
        use_nashville: bool = False,
    ) -> TransposedChart:
        """
        Render this chart in another key, or as Nashville numbers.

        Args:
            target_key: Key to transpose to (empty or None keeps the original key)
            use_nashville: Render chords as numbers relative to the original key

        Returns:
            The transposed view
        """
        target = Key.parse(target_key) if target_key else self.original_key
        content = get_transposed_content(self.content, self.original_key, target, use_nashville)

        return TransposedChart(
            title=self.title,
            artist=self.artist,
            original_key=self.original_key,
            display_key=display_key(self.original_key, target, use_nashville),
            nashville=use_nashville,
            content=content,
            lines=[ChartLine.classify(text) for text, _ in split_lines(content)],
            instrument_parts=dict(self.instrument_parts),
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a dict suitable for YAML serialization.

        This is the canonical YAML format for charts.
        """
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "title": self.title,
            "artist": self.artist,
            "key": self.original_key.value,
            "content": self.content,
        }
        if self.instrument_parts:
            data["instrument_parts"] = dict(self.instrument_parts)
        return data

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> SongChart:
        """
        Create a SongChart from a YAML-parsed dict.

        This parses the canonical YAML format.
        """
        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.INVALID_CHART.format(reason="expected a mapping"))
        if "title" not in data:
            raise ValueError(ErrorMessages.INVALID_CHART.format(reason="missing 'title'"))

        return cls(
            schema_version=data.get("schema", "chart/v1"),
            title=data["title"],
            artist=data.get("artist") or "",
            original_key=data.get("key", DEFAULT_KEY),
            content=data.get("content") or "",
            instrument_parts={
                str(name): str(notes)
                for name, notes in (data.get("instrument_parts") or {}).items()
            },
        )
