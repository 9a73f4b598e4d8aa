"""
Constants and enums for the chord chart system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Key label shown in place of a letter name when Nashville numbering is active
NASHVILLE_KEY_LABEL = "#"

# A line is a chord line when at least this share of its tokens are chords
CHORD_LINE_THRESHOLD = 0.5

# Key a song chart falls back to when none is stored
DEFAULT_KEY = "C"


class LineKind(str, Enum):
    """Classification of a single line of song text."""

    CHORD = "chord"
    LYRIC = "lyric"


# Schema versions - frozen for v1
SchemaVersion = Literal["chart/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_KEY = (
        "Invalid key: '{key}'. Expected one of C, C#, Db, D, D#, Eb, E, F, F#, Gb, "
        "G, G#, Ab, A, A#, Bb, B."
    )
    INVALID_CHORD = "Invalid chord symbol: '{symbol}'."
    INVALID_CHART = "Invalid chart document: {reason}."
