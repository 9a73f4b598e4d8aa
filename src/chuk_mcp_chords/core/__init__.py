"""
Core music primitives - the Radix layer.

These are the invariants the chart engine composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- ScaleDegree: Position in the major scale (1-7), basis of Nashville numbers
- Key: The 17 conventional key spellings with accidental preference
- Chord: A chord symbol split into root, quality suffix and bass
"""

from chuk_mcp_chords.core.chord import QUALITY_SUFFIXES, Chord, parse_chord
from chuk_mcp_chords.core.pitch import FLAT_NAMES, SHARP_NAMES, Interval, PitchClass
from chuk_mcp_chords.core.scale import ALL_KEYS, MAJOR_SCALE_OFFSETS, Key, ScaleDegree

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "SHARP_NAMES",
    "FLAT_NAMES",
    # Scale
    "ScaleDegree",
    "MAJOR_SCALE_OFFSETS",
    "Key",
    "ALL_KEYS",
    # Chord
    "QUALITY_SUFFIXES",
    "Chord",
    "parse_chord",
]
