"""
Nashville converter - chords as scale-degree numbers.

Numbers are always relative to the song's original key: a G chord in a
song stored in C is "5" no matter which key the reader has selected.
"""

from __future__ import annotations

from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.pitch import PitchClass
from chuk_mcp_chords.core.scale import ScaleDegree


def nashville_numeral(tonic: PitchClass, pitch: PitchClass) -> str:
    """
    Get the Nashville numeral for a pitch relative to a tonic.

    Chromatic pitches are raised degrees: 1 semitone up is "#1",
    6 semitones up is "#4", 10 semitones up is "#6".
    """
    return str(ScaleDegree.from_semitones(tonic.interval_to(pitch).semitones))


def to_nashville(chord: Chord, tonic: PitchClass) -> str:
    """
    Render a chord as a Nashville number.

    The quality suffix is kept verbatim; a slash bass gets its own numeral.

    Example:
        to_nashville(Chord.parse("Am7"), PitchClass.C)  # "6m7"
        to_nashville(Chord.parse("G/B"), PitchClass.C)  # "5/7"
    """
    result = f"{nashville_numeral(tonic, chord.root)}{chord.quality}"
    if chord.bass is not None:
        result += f"/{nashville_numeral(tonic, chord.bass)}"
    return result
