"""
Pitch primitives - PitchClass and Interval.

These are the foundational types for all transposition arithmetic.
PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

# Spelling tables (module level to avoid IntEnum member issues).
# Enharmonic convention is a lookup, not arithmetic: 1 is "C#" or "Db",
# never "B#" or "Dbb".
SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Natural letters, used when reading a spelling (Cb, E#, B# etc. included)
NATURALS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
ACCIDENTALS: dict[str, int] = {"#": 1, "b": -1}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent. Enharmonic equivalents share the same value
    (C# == Db == 1). Spelling is a display concern, handled by
    spell() and by Key.spell() for key-aware spelling.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        semitones = (other.value - self.value) % 12
        return Interval(semitones)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = FLAT_NAMES if prefer_flats else SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a spelling like 'C', 'C#', 'Db', 'Cb', 'E#'.

        The letter must be upper case; at most one accidental is accepted.
        """
        name = name.strip()
        if not name or name[0] not in NATURALS:
            raise ValueError(f"Unknown pitch class: {name}")

        accidental = name[1:]
        if accidental == "":
            return cls(NATURALS[name])
        if accidental in ACCIDENTALS:
            return cls((NATURALS[name[0]] + ACCIDENTALS[accidental]) % 12)

        raise ValueError(f"Unknown pitch class: {name}")


class Interval:
    """
    Distance between pitches in semitones.

    Transposition is expressed as an interval from the original key's
    tonic to the target key's tonic. Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        if self._semitones == 0:
            return "Interval.UNISON"
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        return f"{self._semitones}st"


Interval.UNISON = Interval(0)
