"""
Scale primitives - ScaleDegree and Key.

Keys are the 17 conventional key spellings a song can be stored in or
transposed to. Each key carries a tonic pitch class and an accidental
preference used to spell derived pitches. Scale degrees are relative
positions (1-7) within the major scale, the basis of Nashville numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_chords.constants import ErrorMessages

from .pitch import PitchClass

# Semitone offsets of the major scale degrees 1-7 from the tonic
MAJOR_SCALE_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


@dataclass(frozen=True)
class ScaleDegree:
    """
    A scale degree with optional alteration.

    Degree is 1-7 (tonic to leading tone).
    Alteration is semitones: -1 = flat, +1 = sharp, 0 = natural.

    Examples:
        ScaleDegree(1) = tonic
        ScaleDegree(5) = dominant
        ScaleDegree(4, +1) = raised 4
    """

    degree: int  # 1-7
    alteration: int = 0  # -1 = flat, +1 = sharp

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= 7:
            raise ValueError(f"Degree must be 1-7, got {self.degree}")
        if self.alteration not in (-1, 0, 1):
            raise ValueError(f"Alteration must be -1, 0 or 1, got {self.alteration}")

    @classmethod
    def from_semitones(cls, semitones: int) -> ScaleDegree:
        """
        Get the scale degree for a semitone offset above the tonic.

        Diatonic offsets map to plain degrees. Chromatic offsets are always
        written as the degree immediately below, raised: 1 -> #1, 3 -> #2,
        6 -> #4, 8 -> #5, 10 -> #6. Never as a lowered degree above.
        """
        offset = semitones % 12
        if offset in MAJOR_SCALE_OFFSETS:
            return cls(MAJOR_SCALE_OFFSETS.index(offset) + 1)
        return cls(MAJOR_SCALE_OFFSETS.index(offset - 1) + 1, 1)

    def __str__(self) -> str:
        if self.alteration == 0:
            return str(self.degree)
        return f"#{self.degree}" if self.alteration > 0 else f"b{self.degree}"

    def __repr__(self) -> str:
        if self.alteration == 0:
            return f"ScaleDegree({self.degree})"
        return f"ScaleDegree({self.degree}, {self.alteration})"


# Keys conventionally notated with flats; every other key spells with sharps
_FLAT_KEYS = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})


class Key(str, Enum):
    """
    The fixed set of 17 conventional key spellings.

    Enharmonic duplicates (C#/Db, D#/Eb, F#/Gb, G#/Ab, A#/Bb) are distinct
    members: they share a pitch class but differ in accidental preference.
    """

    C = "C"
    Cs = "C#"
    Db = "Db"
    D = "D"
    Ds = "D#"
    Eb = "Eb"
    E = "E"
    F = "F"
    Fs = "F#"
    Gb = "Gb"
    G = "G"
    Gs = "G#"
    Ab = "Ab"
    A = "A"
    As = "A#"
    Bb = "Bb"
    B = "B"

    @property
    def pitch_class(self) -> PitchClass:
        """The tonic pitch class of this key."""
        return PitchClass.parse(self.value)

    @property
    def prefers_flats(self) -> bool:
        """Whether derived accidentals are spelled with flats in this key."""
        return self.value in _FLAT_KEYS

    def spell(self, pitch: PitchClass) -> str:
        """Spell a pitch class the way it is written in this key."""
        return pitch.spell(prefer_flats=self.prefers_flats)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str | Key) -> Key:
        """
        Parse a key from a string like 'C', 'F#', 'Bb'.

        Raises:
            ValueError: If the name is not one of the 17 key spellings
        """
        if isinstance(name, Key):
            return name
        try:
            return cls(name.strip())
        except ValueError:
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=name)) from None


# Picker order (matches the enum definition order)
ALL_KEYS: tuple[Key, ...] = tuple(Key)
