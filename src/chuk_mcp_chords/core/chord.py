"""
Chord primitives - the chord symbol grammar and the Chord type.

A chord symbol is written as:

    chord   := root quality ("/" root)?
    root    := [A-G] ("#" | "b")?
    quality := a member of QUALITY_SUFFIXES

The quality suffix is never interpreted musically. It is carried
verbatim so that "sus4", "maj7" or "m7b5" survive transposition exactly
as written. Only the root and the optional bass note move.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chuk_mcp_chords.constants import ErrorMessages

from .pitch import ACCIDENTALS, NATURALS, Interval, PitchClass

if TYPE_CHECKING:
    from .scale import Key


def _build_quality_suffixes() -> frozenset[str]:
    """Assemble the recognized quality vocabulary."""
    suffixes: set[str] = set()

    # Major family: C, C6, C7, C9, C2, C5 ...
    extensions = ("", "2", "4", "5", "6", "7", "9", "11", "13", "69")
    suffixes.update(extensions)
    suffixes.update(f"maj{n}" for n in ("", "7", "9", "11", "13"))
    suffixes.update(("M7", "M9", "Δ", "Δ7"))

    # Minor family: Cm, Cm7, Cmin7, C-7 ...
    for stem in ("m", "min", "-"):
        suffixes.update(f"{stem}{n}" for n in ("", "6", "7", "9", "11", "13", "69"))
    suffixes.update(("mmaj7", "mM7", "m(maj7)", "m7b5", "m7-5", "ø", "ø7"))

    # Diminished and augmented
    suffixes.update(("dim", "dim7", "°", "°7"))
    suffixes.update(("aug", "aug7", "+", "+7"))

    # Suspended: Csus, Csus2, C7sus4, C9sus ...
    for base in ("", "7", "9", "13"):
        suffixes.update(f"{base}sus{n}" for n in ("", "2", "4"))

    # Added tones: Cadd9, Cmadd9 ...
    for stem in ("", "m", "maj", "6", "m6", "7", "m7", "maj7", "sus2", "sus4"):
        suffixes.update(f"{stem}add{n}" for n in ("2", "4", "9", "11"))

    # Six-nine: C6/9, Cm6/9. Matched before the slash is read as a bass note
    suffixes.update(("6/9", "m6/9", "min6/9", "-6/9"))

    # Altered dominants and lydian majors
    suffixes.update(f"7{alt}" for alt in ("b5", "#5", "b9", "#9", "#11", "b13", "alt"))
    suffixes.update(("7+5", "9#11", "9b5", "9#5", "13b9", "13#11"))
    suffixes.update(("maj7#11", "maj9#11", "maj13#11", "maj7#5", "maj7b5"))

    return frozenset(suffixes)


QUALITY_SUFFIXES: frozenset[str] = _build_quality_suffixes()

# Longest first, so "maj7" wins over "maj" and "m7b5" over "m7"
_SUFFIXES_BY_LENGTH: tuple[str, ...] = tuple(
    sorted(QUALITY_SUFFIXES, key=lambda s: (-len(s), s))
)


def _read_root(text: str) -> tuple[str, str] | None:
    """Split a leading root (letter + optional accidental) off text."""
    if not text or text[0] not in NATURALS:
        return None
    if len(text) > 1 and text[1] in ACCIDENTALS:
        return text[:2], text[2:]
    return text[:1], text[1:]


def _read_bass(text: str) -> str | None:
    """Read a '/bass' remainder; returns the bass spelling or None."""
    if not text.startswith("/"):
        return None
    split = _read_root(text[1:])
    if split is None or split[1]:
        return None
    return split[0]


@dataclass(frozen=True)
class Chord:
    """
    A chord symbol broken into its transposable parts.

    Spellings are kept alongside pitch classes so a chord can be written
    back exactly as it was read.
    """

    root: PitchClass
    root_spelling: str
    quality: str = ""
    bass: PitchClass | None = None  # For slash chords
    bass_spelling: str | None = None

    @property
    def is_slash_chord(self) -> bool:
        """Whether this chord names a separate bass note."""
        return self.bass is not None

    def transpose(self, interval: Interval | int, key: Key) -> Chord:
        """
        Shift root and bass by an interval and spell them in a key.

        Args:
            interval: Distance to shift (Interval or semitones)
            key: Key whose accidental preference spells the result

        Returns:
            A new Chord with the same quality suffix
        """
        semitones = interval.semitones if isinstance(interval, Interval) else interval
        root = self.root.transpose(semitones)
        bass = self.bass.transpose(semitones) if self.bass is not None else None
        return replace(
            self,
            root=root,
            root_spelling=key.spell(root),
            bass=bass,
            bass_spelling=key.spell(bass) if bass is not None else None,
        )

    def __str__(self) -> str:
        result = f"{self.root_spelling}{self.quality}"
        if self.bass_spelling is not None:
            result += f"/{self.bass_spelling}"
        return result

    @classmethod
    def parse(cls, symbol: str) -> Chord:
        """
        Parse a chord from a symbol like 'C', 'F#m7', 'Bbmaj7', 'G/B'.

        The whole symbol must match the grammar; there is no partial parse.

        Raises:
            ValueError: If the symbol is not a chord
        """
        chord = parse_chord(symbol)
        if chord is None:
            raise ValueError(ErrorMessages.INVALID_CHORD.format(symbol=symbol))
        return chord


def parse_chord(symbol: str) -> Chord | None:
    """
    Parse a chord symbol, returning None when it does not match the grammar.

    The quality is the longest recognized suffix after which the rest of
    the symbol is either empty or a single '/bass'. C/H, C/ and C/G/B are
    not chords.
    """
    split = _read_root(symbol)
    if split is None:
        return None
    root_spelling, rest = split

    for suffix in _SUFFIXES_BY_LENGTH:
        if not rest.startswith(suffix):
            continue
        remainder = rest[len(suffix) :]
        if not remainder:
            return Chord(PitchClass.parse(root_spelling), root_spelling, suffix)
        bass_spelling = _read_bass(remainder)
        if bass_spelling is not None:
            return Chord(
                PitchClass.parse(root_spelling),
                root_spelling,
                suffix,
                PitchClass.parse(bass_spelling),
                bass_spelling,
            )

    return None
