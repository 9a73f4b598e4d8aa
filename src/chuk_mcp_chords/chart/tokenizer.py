"""
Chord tokenizer - splits a line of song text into tokens.

A token is a maximal run of non-whitespace characters. Each token is
either a ChordToken (its full text parses as a chord symbol) or a
TextToken (anything else, kept verbatim). Whitespace between tokens is
not tokenized; it is recovered from the offsets when a line is rebuilt.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_chords.core.chord import Chord, parse_chord

_TOKEN_PATTERN = re.compile(r"\S+")


@dataclass(frozen=True)
class ChordToken:
    """A token whose text is a chord symbol."""

    offset: int
    text: str
    chord: Chord

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.offset + len(self.text)

    @property
    def is_chord(self) -> bool:
        return True


@dataclass(frozen=True)
class TextToken:
    """A token that is not a chord symbol (a word, a bar line, 'x2' ...)."""

    offset: int
    text: str

    @property
    def chord(self) -> None:
        return None

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.offset + len(self.text)

    @property
    def is_chord(self) -> bool:
        return False


Token = ChordToken | TextToken


def tokenize(line: str) -> list[Token]:
    """
    Tokenize a line into chord and text tokens.

    Args:
        line: A single line of text (no line break)

    Returns:
        Tokens in order of their offset in the line
    """
    tokens: list[Token] = []
    for match in _TOKEN_PATTERN.finditer(line):
        text = match.group()
        chord = parse_chord(text)
        if chord is None:
            tokens.append(TextToken(match.start(), text))
        else:
            tokens.append(ChordToken(match.start(), text, chord))
    return tokens
