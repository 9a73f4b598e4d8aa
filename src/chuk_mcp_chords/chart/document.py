"""
Chart documents - lines of song text and their reassembly.

A document is split into lines with the exact line-break sequence that
followed each one ("\\r\\n", "\\r", "\\n", or "" for the last line), so
that joining the lines back reproduces the input character for character.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from chuk_mcp_chords.core.chord import Chord

from .classifier import has_chord_density
from .tokenizer import ChordToken, Token, tokenize

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ChordLine:
    """A line of chord symbols, with the tokens found in it."""

    text: str
    tokens: tuple[Token, ...]
    newline: str = ""

    @property
    def chords(self) -> list[Chord]:
        """Parsed chords in order of appearance."""
        return [token.chord for token in self.tokens if isinstance(token, ChordToken)]

    def rewrite(self, render: Callable[[Chord], str]) -> str:
        """
        Replace every chord token in place with render(chord).

        Characters between tokens and non-chord tokens are kept verbatim.
        """
        parts: list[str] = []
        cursor = 0
        for token in self.tokens:
            if not isinstance(token, ChordToken):
                continue
            parts.append(self.text[cursor : token.offset])
            parts.append(render(token.chord))
            cursor = token.end
        parts.append(self.text[cursor:])
        return "".join(parts)


@dataclass(frozen=True)
class LyricLine:
    """A line of anything else. Never modified."""

    text: str
    newline: str = ""


Line = ChordLine | LyricLine


def split_lines(content: str) -> Iterator[tuple[str, str]]:
    """
    Split text into (line, line_break) pairs.

    The last pair always has an empty line break; text ending in a
    break yields a final empty line.
    """
    start = 0
    for match in _LINE_BREAK.finditer(content):
        yield content[start : match.start()], match.group()
        start = match.end()
    yield content[start:], ""


def parse_line(text: str, newline: str = "") -> Line:
    """Classify and tokenize a single line."""
    tokens = tokenize(text)
    if has_chord_density(tokens):
        return ChordLine(text, tuple(tokens), newline)
    return LyricLine(text, newline)


def parse_document(content: str) -> list[Line]:
    """Split content into classified lines."""
    return [parse_line(text, newline) for text, newline in split_lines(content)]


def render_document(lines: list[Line], render: Callable[[Chord], str] | None = None) -> str:
    """
    Reassemble lines into text.

    Args:
        lines: Parsed lines
        render: Optional chord renderer applied to chord lines

    Returns:
        The document text with original line breaks
    """
    parts: list[str] = []
    for line in lines:
        if render is not None and isinstance(line, ChordLine):
            parts.append(line.rewrite(render))
        else:
            parts.append(line.text)
        parts.append(line.newline)
    return "".join(parts)
