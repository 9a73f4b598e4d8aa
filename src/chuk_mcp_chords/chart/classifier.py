"""
Line classifier - chord line vs lyric line.

A line is a chord line when at least half of its whitespace-separated
tokens are chord symbols. A two-token line with one chord counts; a
one-token line needs that token to be a chord. Short lyric lines made of
chord-like words ("A B C") are classified as chord lines; that is a known
limitation of a density heuristic.
"""

from __future__ import annotations

from chuk_mcp_chords.constants import CHORD_LINE_THRESHOLD

from .tokenizer import Token, tokenize


def chord_density(tokens: list[Token]) -> float:
    """Share of tokens that are chords (0.0 for no tokens)."""
    if not tokens:
        return 0.0
    chords = sum(1 for token in tokens if token.is_chord)
    return chords / len(tokens)


def has_chord_density(tokens: list[Token]) -> bool:
    """Whether a tokenized line has enough chords to be a chord line."""
    return bool(tokens) and chord_density(tokens) >= CHORD_LINE_THRESHOLD


def is_chord_line(line: str) -> bool:
    """
    Decide whether a line is instrument notation rather than sung words.

    Empty and whitespace-only lines are never chord lines.

    Examples:
        is_chord_line("C G Am F")  # True
        is_chord_line("Amazing grace how sweet the sound")  # False
    """
    return has_chord_density(tokenize(line))
