"""
Transposer - rewrites the chord lines of a song into another key.

Lyric lines and anything that does not parse as a chord are passed
through untouched. Chord symbols are replaced in place, so spacing
between them is preserved but columns may drift when a spelling changes
length (C -> C#).
"""

from __future__ import annotations

import logging

from chuk_mcp_chords.constants import NASHVILLE_KEY_LABEL
from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.pitch import Interval
from chuk_mcp_chords.core.scale import Key

from .document import parse_document, render_document
from .nashville import to_nashville

logger = logging.getLogger(__name__)


def transpose_interval(original_key: Key | str, target_key: Key | str) -> Interval:
    """Ascending interval from the original tonic to the target tonic (0-11)."""
    original = Key.parse(original_key)
    target = Key.parse(target_key)
    return original.pitch_class.interval_to(target.pitch_class)


def transpose_chord(chord: Chord, original_key: Key | str, target_key: Key | str) -> str:
    """
    Transpose a single chord symbol and render it in the target key.

    Example:
        transpose_chord(Chord.parse("G/B"), "C", "D")  # "A/C#"
    """
    target = Key.parse(target_key)
    interval = transpose_interval(original_key, target)
    return str(chord.transpose(interval, target))


def get_transposed_content(
    content: str,
    original_key: Key | str,
    target_key: Key | str,
    use_nashville: bool = False,
) -> str:
    """
    Transpose every chord line of a song.

    Args:
        content: Song text with interleaved chord and lyric lines
        original_key: Key the song is written in
        target_key: Key to transpose to (ignored for Nashville numbering)
        use_nashville: Render chords as numbers relative to original_key

    Returns:
        The rewritten text, with line count, line breaks and lyric lines
        unchanged

    Example:
        get_transposed_content("C   G   Am   F", "C", "D")  # "D   A   Bm   G"
    """
    original = Key.parse(original_key)
    target = Key.parse(target_key)

    if original is target and not use_nashville:
        return content

    lines = parse_document(content)

    if use_nashville:
        tonic = original.pitch_class
        logger.debug(f"Rendering {len(lines)} lines as Nashville numbers in {original}")
        return render_document(lines, lambda chord: to_nashville(chord, tonic))

    interval = original.pitch_class.interval_to(target.pitch_class)
    logger.debug(f"Transposing {len(lines)} lines from {original} to {target} ({interval})")
    return render_document(lines, lambda chord: str(chord.transpose(interval, target)))


def display_key(
    original_key: Key | str,
    target_key: Key | str | None = None,
    use_nashville: bool = False,
) -> str:
    """
    Label for the key a transposed chart is shown in.

    Nashville charts are labelled "#" rather than with a letter name.
    """
    if use_nashville:
        return NASHVILLE_KEY_LABEL
    return Key.parse(target_key if target_key is not None else original_key).value
