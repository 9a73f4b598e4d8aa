"""
Tests for the chart engine.

Tests cover:
- Tokenizer (chart/tokenizer.py)
- Line classifier (chart/classifier.py)
- Document split and reassembly (chart/document.py)
- Nashville numbers (chart/nashville.py)
- Transposition (chart/transposer.py)
"""

import itertools

import pytest

from chuk_mcp_chords.chart import (
    ChordLine,
    ChordToken,
    LyricLine,
    TextToken,
    chord_density,
    display_key,
    get_transposed_content,
    is_chord_line,
    nashville_numeral,
    parse_document,
    render_document,
    split_lines,
    to_nashville,
    tokenize,
    transpose_chord,
    transpose_interval,
)
from chuk_mcp_chords.core import ALL_KEYS, Chord, Key, PitchClass


class TestTokenizer:
    """Tests for tokenize."""

    def test_offsets(self) -> None:
        """Tokens carry their offset in the line."""
        tokens = tokenize("C   G/B  Am")
        assert [(t.offset, t.text) for t in tokens] == [(0, "C"), (4, "G/B"), (9, "Am")]
        assert tokens[1].end == 7

    def test_tagged_tokens(self) -> None:
        """Chord and text tokens are distinct types."""
        tokens = tokenize("G  x2")
        assert isinstance(tokens[0], ChordToken)
        assert tokens[0].chord.root == PitchClass.G
        assert isinstance(tokens[1], TextToken)
        assert tokens[1].chord is None
        assert not tokens[1].is_chord

    def test_leading_whitespace(self) -> None:
        """Leading whitespace shifts offsets."""
        tokens = tokenize("    Em")
        assert tokens[0].offset == 4

    def test_empty(self) -> None:
        """Empty and blank lines have no tokens."""
        assert tokenize("") == []
        assert tokenize(" \t ") == []

    def test_malformed_token_is_text(self) -> None:
        """A token that only starts like a chord is text."""
        tokens = tokenize("C/H")
        assert len(tokens) == 1
        assert isinstance(tokens[0], TextToken)


class TestIsChordLine:
    """Tests for is_chord_line."""

    def test_empty_lines(self) -> None:
        """Empty and whitespace-only lines are not chord lines."""
        assert is_chord_line("") is False
        assert is_chord_line("   ") is False
        assert is_chord_line("\t") is False

    def test_chord_line(self) -> None:
        """All-chord lines are chord lines."""
        assert is_chord_line("C G Am F") is True
        assert is_chord_line("C       G       Am      F") is True
        assert is_chord_line("  D/F#  Em7  Gsus4  A") is True
        assert is_chord_line("C6/9  Fmaj7#11") is True

    def test_lyric_line(self) -> None:
        """Sung words are not chord lines."""
        assert is_chord_line("Amazing grace how sweet the sound") is False
        assert is_chord_line("[Verse 1]") is False

    def test_half_boundary(self) -> None:
        """Exactly half chords counts as a chord line."""
        assert is_chord_line("G x2") is True
        assert is_chord_line("C G Am intro") is True
        assert is_chord_line("C Chorus: Repeat") is False

    def test_single_token(self) -> None:
        """A single token must be a chord."""
        assert is_chord_line("Em") is True
        assert is_chord_line("Hallelujah") is False

    def test_known_false_positive(self) -> None:
        """Short lyric lines of chord-like words are classified as chords."""
        assert is_chord_line("A B C") is True

    def test_density(self) -> None:
        """Density is the share of chord tokens."""
        assert chord_density(tokenize("C x2 G y")) == 0.5
        assert chord_density([]) == 0.0


class TestDocument:
    """Tests for split_lines, parse_document and render_document."""

    def test_split_preserves_breaks(self) -> None:
        """Line breaks are kept with each line."""
        assert list(split_lines("a\r\nb\nc\rd")) == [
            ("a", "\r\n"),
            ("b", "\n"),
            ("c", "\r"),
            ("d", ""),
        ]

    def test_split_trailing_break(self) -> None:
        """A trailing break yields a final empty line."""
        assert list(split_lines("a\n")) == [("a", "\n"), ("", "")]
        assert list(split_lines("")) == [("", "")]

    def test_parse_document(self) -> None:
        """Lines are classified."""
        lines = parse_document("G  C\nAmazing grace\n\n")
        assert isinstance(lines[0], ChordLine)
        assert isinstance(lines[1], LyricLine)
        assert isinstance(lines[2], LyricLine)
        assert len(lines) == 4
        assert [str(c) for c in lines[0].chords] == ["G", "C"]

    def test_render_round_trip(self) -> None:
        """Rendering without a renderer reproduces the input."""
        content = "Intro:\r\n  G   D/F#  Em\r\nAmazing grace\n\n  C  x2\n"
        assert render_document(parse_document(content)) == content

    def test_rewrite_in_place(self) -> None:
        """Only chord tokens are replaced; spacing and text stay."""
        lines = parse_document("  C   x2   G/B ")
        assert render_document(lines, lambda chord: f"<{chord}>") == "  <C>   x2   <G/B> "


class TestNashville:
    """Tests for Nashville numbers."""

    def test_diatonic_numerals(self) -> None:
        """Major scale roots are 1-7."""
        tonic = PitchClass.C
        numerals = [nashville_numeral(tonic, PitchClass.parse(n)) for n in "CDEFGAB"]
        assert numerals == ["1", "2", "3", "4", "5", "6", "7"]

    def test_chromatic_numerals(self) -> None:
        """Chromatic roots are the degree below, raised."""
        tonic = PitchClass.C
        assert nashville_numeral(tonic, PitchClass.Cs) == "#1"
        assert nashville_numeral(tonic, PitchClass.Ds) == "#2"
        assert nashville_numeral(tonic, PitchClass.Fs) == "#4"
        assert nashville_numeral(tonic, PitchClass.Gs) == "#5"
        assert nashville_numeral(tonic, PitchClass.As) == "#6"

    def test_flat_seven_is_sharp_six(self) -> None:
        """Bb in C is #6, never b7."""
        assert to_nashville(Chord.parse("Bb"), PitchClass.C) == "#6"

    def test_quality_and_bass(self) -> None:
        """Quality is kept and the bass gets its own numeral."""
        assert to_nashville(Chord.parse("Am7"), PitchClass.C) == "6m7"
        assert to_nashville(Chord.parse("G/B"), PitchClass.C) == "5/7"
        assert to_nashville(Chord.parse("D/F#"), PitchClass.D) == "1/3"

    def test_other_tonic(self) -> None:
        """Numbers are relative to the tonic given."""
        assert to_nashville(Chord.parse("E"), PitchClass.A) == "5"
        assert to_nashville(Chord.parse("C#m"), PitchClass.A) == "3m"
        assert to_nashville(Chord.parse("F#m"), PitchClass.A) == "6m"


class TestTransposeChord:
    """Tests for transpose_interval and transpose_chord."""

    def test_interval(self) -> None:
        """Interval is ascending, mod 12."""
        assert transpose_interval("C", "D").semitones == 2
        assert transpose_interval("D", "C").semitones == 10
        assert transpose_interval(Key.Cs, Key.Db).semitones == 0

    def test_transpose_chord(self) -> None:
        """Single chords transpose and respell."""
        assert transpose_chord(Chord.parse("G/B"), "C", "D") == "A/C#"
        assert transpose_chord(Chord.parse("Em7"), "G", "F") == "Dm7"
        assert transpose_chord(Chord.parse("A"), "G", "Ab") == "Bb"


class TestGetTransposedContent:
    """Tests for get_transposed_content."""

    def test_c_to_d(self) -> None:
        """Root-only chords shift by two semitones."""
        content = "C       G       Am      F"
        assert get_transposed_content(content, "C", "D", False) == "D       A       Bm      G"

    def test_combination_chords(self) -> None:
        """Six-nine and lydian chords move with the rest of the line."""
        assert get_transposed_content("C6/9  Fmaj7#11  G", "C", "D") == "D6/9  Gmaj7#11  A"
        assert get_transposed_content("Am6/9/C  Dmadd9", "C", "Eb") == "Cm6/9/Eb  Fmadd9"

    def test_lyrics_untouched(self) -> None:
        """Lyric lines pass through unchanged."""
        content = "G          C         G\nAmazing grace how sweet the sound"
        result = get_transposed_content(content, Key.G, Key.A)
        assert result == "A          D         A\nAmazing grace how sweet the sound"

    def test_lyric_with_chord_words_untouched(self) -> None:
        """A lyric line with a few chord-like words is not transposed."""
        content = "A mighty fortress is our God"
        assert get_transposed_content(content, "C", "E") == content

    def test_identity(self) -> None:
        """Same key returns content byte-for-byte."""
        content = "Db   C#m7  Bbsus4/Eb\nWords here\r\n"
        for key in ALL_KEYS:
            assert get_transposed_content(content, key, key, False) == content

    def test_line_structure_preserved(self) -> None:
        """Line count and breaks survive transposition."""
        content = "[Chorus]\r\nG  C  D\r\n\r\nHow great\r\n"
        result = get_transposed_content(content, "G", "E")
        assert result == "[Chorus]\r\nE  A  B\r\n\r\nHow great\r\n"

    def test_flat_target_spelling(self) -> None:
        """Flat keys spell derived accidentals with flats."""
        assert get_transposed_content("C  F  G  A", "C", "Eb") == "Eb  Ab  Bb  C"

    def test_sharp_target_spelling(self) -> None:
        """Sharp keys spell derived accidentals with sharps."""
        assert get_transposed_content("C  F  G  Am", "C", "E") == "E  A  B  C#m"

    def test_enharmonic_respell(self) -> None:
        """C# to Db keeps pitches but respells."""
        assert get_transposed_content("C#m7  F#  G#/C", "C#", "Db") == "Dbm7  Gb  Ab/C"

    def test_slash_and_quality(self) -> None:
        """Slash bass moves with the chord; suffixes stay verbatim."""
        content = "Cmaj7  G/B  Am7  Fadd9  Dsus4"
        result = get_transposed_content(content, "C", "D")
        assert result == "Dmaj7  A/C#  Bm7  Gadd9  Esus4"

    def test_malformed_token_passes_through(self) -> None:
        """Tokens outside the grammar are emitted unchanged."""
        result = get_transposed_content("C  C/H  G", "C", "D")
        assert result == "D  C/H  A"

    def test_annotations_pass_through(self) -> None:
        """Non-chord text on a chord line stays."""
        assert get_transposed_content("G  C  x2", "G", "A") == "A  D  x2"

    def test_spacing_not_realigned(self) -> None:
        """Longer spellings push later chords right."""
        assert get_transposed_content("C G", "C", "C#") == "C# G#"

    def test_nashville(self) -> None:
        """Nashville numbers are relative to the original key."""
        content = "C   G/B   Am7   F   Bb\nAmazing grace"
        result = get_transposed_content(content, "C", "C", True)
        assert result == "1   5/7   6m7   4   #6\nAmazing grace"

    def test_nashville_ignores_target(self) -> None:
        """The target key does not change Nashville numbers."""
        content = "G  C  D  Em"
        assert get_transposed_content(content, "G", "Bb", True) == "1  4  5  6m"

    def test_composition_preserves_pitch(self) -> None:
        """Two steps reach the same pitch classes as one."""
        content = "C  Dm7  G/B  F#dim  Bbmaj7"
        keys = (Key.C, Key.Eb, Key.E, Key.Gb, Key.A)
        for k1, k2, k3 in itertools.product(keys, repeat=3):
            two_step = get_transposed_content(
                get_transposed_content(content, k1, k2), k2, k3
            )
            direct = get_transposed_content(content, k1, k3)
            assert _pitches(two_step) == _pitches(direct)

    def test_invalid_key(self) -> None:
        """Keys outside the closed set are rejected."""
        with pytest.raises(ValueError):
            get_transposed_content("C G", "C", "H")


def _pitches(content: str) -> list[tuple[int, int | None]]:
    return [
        (token.chord.root, token.chord.bass)
        for token in tokenize(content)
        if isinstance(token, ChordToken)
    ]


class TestDisplayKey:
    """Tests for display_key."""

    def test_target(self) -> None:
        """Shows the target key."""
        assert display_key("C", "Eb") == "Eb"

    def test_defaults_to_original(self) -> None:
        """Falls back to the original key."""
        assert display_key("G") == "G"

    def test_nashville(self) -> None:
        """Nashville charts are labelled '#'."""
        assert display_key("G", "A", use_nashville=True) == "#"
