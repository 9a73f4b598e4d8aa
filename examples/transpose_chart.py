#!/usr/bin/env python3
"""
Example: Transpose a chord chart.

This demonstrates the chart engine end to end - chord line detection,
transposition into letter-name keys, and Nashville numbers.

Usage:
    python examples/transpose_chart.py
"""

from chuk_mcp_chords.chart import is_chord_line
from chuk_mcp_chords.models import SongChart

CONTENT = """[Verse 1]
G          G7        C         G
Amazing grace how sweet the sound
G              Em       D
That saved a wretch like me
G          G7       C         G
I once was lost but now am found
G        D/F#     Em    D     G
Was blind but now I see"""


def main() -> None:
    """Print the chart in its own key, a flat key, and as numbers."""
    chart = SongChart(
        title="Amazing Grace", artist="John Newton", original_key="G", content=CONTENT
    )

    for target, nashville in (("G", False), ("Bb", False), ("E", False), (None, True)):
        view = chart.transpose(target, use_nashville=nashville)
        print(f"{view.title} - Key: {view.display_key}")
        print("-" * 40)
        for line in view.lines:
            marker = "*" if is_chord_line(line.text) else " "
            print(f"{marker} {line.text}")
        print()

    print("Lines marked * are chord lines.")


if __name__ == "__main__":
    main()
