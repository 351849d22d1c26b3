#!/usr/bin/env python3
"""
Example: Analyze a few familiar pitch-class sets.

Prints the normal order and prime form of common chords and scales,
then the full T/I table for one of them.

Usage:
    python examples/analyze_sets.py
"""

from chuk_mcp_pcset.display import format_pc_set, render_ti_table
from chuk_mcp_pcset.models import SetAnalysis

SETS: dict[str, list[int]] = {
    "C major triad": [0, 4, 7],
    "C minor triad": [0, 3, 7],
    "G major triad": [7, 11, 2],
    "C dominant 7th": [0, 4, 7, 10],
    "C half-diminished 7th": [0, 3, 6, 10],
    "Whole-tone scale": [0, 2, 4, 6, 8, 10],
    "C major scale": [0, 2, 4, 5, 7, 9, 11],
}


def main() -> None:
    """Print analyses of the example sets."""
    for name, pcs in SETS.items():
        analysis = SetAnalysis.of(pcs)
        print(f"{name}")
        print(f"  Notes:        {' '.join(analysis.note_names)}")
        print(f"  Normal form:  {format_pc_set(analysis.normal_order.rotation)}")
        print(f"  Prime form:   {format_pc_set(analysis.prime_form)}")
        print(f"  Intervals:    {format_pc_set(analysis.prime_intervals)}")
        print()

    print("T/I table for C major triad:")
    print(render_ti_table(SETS["C major triad"]))


if __name__ == "__main__":
    main()
