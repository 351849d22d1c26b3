"""
Text rendering for pitch-class sets.

Sets print in angle brackets, comma-joined: <0,4,7>. The Tn/In table
lists all 12 transpositions beside all 12 inversions.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chuk_mcp_pcset.constants import PC_MODULUS, TI_TABLE_MIN_WIDTH
from chuk_mcp_pcset.core import invert, transpose


def format_pc_set(pcs: Iterable[int] | None) -> str:
    """Render a pitch-class sequence as <a,b,c> (<> when empty)."""
    if pcs is None:
        return "<>"
    return "<" + ",".join(str(pc) for pc in pcs) + ">"


def ti_forms(pcs: Sequence[int]) -> list[tuple[int, str, str]]:
    """Rendered (n, T_n, I_n) for n in 0-11."""
    return [
        (n, format_pc_set(transpose(pcs, n)), format_pc_set(invert(pcs, n)))
        for n in range(PC_MODULUS)
    ]


def render_ti_table(pcs: Sequence[int]) -> str:
    """
    Render every transposition and inversion as a two-column table.

    Example for (0, 4, 7):

        n    | Tn       | n    | In
        -----|----------|------|---------
        0    | <0,4,7>  | 0    | <5,8,0>
        1    | <1,5,8>  | 1    | <6,9,1>
        ...
    """
    rows = ti_forms(pcs)
    tn_width = max([TI_TABLE_MIN_WIDTH] + [len(tn) for _, tn, _ in rows])
    in_width = max([TI_TABLE_MIN_WIDTH] + [len(inv) for _, _, inv in rows])

    lines = [
        f"{'n':<4} | {'Tn':<{tn_width}} | {'n':<4} | {'In':<{in_width}}",
        f"-----|-{'-' * tn_width}-|------|-{'-' * in_width}",
    ]
    for n, tn, inv in rows:
        lines.append(f"{n:<4} | {tn:<{tn_width}} | {n:<4} | {inv:<{in_width}}")
    return "\n".join(lines)
