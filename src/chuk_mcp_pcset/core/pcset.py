"""
Pitch-class set primitives.

Plain functions over sequences of ints. Inputs are never mutated and
every result is a fresh tuple (or list of tuples).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .pitch import normalize

PcSet = tuple[int, ...]


def _distinct(values: Iterable[int]) -> PcSet:
    """Drop repeats, keeping the first occurrence of each value."""
    return tuple(dict.fromkeys(values))


def clean(pcs: Iterable[int]) -> PcSet:
    """
    Normalise, deduplicate and sort.

    This is the canonical input form for the normal order and
    prime form algorithms.
    """
    return tuple(sorted({normalize(pc) for pc in pcs}))


def span(pcs: Sequence[int]) -> int:
    """Distance (mod 12) from the first element to the last."""
    if len(pcs) <= 1:
        return 0
    return normalize(pcs[-1] - pcs[0])


def successive_intervals(pcs: Sequence[int]) -> PcSet:
    """Mod-12 differences between each adjacent pair."""
    return tuple(normalize(b - a) for a, b in zip(pcs, pcs[1:]))


def circular_intervals(pcs: Sequence[int]) -> PcSet:
    """
    Successive intervals plus the wrap from the last element back to the first.

    For a cleaned set the intervals sum to 12.
    """
    if len(pcs) < 2:
        return ()
    return successive_intervals(pcs) + (normalize(pcs[0] - pcs[-1]),)


def rotations(pcs: Sequence[int]) -> list[PcSet]:
    """
    All cyclic rotations, rotation i starting at pcs[i].

    Relative order is preserved, so rotations of a sorted set keep
    its circular adjacency.
    """
    n = len(pcs)
    return [tuple(pcs[(i + k) % n] for k in range(n)) for i in range(n)]


def transpose(pcs: Iterable[int], n: int) -> PcSet:
    """
    T_n: add n to every pitch class.

    Order follows the input; repeats are dropped.
    """
    shift = normalize(n)
    return _distinct(normalize(pc + shift) for pc in pcs)


def invert(pcs: Iterable[int], n: int) -> PcSet:
    """
    I_n: map every pitch class to (n - pc) mod 12.

    The mapped sequence is reversed before repeats are dropped, so the
    last input element comes first.
    """
    axis = normalize(n)
    mapped = [normalize(axis - pc) for pc in pcs]
    return _distinct(reversed(mapped))
