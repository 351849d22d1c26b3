"""
Prime form - the canonical form resolver.

The prime form is either the normal order (transposed to 0) or its
inversion, whichever packs tighter at the left. The choice compares the
first and last successive intervals of the normal order.
"""

from __future__ import annotations

from collections.abc import Iterable

from .normal_order import normal_order
from .pcset import PcSet, clean
from .pitch import normalize


def prime_form(pcs: Iterable[int]) -> PcSet:
    """
    Get the prime form of a pitch-class set.

    Args:
        pcs: Pitch classes in any order, repeats allowed

    Returns:
        Ascending pitch classes starting at 0 (empty for an empty set)

    Example:
        prime_form([0, 4, 7]) -> (0, 3, 7)
    """
    cleaned = clean(pcs)
    if not cleaned:
        return ()
    if len(cleaned) == 1:
        return (0,)

    distances = normal_order(cleaned).distances

    # distances is strictly ascending, so these need no mod 12
    first_interval = distances[1] - distances[0]
    last_interval = distances[-1] - distances[-2]

    if first_interval <= last_interval:
        return distances

    # Invert about the last element so it lands on 0
    axis = distances[-1]
    return tuple(sorted({normalize(axis - d) for d in distances}))
