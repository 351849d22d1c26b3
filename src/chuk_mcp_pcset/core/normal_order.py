"""
Normal order - the rotation engine.

Every cyclic rotation of the cleaned set is transposed to start on 0 and
scored; the most left-packed one is the normal order. Candidates are
ranked by:

    1. smallest span (first to last element)
    2. lexicographically smallest successive-interval profile
    3. lowest starting pitch class of the original rotation

Intervals are always compared at equal length (n - 1), so the key is a
total order and the winner is unique.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import ClassVar

from .pcset import PcSet, clean, rotations, span, successive_intervals
from .pitch import normalize


@dataclass(frozen=True)
class RotationCandidate:
    """
    One rotation of a set, with the figures used to rank it.

    rotation:  the original pitch classes, e.g. (4, 7, 0)
    distances: the rotation transposed to start on 0, e.g. (0, 3, 8)
    span:      distances[-1], e.g. 8
    intervals: successive intervals of distances, e.g. (3, 5)

    Immutable and hashable.
    """

    rotation: PcSet
    distances: PcSet
    span: int
    intervals: PcSet

    EMPTY: ClassVar[RotationCandidate]

    def __post_init__(self) -> None:
        size = len(self.rotation)
        if len(self.distances) != size:
            raise ValueError(
                f"Rotation and distances differ in length: {self.rotation} vs {self.distances}"
            )
        if len(self.intervals) != max(size - 1, 0):
            raise ValueError(f"Expected {max(size - 1, 0)} intervals, got {len(self.intervals)}")
        if self.distances and self.distances[0] != 0:
            raise ValueError(f"Distances must start at 0, got {self.distances}")
        # prime_form() reads the outer intervals as plain differences
        if any(b <= a for a, b in zip(self.distances, self.distances[1:])):
            raise ValueError(f"Distances must be strictly ascending, got {self.distances}")

    @classmethod
    def from_rotation(cls, rotation: Sequence[int]) -> RotationCandidate:
        """Build the candidate for one rotation."""
        if not rotation:
            return cls.EMPTY
        root = rotation[0]
        distances = tuple(normalize(pc - root) for pc in rotation)
        return cls(
            rotation=tuple(rotation),
            distances=distances,
            span=span(distances),
            intervals=successive_intervals(distances),
        )

    def sort_key(self) -> tuple[int, PcSet, int]:
        """Ranking key - smaller is more left-packed."""
        first = self.rotation[0] if self.rotation else 0
        return (self.span, self.intervals, first)

    def __len__(self) -> int:
        return len(self.rotation)


RotationCandidate.EMPTY = RotationCandidate(rotation=(), distances=(), span=0, intervals=())


def rotation_candidates(pcs: Iterable[int]) -> list[RotationCandidate]:
    """
    Score every rotation of the cleaned set.

    Returns one candidate per starting index, in index order.
    """
    return [RotationCandidate.from_rotation(rot) for rot in rotations(clean(pcs))]


def normal_order(pcs: Iterable[int]) -> RotationCandidate:
    """
    Get the normal order of a pitch-class set.

    The input is cleaned first (normalised, deduplicated, sorted), so any
    collection of ints is accepted.

    Args:
        pcs: Pitch classes in any order, repeats allowed

    Returns:
        The winning RotationCandidate; its distances start at 0
    """
    cleaned = clean(pcs)
    if not cleaned:
        return RotationCandidate.EMPTY
    if len(cleaned) == 1:
        return RotationCandidate.from_rotation(cleaned)

    return min(rotation_candidates(cleaned), key=RotationCandidate.sort_key)
