"""
Core pitch-class set primitives.

These are the mathematical invariants that everything else composes on:
- normalize / PitchClass: pitch classes modulo 12
- clean, span, successive_intervals, circular_intervals, rotations
- transpose (T_n) and invert (I_n)
- RotationCandidate / normal_order: the rotation engine
- prime_form: the canonical form resolver
"""

from chuk_mcp_pcset.core.normal_order import RotationCandidate, normal_order, rotation_candidates
from chuk_mcp_pcset.core.pcset import (
    PcSet,
    circular_intervals,
    clean,
    invert,
    rotations,
    span,
    successive_intervals,
    transpose,
)
from chuk_mcp_pcset.core.pitch import PitchClass, normalize, spell_all
from chuk_mcp_pcset.core.prime_form import prime_form

__all__ = [
    # Pitch
    "PitchClass",
    "normalize",
    "spell_all",
    # Sets
    "PcSet",
    "clean",
    "span",
    "successive_intervals",
    "circular_intervals",
    "rotations",
    "transpose",
    "invert",
    # Normal order
    "RotationCandidate",
    "normal_order",
    "rotation_candidates",
    # Prime form
    "prime_form",
]
