"""
Pitch primitives - modulo-12 normalisation and the PitchClass enum.

Every integer maps onto one of the 12 chromatic pitch classes.
PitchClass adds note-name spelling for display; the set algorithms
themselves work on plain ints.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_pcset.constants import PC_MODULUS

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


def normalize(value: int) -> int:
    """
    Map any integer onto a pitch class in [0, 11].

    12 -> 0, 13 -> 1, -1 -> 11.
    """
    return ((value % PC_MODULUS) + PC_MODULUS) % PC_MODULUS


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11), C = 0.

    Enharmonic equivalents share the same value (C# == Db == 1).
    Spelling is a display concern, handled by spell().
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def of(cls, value: int) -> PitchClass:
        """Pitch class of any integer (normalised)."""
        return cls(normalize(value))

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]


def spell_all(pcs: list[int] | tuple[int, ...], prefer_flats: bool = False) -> list[str]:
    """Spell a sequence of pitch classes as note names."""
    return [PitchClass.of(pc).spell(prefer_flats) for pc in pcs]
