"""
Analysis models - serialisable results for tools and the calculator.

SetAnalysis bundles everything computed for one set: the cleaned input,
its normal order (original and transposed to 0), and its prime form.
TITable lists the 12 transpositions and inversions.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_pcset.constants import PC_MODULUS
from chuk_mcp_pcset.core import (
    RotationCandidate,
    clean,
    invert,
    normal_order,
    prime_form,
    spell_all,
    successive_intervals,
    transpose,
)


class NormalOrder(BaseModel):
    """Serialisable view of a RotationCandidate."""

    rotation: list[int] = Field(..., description="Normal order in original pitch classes")
    distances: list[int] = Field(..., description="Normal order transposed to start on 0")
    span: int = Field(..., ge=0, lt=PC_MODULUS, description="Distance from first to last")
    intervals: list[int] = Field(..., description="Successive intervals of the distances")

    model_config = {"frozen": True}

    @classmethod
    def from_candidate(cls, candidate: RotationCandidate) -> NormalOrder:
        """Create from a rotation engine result."""
        return cls(
            rotation=list(candidate.rotation),
            distances=list(candidate.distances),
            span=candidate.span,
            intervals=list(candidate.intervals),
        )


class SetAnalysis(BaseModel):
    """
    Everything computed for one pitch-class set.

    Build with SetAnalysis.of([...]); the input is cleaned first.
    """

    pitch_classes: list[int] = Field(..., description="Cleaned input (sorted, unique)")
    note_names: list[str] = Field(default_factory=list, description="Spelled pitch classes")
    normal_order: NormalOrder = Field(..., description="Most left-packed rotation")
    prime_form: list[int] = Field(..., description="Canonical T/I representative")
    prime_intervals: list[int] = Field(..., description="Successive intervals of the prime form")

    model_config = {"frozen": True}

    @field_validator("pitch_classes", "prime_form")
    @classmethod
    def validate_range(cls, v: list[int]) -> list[int]:
        """Every value must be a pitch class."""
        for pc in v:
            if not 0 <= pc < PC_MODULUS:
                raise ValueError(f"Pitch class out of range: {pc}")
        return v

    @classmethod
    def of(cls, pcs: Iterable[int], prefer_flats: bool = False) -> SetAnalysis:
        """Analyse a pitch-class set."""
        cleaned = clean(pcs)
        prime = prime_form(cleaned)
        return cls(
            pitch_classes=list(cleaned),
            note_names=spell_all(cleaned, prefer_flats),
            normal_order=NormalOrder.from_candidate(normal_order(cleaned)),
            prime_form=list(prime),
            prime_intervals=list(successive_intervals(prime)),
        )


class TIRow(BaseModel):
    """One row of the transposition/inversion table."""

    n: int = Field(..., ge=0, lt=PC_MODULUS, description="Transposition amount / inversion axis")
    transposition: list[int] = Field(..., description="T_n of the set")
    inversion: list[int] = Field(..., description="I_n of the set")

    model_config = {"frozen": True}


class TITable(BaseModel):
    """All 12 transpositions and inversions of a set."""

    pitch_classes: list[int] = Field(..., description="The set the table was built from")
    rows: list[TIRow] = Field(default_factory=list, description="One row per n in 0-11")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, pcs: Iterable[int]) -> TITable:
        """Build the table for a set (cleaned first)."""
        cleaned = clean(pcs)
        return cls(
            pitch_classes=list(cleaned),
            rows=[
                TIRow(
                    n=n,
                    transposition=list(transpose(cleaned, n)),
                    inversion=list(invert(cleaned, n)),
                )
                for n in range(PC_MODULUS)
            ],
        )
