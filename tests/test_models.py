"""
Tests for the analysis models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_pcset.core import normal_order
from chuk_mcp_pcset.models import NormalOrder, SetAnalysis, TITable


class TestNormalOrder:
    """Tests for NormalOrder model."""

    def test_from_candidate(self) -> None:
        """Fields mirror the rotation engine result."""
        model = NormalOrder.from_candidate(normal_order([0, 4, 7, 10]))
        assert model.rotation == [4, 7, 10, 0]
        assert model.distances == [0, 3, 6, 8]
        assert model.span == 8
        assert model.intervals == [3, 3, 2]

    def test_span_range(self) -> None:
        """Span must be 0-11."""
        with pytest.raises(ValidationError):
            NormalOrder(rotation=[0], distances=[0], span=12, intervals=[])


class TestSetAnalysis:
    """Tests for SetAnalysis model."""

    def test_major_triad(self) -> None:
        """Full analysis of C major."""
        analysis = SetAnalysis.of([7, 0, 4])
        assert analysis.pitch_classes == [0, 4, 7]
        assert analysis.note_names == ["C", "E", "G"]
        assert analysis.normal_order.rotation == [0, 4, 7]
        assert analysis.prime_form == [0, 3, 7]
        assert analysis.prime_intervals == [3, 4]

    def test_prefer_flats(self) -> None:
        """Note names can use flats."""
        analysis = SetAnalysis.of([1, 5, 8], prefer_flats=True)
        assert analysis.note_names == ["Db", "F", "Ab"]

    def test_empty(self) -> None:
        """An empty set analyses to empty fields."""
        analysis = SetAnalysis.of([])
        assert analysis.pitch_classes == []
        assert analysis.normal_order.rotation == []
        assert analysis.normal_order.span == 0
        assert analysis.prime_form == []
        assert analysis.prime_intervals == []

    def test_frozen(self) -> None:
        """Analyses are immutable."""
        analysis = SetAnalysis.of([0, 4, 7])
        with pytest.raises(ValidationError):
            analysis.prime_form = [0]  # type: ignore[misc]

    def test_rejects_out_of_range(self) -> None:
        """Direct construction validates pitch classes."""
        with pytest.raises(ValidationError, match="out of range"):
            SetAnalysis(
                pitch_classes=[12],
                normal_order=NormalOrder(rotation=[], distances=[], span=0, intervals=[]),
                prime_form=[],
                prime_intervals=[],
            )

    def test_model_dump(self) -> None:
        """Dumps to plain data."""
        data = SetAnalysis.of([5]).model_dump()
        assert data["normal_order"] == {
            "rotation": [5],
            "distances": [0],
            "span": 0,
            "intervals": [],
        }
        assert data["prime_form"] == [0]


class TestTITable:
    """Tests for TITable model."""

    def test_rows(self) -> None:
        """Twelve rows with T_n and I_n."""
        table = TITable.of([0, 4, 7])
        assert len(table.rows) == 12
        assert table.rows[0].transposition == [0, 4, 7]
        assert table.rows[0].inversion == [5, 8, 0]
        assert table.rows[5].transposition == [5, 9, 0]

    def test_input_cleaned(self) -> None:
        """The table is built from the cleaned set."""
        table = TITable.of([4, 0, 7, 0])
        assert table.pitch_classes == [0, 4, 7]
