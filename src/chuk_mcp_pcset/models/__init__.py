"""
Pydantic models for analysis results.

This module provides:
- NormalOrder: Serialisable normal order (rotation, distances, span, intervals)
- SetAnalysis: Normal order and prime form of one set
- TIRow / TITable: The 12 transpositions and inversions of a set
"""

from chuk_mcp_pcset.models.analysis import NormalOrder, SetAnalysis, TIRow, TITable

__all__ = [
    "NormalOrder",
    "SetAnalysis",
    "TIRow",
    "TITable",
]
