"""
Analysis tools - MCP tools for pitch-class set analysis.

Tools for normal order, prime form, transposition, inversion and the
Tn/In table. Every tool takes pitch classes as text ("0 4 7", "0,t,e")
and returns a JSON string.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pcset.core import (
    invert,
    normal_order,
    normalize,
    prime_form,
    successive_intervals,
    transpose,
)
from chuk_mcp_pcset.display import format_pc_set
from chuk_mcp_pcset.models import NormalOrder, SetAnalysis, TITable
from chuk_mcp_pcset.parsing import PitchClassParseError, parse_pitch_classes

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _parse_error(e: PitchClassParseError) -> str:
    """Error response listing every rejected token."""
    logger.debug("Rejected pitch classes: %s", e.tokens)
    return json.dumps({"status": "error", "message": str(e), "issues": e.to_dict()})


def register_analysis_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch-class set analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_analyze(pitch_classes: str, prefer_flats: bool = False) -> str:
        """
        Analyze a pitch-class set.

        Cleans the input (sorted, duplicates removed) and computes its
        normal order and prime form.

        Args:
            pitch_classes: Pitch classes 0-11 separated by spaces or commas
                ('t' = 10, 'e' = 11)
            prefer_flats: Spell note names with flats instead of sharps

        Returns:
            JSON string with the full analysis

        Example:
            pcset_analyze(pitch_classes="0 4 7")
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            analysis = SetAnalysis.of(pcs, prefer_flats=prefer_flats)

            return json.dumps(
                {
                    "status": "success",
                    "analysis": analysis.model_dump(),
                    "display": {
                        "input": format_pc_set(analysis.pitch_classes),
                        "normal_form": format_pc_set(analysis.normal_order.rotation),
                        "prime_form": format_pc_set(analysis.prime_form),
                    },
                }
            )
        except PitchClassParseError as e:
            return _parse_error(e)
        except Exception as e:
            logger.exception("Failed to analyze pitch-class set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_analyze"] = pcset_analyze

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_normal_order(pitch_classes: str) -> str:
        """
        Get the normal order of a pitch-class set.

        The normal order is the rotation with the smallest span, then the
        smallest intervals from the left, then the lowest first pitch class.

        Args:
            pitch_classes: Pitch classes 0-11 separated by spaces or commas

        Returns:
            JSON string with rotation, distances (transposed to 0), span
            and intervals

        Example:
            pcset_normal_order(pitch_classes="7 11 2")
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            result = NormalOrder.from_candidate(normal_order(pcs))

            return json.dumps(
                {
                    "status": "success",
                    "pitch_classes": list(pcs),
                    "normal_order": result.model_dump(),
                }
            )
        except PitchClassParseError as e:
            return _parse_error(e)
        except Exception as e:
            logger.exception("Failed to compute normal order")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_normal_order"] = pcset_normal_order

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_prime_form(pitch_classes: str) -> str:
        """
        Get the prime form of a pitch-class set.

        Args:
            pitch_classes: Pitch classes 0-11 separated by spaces or commas

        Returns:
            JSON string with the prime form and its successive intervals

        Example:
            pcset_prime_form(pitch_classes="0, 4, 7")
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            prime = prime_form(pcs)

            return json.dumps(
                {
                    "status": "success",
                    "pitch_classes": list(pcs),
                    "prime_form": list(prime),
                    "intervals": list(successive_intervals(prime)),
                }
            )
        except PitchClassParseError as e:
            return _parse_error(e)
        except Exception as e:
            logger.exception("Failed to compute prime form")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_prime_form"] = pcset_prime_form

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_transpose(pitch_classes: str, n: int) -> str:
        """
        Transpose a pitch-class set (T_n).

        Args:
            pitch_classes: Pitch classes 0-11 separated by spaces or commas
            n: Semitones to transpose by (taken mod 12)

        Returns:
            JSON string with the transposed set and its prime form

        Example:
            pcset_transpose(pitch_classes="0 4 7", n=5)
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            result = transpose(pcs, n)

            return json.dumps(
                {
                    "status": "success",
                    "operation": f"T{normalize(n)}",
                    "pitch_classes": list(pcs),
                    "result": list(result),
                    "prime_form": list(prime_form(result)),
                }
            )
        except PitchClassParseError as e:
            return _parse_error(e)
        except Exception as e:
            logger.exception("Failed to transpose pitch-class set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_transpose"] = pcset_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_invert(pitch_classes: str, n: int) -> str:
        """
        Invert a pitch-class set about an axis (I_n).

        Each pitch class maps to (n - pc) mod 12; the result is listed in
        reverse input order.

        Args:
            pitch_classes: Pitch classes 0-11 separated by spaces or commas
            n: Inversion axis (taken mod 12)

        Returns:
            JSON string with the inverted set and its prime form

        Example:
            pcset_invert(pitch_classes="0 4 7", n=0)
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            result = invert(pcs, n)

            return json.dumps(
                {
                    "status": "success",
                    "operation": f"I{normalize(n)}",
                    "pitch_classes": list(pcs),
                    "result": list(result),
                    "prime_form": list(prime_form(result)),
                }
            )
        except PitchClassParseError as e:
            return _parse_error(e)
        except Exception as e:
            logger.exception("Failed to invert pitch-class set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_invert"] = pcset_invert

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_ti_table(pitch_classes: str) -> str:
        """
        List all 12 transpositions and inversions of a pitch-class set.

        Args:
            pitch_classes: Pitch classes 0-11 separated by spaces or commas

        Returns:
            JSON string with one row per n (0-11) holding T_n and I_n

        Example:
            pcset_ti_table(pitch_classes="0 1 6 7")
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            table = TITable.of(pcs)

            return json.dumps({"status": "success", **table.model_dump()})
        except PitchClassParseError as e:
            return _parse_error(e)
        except Exception as e:
            logger.exception("Failed to build T/I table")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_ti_table"] = pcset_ti_table

    return tools
