#!/usr/bin/env python3
"""
Interactive pitch-class set calculator.

A small state machine around the analysis core:

    AWAIT_INPUT -> SHOW_MENU -> (AWAIT_INPUT | EXIT)

Command-line arguments are used as the first set only; after that the
user is prompted. From the menu the current set can be listed in all
transpositions and inversions, transposed, inverted, or replaced.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from chuk_mcp_pcset.constants import PC_MODULUS, ErrorMessages, Prompts
from chuk_mcp_pcset.core import PcSet, invert, transpose
from chuk_mcp_pcset.display import format_pc_set, render_ti_table
from chuk_mcp_pcset.models import SetAnalysis
from chuk_mcp_pcset.parsing import PitchClassParseError, parse_pitch_classes

logger = logging.getLogger(__name__)


class CalculatorState(str, Enum):
    """Where the calculator is in its loop."""

    AWAIT_INPUT = "await_input"
    SHOW_MENU = "show_menu"
    EXIT = "exit"


class PitchSetCalculator:
    """
    Prompt/menu loop over a current pitch-class set.

    I/O is injectable so the loop can be driven from tests.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        out: TextIO | None = None,
        err: TextIO | None = None,
        prefer_flats: bool = False,
    ):
        """
        Initialize the calculator.

        Args:
            input_fn: Reads one line after showing a prompt; raises EOFError at end
            out: Stream for results (default: stdout)
            err: Stream for input errors (default: stderr)
            prefer_flats: Spell note names with flats
        """
        self._input = input_fn
        self._out = out
        self._err = err
        self.prefer_flats = prefer_flats
        self.state = CalculatorState.AWAIT_INPUT
        self.current: PcSet | None = None

    def run(self, args: list[str] | None = None) -> None:
        """
        Run until the user exits or input ends.

        Args:
            args: Command-line tokens to use as the first set
        """
        pending = " ".join(args) if args else None

        while self.state != CalculatorState.EXIT:
            try:
                if self.state == CalculatorState.AWAIT_INPUT:
                    self._await_input(pending)
                    pending = None
                else:
                    self._show_menu()
            except EOFError:
                self._transition(CalculatorState.EXIT)

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _await_input(self, pending: str | None) -> None:
        if pending is None:
            self._print(Prompts.ENTER_SET)
            pending = self._input("")

        try:
            pcs = parse_pitch_classes(pending)
        except PitchClassParseError as e:
            self._print_error(str(e))
            return

        if not pcs:
            self._print_error(ErrorMessages.EMPTY_SET)
            return

        self.current = pcs
        self._print_analysis(pcs)
        self._transition(CalculatorState.SHOW_MENU)

    def _show_menu(self) -> None:
        self._print("")
        self._print(Prompts.MENU_HEADER)
        for option in Prompts.MENU_OPTIONS:
            self._print(option)
        choice = self._input(Prompts.CHOICE).strip()

        if choice == "1":
            self._print("")
            self._print(Prompts.TI_HEADER)
            self._print(render_ti_table(self._current()))
        elif choice == "2":
            self._apply("T", Prompts.TRANSPOSE_AMOUNT, ErrorMessages.INVALID_TRANSPOSITION)
        elif choice == "3":
            self._apply("I", Prompts.INVERSION_AXIS, ErrorMessages.INVALID_AXIS)
        elif choice == "4":
            self.current = None
            self._transition(CalculatorState.AWAIT_INPUT)
        elif choice == "5":
            self._print(Prompts.GOODBYE)
            self._transition(CalculatorState.EXIT)
        else:
            self._print(ErrorMessages.INVALID_CHOICE)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _apply(self, operation: str, prompt: str, out_of_range: str) -> None:
        """Prompt for n and show T_n or I_n of the current set."""
        raw = self._input(prompt).strip()
        try:
            n = int(raw)
        except ValueError:
            self._print(ErrorMessages.NOT_NUMERIC)
            return

        if not 0 <= n < PC_MODULUS:
            self._print(out_of_range)
            return

        pcs = self._current()
        result = transpose(pcs, n) if operation == "T" else invert(pcs, n)
        self._print(f"{operation}_{n} of {format_pc_set(pcs)} is: {format_pc_set(result)}")

    def _print_analysis(self, pcs: PcSet) -> None:
        analysis = SetAnalysis.of(pcs, prefer_flats=self.prefer_flats)
        self._print("")
        self._print(Prompts.ANALYSIS_HEADER)
        self._print(f"Input PCs:        {format_pc_set(analysis.pitch_classes)}")
        self._print(f"Note names:       {' '.join(analysis.note_names)}")
        self._print(f"Normal Form:      {format_pc_set(analysis.normal_order.rotation)}")
        self._print(f"Prime Form:       {format_pc_set(analysis.prime_form)}")
        self._print(f"PF intervals:     {format_pc_set(analysis.prime_intervals)}")

    def _current(self) -> PcSet:
        if self.current is None:
            raise RuntimeError("No current pitch-class set")
        return self.current

    def _transition(self, state: CalculatorState) -> None:
        logger.debug("Calculator state %s -> %s", self.state.value, state.value)
        self.state = state

    def _print(self, text: str) -> None:
        print(text, file=self._out or sys.stdout)

    def _print_error(self, text: str) -> None:
        print(text, file=self._err or sys.stderr)


def main() -> None:
    """Entry point for the interactive calculator."""
    parser = argparse.ArgumentParser(description="Pitch-class set calculator")
    parser.add_argument(
        "pitch_classes",
        nargs="*",
        help="First set to analyze, e.g. 0 4 7 (optional)",
    )
    parser.add_argument(
        "--flats",
        action="store_true",
        help="Spell note names with flats",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    PitchSetCalculator(prefer_flats=args.flats).run(args.pitch_classes)


if __name__ == "__main__":
    main()
