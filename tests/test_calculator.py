"""
Tests for the interactive calculator.

The calculator is driven with scripted input lines and captured streams.
"""

import pytest

from chuk_mcp_pcset.calculator import CalculatorState, PitchSetCalculator


@pytest.fixture
def make_calculator(scripted_input, out, err):
    """Build a calculator that reads the given lines."""

    def factory(lines: list[str], **kwargs) -> PitchSetCalculator:
        return PitchSetCalculator(input_fn=scripted_input(lines), out=out, err=err, **kwargs)

    return factory


class TestInitialInput:
    """Tests for the AWAIT_INPUT state."""

    def test_args_used_as_first_set(self, make_calculator, out) -> None:
        """Command-line tokens are analysed without prompting."""
        calc = make_calculator(["5"])
        calc.run(["0", "4", "7"])
        text = out.getvalue()
        assert "Input PCs:        <0,4,7>" in text
        assert "Normal Form:      <0,4,7>" in text
        assert "Prime Form:       <0,3,7>" in text
        assert "PF intervals:     <3,4>" in text
        assert "Enter pitch classes" not in text
        assert calc.state == CalculatorState.EXIT

    def test_prompted_input(self, make_calculator, out) -> None:
        """Without arguments the user is prompted."""
        calc = make_calculator(["7 11 2", "5"])
        calc.run()
        text = out.getvalue()
        assert "Enter pitch classes" in text
        assert "Normal Form:      <7,11,2>" in text
        assert "Note names:       D G B" in text

    def test_parse_error_reprompts(self, make_calculator, out, err) -> None:
        """Bad input is reported and the user asked again."""
        calc = make_calculator(["13", "0 4 7", "5"])
        calc.run()
        assert "'13'" in err.getvalue()
        assert "Prime Form:       <0,3,7>" in out.getvalue()
        assert calc.current == (0, 4, 7)

    def test_bad_args_fall_back_to_prompt(self, make_calculator, out, err) -> None:
        """Invalid arguments are reported, then the user is prompted."""
        calc = make_calculator(["0 3 7", "5"])
        calc.run(["abc"])
        assert "invalid characters" in err.getvalue()
        assert "Enter pitch classes" in out.getvalue()
        assert calc.current == (0, 3, 7)

    def test_empty_set_reprompts(self, make_calculator, err) -> None:
        """An empty set is not analysed."""
        calc = make_calculator(["", "0", "5"])
        calc.run()
        assert "No valid pitch classes" in err.getvalue()
        assert calc.current == (0,)

    def test_flats(self, make_calculator, out) -> None:
        """Note names can be spelled with flats."""
        calc = make_calculator(["5"], prefer_flats=True)
        calc.run(["1", "3"])
        assert "Note names:       Db Eb" in out.getvalue()


class TestMenu:
    """Tests for the SHOW_MENU state."""

    def test_ti_table(self, make_calculator, out) -> None:
        """Option 1 prints all transpositions and inversions."""
        calc = make_calculator(["1", "5"])
        calc.run(["0", "4", "7"])
        text = out.getvalue()
        assert "--- T & I forms ---" in text
        assert "11   | <11,3,6> | 11   | <4,7,11>" in text

    def test_transpose(self, make_calculator, out) -> None:
        """Option 2 transposes by the given amount."""
        calc = make_calculator(["2", "5", "5"])
        calc.run(["0", "4", "7"])
        assert "T_5 of <0,4,7> is: <5,9,0>" in out.getvalue()

    def test_invert(self, make_calculator, out) -> None:
        """Option 3 inverts about the given axis."""
        calc = make_calculator(["3", "7", "5"])
        calc.run(["0", "4", "7"])
        assert "I_7 of <0,4,7> is: <0,3,7>" in out.getvalue()

    def test_transpose_out_of_range(self, make_calculator, out) -> None:
        """n must be 0-11."""
        calc = make_calculator(["2", "12", "5"])
        calc.run(["0", "4", "7"])
        assert "Invalid interval" in out.getvalue()

    def test_invert_not_numeric(self, make_calculator, out) -> None:
        """Non-numeric n is rejected."""
        calc = make_calculator(["3", "x", "5"])
        calc.run(["0", "4", "7"])
        assert "not numeric" in out.getvalue()

    def test_invalid_choice(self, make_calculator, out) -> None:
        """Unknown options are reported and the menu repeats."""
        calc = make_calculator(["9", "5"])
        calc.run(["0", "4", "7"])
        text = out.getvalue()
        assert "Invalid choice" in text
        assert text.count("--- Choose an operation ---") == 2

    def test_new_set(self, make_calculator, out) -> None:
        """Option 4 goes back to input."""
        calc = make_calculator(["4", "0 1 6 7", "5"])
        calc.run(["0", "4", "7"])
        assert "Normal Form:      <0,1,6,7>" in out.getvalue()
        assert calc.current == (0, 1, 6, 7)

    def test_exit(self, make_calculator, out) -> None:
        """Option 5 says goodbye and stops."""
        calc = make_calculator(["5"])
        calc.run(["0"])
        assert "Goodbye" in out.getvalue()
        assert calc.state == CalculatorState.EXIT


class TestEndOfInput:
    """Tests for running out of input."""

    def test_eof_at_prompt(self, make_calculator) -> None:
        """EOF while waiting for a set exits."""
        calc = make_calculator([])
        calc.run()
        assert calc.state == CalculatorState.EXIT
        assert calc.current is None

    def test_eof_in_menu(self, make_calculator) -> None:
        """EOF at the menu exits with the set kept."""
        calc = make_calculator([])
        calc.run(["0", "4", "7"])
        assert calc.state == CalculatorState.EXIT
        assert calc.current == (0, 4, 7)
