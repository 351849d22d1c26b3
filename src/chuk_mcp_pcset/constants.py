"""
Constants for the pitch-class set system.

No magic strings - user-facing text lives in the message catalogues below.
"""

from enum import Enum

# 12-tone equal temperament
PC_MODULUS = 12

# Shorthand tokens for the two-digit pitch classes
TEN_TOKEN = "t"
ELEVEN_TOKEN = "e"

# Characters the parser accepts (after lower-casing)
ACCEPTED_CHARACTERS = r"0-9te,\s-"

# Narrowest column in the Tn/In table
TI_TABLE_MIN_WIDTH = 5


class ParseIssueCode(str, Enum):
    """Kinds of problem the parser reports."""

    INVALID_CHARACTER = "invalid_character"
    OUT_OF_RANGE = "out_of_range"
    MALFORMED_TOKEN = "malformed_token"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_CHARACTERS = (
        "Input '{text}' contains invalid characters: {chars}. "
        "Only numbers (0-11), 't' (for 10), 'e' (for 11), spaces and commas are allowed."
    )
    OUT_OF_RANGE = "Pitch class '{token}' is outside the allowed range (0-11)."
    MALFORMED_TOKEN = "Token '{token}' is not a valid integer, 't' or 'e'."
    EMPTY_SET = "No valid pitch classes entered. Try again."
    INVALID_CHOICE = "Invalid choice. Try again."
    INVALID_TRANSPOSITION = "Invalid interval. Enter a number between 0 and 11."
    INVALID_AXIS = "Invalid axis. Enter a number between 0 and 11."
    NOT_NUMERIC = "Input is not numeric. Try again."


class Prompts:
    """Prompts and headings shown by the interactive calculator."""

    ENTER_SET = "Enter pitch classes (0-11, 't' for 10, 'e' for 11) separated by spaces or commas:"
    ANALYSIS_HEADER = "--- Analysis of current set ---"
    MENU_HEADER = "--- Choose an operation ---"
    MENU_OPTIONS = (
        "1. Show all transpositions and inversions (T & I)",
        "2. Transpose the set (T_n)",
        "3. Invert the set (I_n)",
        "4. Enter a new set",
        "5. Exit",
    )
    CHOICE = "Your choice: "
    TRANSPOSE_AMOUNT = "Enter the transposition interval (n from 0 to 11): "
    INVERSION_AXIS = "Enter the inversion axis (n from 0 to 11): "
    TI_HEADER = "--- T & I forms ---"
    GOODBYE = "Exiting. Goodbye!"
