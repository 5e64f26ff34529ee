"""
Alphabet and grammar constants for Open Location Codes.

Codes are written with a 20 character alphabet chosen to avoid spelling
words. A full code carries a separator after its eighth significant
character; shorter codes fill the gap with padding characters.

These values form the numeric contract shared by every implementation and
must not be changed.
"""

from typing import Tuple


# A separator used to break the code into two parts to aid memorability.
SEPARATOR = "+"

# Number of significant characters placed before the separator.
SEPARATOR_POSITION = 8

# The character used to pad codes.
PADDING_CHARACTER = "0"

CODE_ALPHABET = "23456789CFGHJMPQRVWX"

ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

# Maximum number of characters produced by lat/lng pair encoding.
PAIR_CODE_LENGTH = 10

# Place value in degrees of each digit pair.
PAIR_RESOLUTIONS: Tuple[float, ...] = (20.0, 1.0, 0.05, 0.0025, 0.000125)

GRID_COLUMNS = 4
GRID_ROWS = 5

# Size of the cell refined by the first grid character.
GRID_SIZE_DEGREES = 0.000125

# Minimum length of a code that can be shortened.
MIN_TRIMMABLE_CODE_LEN = 6


def digit_value(char: str) -> int:
    """
    Look up the alphabet index of a code character.

    Args:
        char: A single character, in either case

    Returns:
        Index into CODE_ALPHABET, or -1 if the character is not in it
    """
    return CODE_ALPHABET.find(char.upper())


def strip_code(code: str) -> str:
    """Remove whitespace, separator and padding characters and uppercase the rest."""
    return code.strip().replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()
