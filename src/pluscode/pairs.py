"""
Pair encoding for the first ten code characters.

Latitude and longitude are shifted to be non-negative and then written as
interleaved base 20 digits, one latitude and one longitude character per
pair, with place values taken from PAIR_RESOLUTIONS:

    20, 1, 0.05, 0.0025, 0.000125 degrees

A separator follows the eighth character. Codes shorter than eight
characters are padded with zeros up to the separator.

Digits are worked out in whole units of the finest pair resolution
(1/8000 degree), so a location on a cell edge always lands in the cell
above it and decoded edges encode back to the same cell.
"""

import math
from typing import Tuple

from .alphabet import (
    CODE_ALPHABET,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from .area import CodeArea


# Units of the finest pair resolution per degree.
PAIR_PRECISION = round(1 / PAIR_RESOLUTIONS[-1])

# Place value of each pair digit in units.
PLACE_UNITS: Tuple[int, ...] = tuple(
    round(resolution * PAIR_PRECISION) for resolution in PAIR_RESOLUTIONS
)


def _to_units(adjusted: float, limit: int) -> int:
    """
    Convert shifted degrees to whole units below limit.

    Rounding to 6 decimal places first absorbs floating point noise on
    values that sit on a unit boundary.
    """
    units = math.floor(round(adjusted * PAIR_PRECISION, 6))
    return max(0, min(limit * PAIR_PRECISION - 1, units))


def encode_pairs(latitude: float, longitude: float, code_length: int) -> str:
    """
    Encode a location using pair encoding.

    Args:
        latitude: Latitude in degrees, already clipped to [-90, 90)
        longitude: Longitude in degrees, already normalized to [-180, 180)
        code_length: Number of significant characters, even and at most 10

    Returns:
        The code, including separator and any padding
    """
    code = ""
    lat_units = _to_units(latitude + LATITUDE_MAX, LATITUDE_MAX * 2)
    lng_units = _to_units(longitude + LONGITUDE_MAX, LONGITUDE_MAX * 2)

    digit_count = 0
    while digit_count < code_length:
        place = PLACE_UNITS[digit_count // 2]

        digit, lat_units = divmod(lat_units, place)
        code += CODE_ALPHABET[digit]
        digit_count += 1

        digit, lng_units = divmod(lng_units, place)
        code += CODE_ALPHABET[digit]
        digit_count += 1

        if digit_count == SEPARATOR_POSITION and digit_count < code_length:
            code += SEPARATOR

    if len(code) < SEPARATOR_POSITION:
        code += PADDING_CHARACTER * (SEPARATOR_POSITION - len(code))
    if len(code) == SEPARATOR_POSITION:
        code += SEPARATOR
    return code


def _decode_axis(code: str, offset: int) -> Tuple[int, int]:
    """
    Sum the place values of every other character starting at offset.

    Returns:
        Tuple of (low, high) in units of shifted (non-negative) degrees
    """
    units = 0
    i = 0
    while i * 2 + offset < len(code):
        units += CODE_ALPHABET.index(code[i * 2 + offset]) * PLACE_UNITS[i]
        i += 1
    return units, units + PLACE_UNITS[i - 1]


def decode_pairs(code: str) -> CodeArea:
    """
    Decode a stripped, uppercase code of at most ten characters.

    Args:
        code: Significant characters only, no separator or padding

    Returns:
        CodeArea whose code_length is the number of characters decoded
    """
    latitude_lo, latitude_hi = _decode_axis(code, 0)
    longitude_lo, longitude_hi = _decode_axis(code, 1)
    return CodeArea(
        latitude_lo / PAIR_PRECISION - LATITUDE_MAX,
        longitude_lo / PAIR_PRECISION - LONGITUDE_MAX,
        latitude_hi / PAIR_PRECISION - LATITUDE_MAX,
        longitude_hi / PAIR_PRECISION - LONGITUDE_MAX,
        len(code),
    )
