"""
Grid refinement for characters beyond the tenth.

Each further character splits the current cell into 4 columns and 5 rows
and names one of the 20 sub-cells, row-major from the south-west corner:

    index = row * 4 + col

The first grid character subdivides a 0.000125 degree cell, so grid areas
are offsets from the pair-decoded cell rather than absolute positions.
"""

import math

from .alphabet import (
    CODE_ALPHABET,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
)
from .area import CodeArea


def encode_grid(latitude: float, longitude: float, code_length: int) -> str:
    """
    Encode the grid refinement characters for a location.

    Args:
        latitude: Latitude in degrees, already clipped
        longitude: Longitude in degrees, already normalized
        code_length: Number of grid characters to produce

    Returns:
        The grid characters only
    """
    code = ""
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES
    adjusted_latitude = math.fmod(latitude + LATITUDE_MAX, lat_place_value)
    adjusted_longitude = math.fmod(longitude + LONGITUDE_MAX, lng_place_value)

    for _ in range(code_length):
        row = math.floor(adjusted_latitude / (lat_place_value / GRID_ROWS))
        col = math.floor(adjusted_longitude / (lng_place_value / GRID_COLUMNS))
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        adjusted_latitude -= row * lat_place_value
        adjusted_longitude -= col * lng_place_value
        code += CODE_ALPHABET[row * GRID_COLUMNS + col]
    return code


def decode_grid(code: str) -> CodeArea:
    """
    Decode grid refinement characters into a zero-based area.

    Args:
        code: Stripped, uppercase grid characters (positions 11 onwards)

    Returns:
        CodeArea offset from (0, 0); add its bounds to the low corner of
        the pair-decoded area
    """
    latitude_lo = 0.0
    longitude_lo = 0.0
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES

    for char in code:
        row, col = divmod(CODE_ALPHABET.index(char), GRID_COLUMNS)
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        latitude_lo += row * lat_place_value
        longitude_lo += col * lng_place_value

    return CodeArea(
        latitude_lo,
        longitude_lo,
        latitude_lo + lat_place_value,
        longitude_lo + lng_place_value,
        len(code),
    )
