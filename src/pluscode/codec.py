"""
Encode, decode, shorten and recover Open Location Codes.

Open Location Codes are short codes that stand in for street addresses. They
can be generated and decoded offline and represent rectangular areas rather
than points: a 10 character code names roughly a 13.9 x 13.9 meter cell at
the equator, an 11 character code roughly 2.8 x 3.5 meters.

The first ten characters are produced by pair encoding (see pairs.py), any
further characters by grid refinement (see grid.py).

Codes can be shortened relative to a nearby location, in which case only
four to seven characters are needed. Recovering the full code does not need
the exact same location, only one reasonably close to it.

Examples:

    >>> encode(47.365590, 8.524997)
    '8FVC9G8F+6X'
    >>> shorten('8FVC9G8F+6X', 47.5, 8.5)
    '9G8F+6X'
    >>> recover_nearest('9G8F+6X', 47.4, 8.6)
    '8FVC9G8F+6X'
"""

import math

from .alphabet import (
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MIN_TRIMMABLE_CODE_LEN,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
    strip_code,
)
from .area import CodeArea
from .errors import (
    CodeTooShort,
    InvalidCode,
    InvalidLength,
    InvalidShortCode,
    PaddedCode,
)
from .grid import decode_grid, encode_grid
from .pairs import decode_pairs, encode_pairs
from .validate import is_full, is_short


# Shortening keeps the reference inside this fraction of a cell, so that a
# slightly different reference still recovers the same code.
SHORTEN_SAFETY_FACTOR = 0.3


def clip_latitude(latitude: float) -> float:
    """Clip latitude into [-90, 90]."""
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude into [-180, 180)."""
    while longitude < -LONGITUDE_MAX:
        longitude += LONGITUDE_MAX * 2
    while longitude >= LONGITUDE_MAX:
        longitude -= LONGITUDE_MAX * 2
    return longitude


def compute_latitude_precision(code_length: int) -> float:
    """
    Distance below the north pole at which a pole location is encoded.

    For pair codes this is the height of the cell; each grid character
    divides the offset used for a 10 character code by the number of rows.

    Args:
        code_length: Number of significant characters

    Returns:
        Latitude offset in degrees
    """
    if code_length <= PAIR_CODE_LENGTH:
        return 20 ** math.floor(code_length / -2 + 2)
    return 20 ** -2 / GRID_ROWS ** (code_length - PAIR_CODE_LENGTH)


def encode(latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH) -> str:
    """
    Encode a location into an Open Location Code.

    Args:
        latitude: Latitude in degrees; clipped to [-90, 90]
        longitude: Longitude in degrees; wrapped into [-180, 180)
        code_length: Number of significant characters. Must be at least 2,
            and even when below 8.

    Returns:
        Uppercase full code

    Raises:
        InvalidLength: If code_length is not a legal length
    """
    if code_length < 2 or (code_length < SEPARATOR_POSITION and code_length % 2 == 1):
        raise InvalidLength(code_length)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    # The pole itself is excluded from the half-open cells, so move just
    # below it. Values a rounding step short of the pole or the antimeridian
    # would still shift onto them.
    if latitude + LATITUDE_MAX >= LATITUDE_MAX * 2:
        latitude = LATITUDE_MAX - compute_latitude_precision(code_length)
    if longitude + LONGITUDE_MAX >= LONGITUDE_MAX * 2:
        longitude = -LONGITUDE_MAX

    code = encode_pairs(latitude, longitude, min(code_length, PAIR_CODE_LENGTH))
    if code_length > PAIR_CODE_LENGTH:
        code += encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)
    return code


def decode(code: str) -> CodeArea:
    """
    Decode a full Open Location Code into the area it names.

    Args:
        code: A full code, in either case

    Returns:
        CodeArea with the cell bounds and number of significant characters

    Raises:
        InvalidCode: If the code is not a valid full code
    """
    if not is_full(code):
        raise InvalidCode(code)

    stripped = strip_code(code)
    area = decode_pairs(stripped[:PAIR_CODE_LENGTH])
    if len(stripped) <= PAIR_CODE_LENGTH:
        return area

    grid_area = decode_grid(stripped[PAIR_CODE_LENGTH:])
    return CodeArea(
        area.latitude_lo + grid_area.latitude_lo,
        area.longitude_lo + grid_area.longitude_lo,
        area.latitude_lo + grid_area.latitude_hi,
        area.longitude_lo + grid_area.longitude_hi,
        area.code_length + grid_area.code_length,
    )


def shorten(code: str, latitude: float, longitude: float) -> str:
    """
    Remove leading characters from a code relative to a reference location.

    The more characters removed, the closer the reference must be to the
    code's center for the code to be recovered. Up to 8 characters are
    removed, depending on the distance to the reference.

    Args:
        code: Full, unpadded code of at least 6 significant characters
        latitude: Reference latitude in degrees
        longitude: Reference longitude in degrees

    Returns:
        The shortened code, or the full code if the reference is too far
        away for any characters to be removed

    Raises:
        InvalidCode: If the code is not a valid full code
        PaddedCode: If the code contains padding
        CodeTooShort: If the code has fewer than 6 significant characters
    """
    if not is_full(code):
        raise InvalidCode(code)
    if PADDING_CHARACTER in code:
        raise PaddedCode(code)

    code = code.strip().upper()
    area = decode(code)
    if area.code_length < MIN_TRIMMABLE_CODE_LEN:
        raise CodeTooShort(code, area.code_length, MIN_TRIMMABLE_CODE_LEN)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    code_range = max(
        abs(area.latitude_center - latitude),
        abs(area.longitude_center - longitude),
    )
    for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
        # An 8 character code keeps at least one pair before the separator
        if (i + 1) * 2 >= code.find(SEPARATOR) and code.endswith(SEPARATOR):
            continue
        if code_range < PAIR_RESOLUTIONS[i] * SHORTEN_SAFETY_FACTOR:
            return code[(i + 1) * 2:]
    return code


def recover_nearest(short_code: str, latitude: float, longitude: float) -> str:
    """
    Recover the full code nearest a reference location from a short code.

    The missing leading characters are borrowed from the reference
    location's own code. If the resulting cell is more than half a cell
    away from the reference, it is moved one cell towards it, so the
    reference only needs to be near the original location.

    Args:
        short_code: A short code; full codes are returned unchanged
        latitude: Reference latitude in degrees
        longitude: Reference longitude in degrees

    Returns:
        Uppercase full code

    Raises:
        InvalidShortCode: If the code is neither short nor full
    """
    if is_full(short_code):
        return short_code.strip().upper()
    if not is_short(short_code):
        raise InvalidShortCode(short_code)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    short_code = short_code.strip().upper()

    padding_length = SEPARATOR_POSITION - short_code.find(SEPARATOR)
    resolution = 20 ** (2 - padding_length / 2)
    half_resolution = resolution / 2.0

    prefix = encode(latitude, longitude)[:padding_length]
    area = decode(prefix + short_code)
    latitude_center = area.latitude_center
    longitude_center = area.longitude_center

    # Latitude is not wrapped, so never move the cell past a pole.
    if (latitude + half_resolution < latitude_center
            and latitude_center - resolution >= -LATITUDE_MAX):
        latitude_center -= resolution
    elif (latitude - half_resolution > latitude_center
            and latitude_center + resolution <= LATITUDE_MAX):
        latitude_center += resolution

    if longitude + half_resolution < longitude_center:
        longitude_center -= resolution
    elif longitude - half_resolution > longitude_center:
        longitude_center += resolution

    return encode(latitude_center, longitude_center, area.code_length)
