"""
pluscode: Open Location Code ("Plus Code") encoder and decoder.

This package converts latitude/longitude pairs into short alphanumeric codes
naming rectangular cells on the Earth's surface, decodes codes back into
those cells, and shortens or recovers codes relative to a nearby reference
location. Everything works offline and without state.
"""

__version__ = "0.1.0"

from .area import CodeArea
from .codec import (
    encode,
    decode,
    shorten,
    recover_nearest,
    clip_latitude,
    normalize_longitude,
    compute_latitude_precision,
)
from .errors import (
    OpenLocationCodeError,
    InvalidLength,
    InvalidCode,
    PaddedCode,
    CodeTooShort,
    InvalidShortCode,
)
from .validate import is_valid, is_short, is_full

__all__ = [
    "CodeArea",
    "encode",
    "decode",
    "shorten",
    "recover_nearest",
    "clip_latitude",
    "normalize_longitude",
    "compute_latitude_precision",
    "OpenLocationCodeError",
    "InvalidLength",
    "InvalidCode",
    "PaddedCode",
    "CodeTooShort",
    "InvalidShortCode",
    "is_valid",
    "is_short",
    "is_full",
]
