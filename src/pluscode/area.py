"""
Decoded code areas.

A code names a rectangle rather than a point. CodeArea records the south-west
and north-east corners of that rectangle in degrees, together with the number
of significant characters that produced it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .alphabet import LATITUDE_MAX, LONGITUDE_MAX


@dataclass(frozen=True)
class CodeArea:
    """
    An axis-aligned cell in latitude/longitude degrees.

    Represents the half-open ranges [latitude_lo, latitude_hi) and
    [longitude_lo, longitude_hi).
    """
    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int  # significant characters, separator and padding excluded

    def __post_init__(self):
        if self.latitude_lo > self.latitude_hi or self.longitude_lo > self.longitude_hi:
            raise ValueError(
                f"Invalid area: latitude {self.latitude_lo}..{self.latitude_hi}, "
                f"longitude {self.longitude_lo}..{self.longitude_hi}"
            )
        if self.code_length < 1:
            raise ValueError(f"Invalid code length: {self.code_length}")

    @property
    def latitude_center(self) -> float:
        """
        Latitude of the cell center.

        Capped at 90 since the midpoint of the northernmost cell can round
        past the pole.
        """
        return min(
            self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2,
            LATITUDE_MAX,
        )

    @property
    def longitude_center(self) -> float:
        """Longitude of the cell center, capped at 180."""
        return min(
            self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2,
            LONGITUDE_MAX,
        )

    @property
    def latitude_height(self) -> float:
        """Height of the cell in degrees of latitude."""
        return self.latitude_hi - self.latitude_lo

    @property
    def longitude_width(self) -> float:
        """Width of the cell in degrees of longitude."""
        return self.longitude_hi - self.longitude_lo

    def center(self) -> Tuple[float, float]:
        """Return (latitude_center, longitude_center)."""
        return self.latitude_center, self.longitude_center

    def contains(self, latitude: float, longitude: float) -> bool:
        """Check if a point falls within the cell (high edges excluded)."""
        return (
            self.latitude_lo <= latitude < self.latitude_hi
            and self.longitude_lo <= longitude < self.longitude_hi
        )
