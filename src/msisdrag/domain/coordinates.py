# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Fixed-width text tokens for geodetic coordinates.

The atmosphere model reads altitude, latitude and longitude as short decimal
tokens. Values are rendered in fixed notation with 15 digits after the point
and then cut to 8 characters from the left. The cut truncates, it does not
round: 12.3456789 becomes '12.34567'.
"""
import math
from dataclasses import dataclass

FIXED_DECIMALS = 15
TOKEN_WIDTH = 8
# Altitude is only cut once it exceeds nine characters.
ALTITUDE_CUT_THRESHOLD = 9


@dataclass(frozen=True)
class GeodeticTokens:
    """Model-ready text for altitude (km), latitude (deg), longitude (deg)."""
    altitude: str
    latitude: str
    longitude: str


def format_fixed(value: float) -> str:
    """Fixed notation with 15 digits after the decimal point."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite coordinate {value!r}")
    return f"{value:.{FIXED_DECIMALS}f}"


def truncate_token(token: str, width: int = TOKEN_WIDTH, threshold: int | None = None) -> str:
    """Left-anchored cut of token to width characters.

    The cut applies when the token is longer than threshold (default: width).
    """
    if threshold is None:
        threshold = width
    if len(token) > threshold:
        return token[:width]
    return token


def format_geodetic(
    altitude_km: float,
    latitude_deg: float,
    longitude_deg: float,
) -> GeodeticTokens:
    """Format a geodetic position for the atmosphere model command line.

    >>> format_geodetic(400.0, 10.0, -20.0)
    GeodeticTokens(altitude='400.0000', latitude='10.00000', longitude='-20.0000')
    """
    return GeodeticTokens(
        altitude=truncate_token(
            format_fixed(altitude_km), threshold=ALTITUDE_CUT_THRESHOLD,
        ),
        latitude=truncate_token(format_fixed(latitude_deg)),
        longitude=truncate_token(format_fixed(longitude_deg)),
    )
