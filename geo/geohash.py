#Purpose: The geocoder (lat/lon <-> fixed-length base-32 cell code).
#Interleaves binary subdivisions of the longitude and latitude ranges,
#starting with longitude, and packs 5 bits into each output character.
#Typical responsibilities:
#encode a coordinate into a cell code at a given precision
#decode a cell code back into the centre of its bounding box
#approximate "nearby" cells for a code
#It should not contain dispatch rules or scoring.

from __future__ import annotations

from typing import List, Tuple

#internal coordinate type :(lat,lon)
LatLon = Tuple[float, float]

# (lat_min, lat_max, lon_min, lon_max)
Bounds = Tuple[float, float, float, float]

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
_BASE32_INDEX = {char: index for index, char in enumerate(BASE32)}

DEFAULT_PRECISION = 6
MIN_PRECISION = 1
MAX_PRECISION = 12


def validate_coordinate(latitude: float, longitude: float) -> None:
    """
    Raise ValueError if the pair is outside latitude [-90, 90] / longitude [-180, 180].
    """
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"latitude must be within [-90, 90], got {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"longitude must be within [-180, 180], got {longitude}")


def validate_precision(precision: int) -> None:
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ValueError(f"precision must be within [{MIN_PRECISION}, {MAX_PRECISION}], got {precision}")


def encode(latitude: float, longitude: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Convert a (lat, lon) pair into a cell code of `precision` characters.

    Each bit halves either the longitude range (even bits) or the latitude
    range (odd bits). A value sitting exactly on a midpoint goes to the upper half.
    """
    validate_coordinate(latitude, longitude)
    validate_precision(precision)

    lat_min, lat_max = -90.0, 90.0
    lon_min, lon_max = -180.0, 180.0

    geohash: List[str] = []
    bit = 0
    char_bits = 0

    while len(geohash) < precision:
        if bit % 2 == 0:
            mid = (lon_min + lon_max) / 2
            if longitude >= mid:
                char_bits |= 1 << (4 - bit % 5)
                lon_min = mid
            else:
                lon_max = mid
        else:
            mid = (lat_min + lat_max) / 2
            if latitude >= mid:
                char_bits |= 1 << (4 - bit % 5)
                lat_min = mid
            else:
                lat_max = mid
        bit += 1

        # every 5 bits make one character
        if bit % 5 == 0:
            geohash.append(BASE32[char_bits])
            char_bits = 0

    return "".join(geohash)


def decode_bounds(geohash: str) -> Bounds:
    """
    Narrow the full lat/lon ranges character by character and return the
    final bounding box as (lat_min, lat_max, lon_min, lon_max).
    """
    if not geohash:
        raise ValueError("cannot decode an empty cell code")

    lat_min, lat_max = -90.0, 90.0
    lon_min, lon_max = -180.0, 180.0
    is_longitude = True

    for char in geohash:
        if char not in _BASE32_INDEX:
            raise ValueError(f"invalid cell code character {char!r} in {geohash!r}")
        char_bits = _BASE32_INDEX[char]

        for bit in range(5):
            upper_half = bool(char_bits & (1 << (4 - bit)))
            if is_longitude:
                mid = (lon_min + lon_max) / 2
                if upper_half:
                    lon_min = mid
                else:
                    lon_max = mid
            else:
                mid = (lat_min + lat_max) / 2
                if upper_half:
                    lat_min = mid
                else:
                    lat_max = mid
            is_longitude = not is_longitude

    return lat_min, lat_max, lon_min, lon_max


def decode(geohash: str) -> LatLon:
    """
    Returns the centre of the cell as (lat, lon).
    Not an exact inverse of encode: the error is bounded by half the cell size per axis.
    """
    lat_min, lat_max, lon_min, lon_max = decode_bounds(geohash)
    return (lat_min + lat_max) / 2, (lon_min + lon_max) / 2


def neighbors(geohash: str) -> List[str]:
    """
    Approximate neighbour set: drop the last character and append every
    alphabet symbol, i.e. all siblings under the same parent cell (the code
    itself included).

    These are NOT the true geographic 8-neighbours. Cells across a parent
    boundary are missed and far siblings are included. Callers widen the
    search with a short prefix query and rely on the distance check.
    """
    if len(geohash) <= 1:
        return [geohash]

    parent = geohash[:-1]
    return [parent + char for char in BASE32]
