#Marks geo as a package.
#Re-exports the geocoding, distance and spatial index helpers so other modules
#import from geo without knowing internal file names.
#No business logic.

from .geohash import encode, decode, decode_bounds, neighbors, BASE32
from .distance import haversine_km, EARTH_RADIUS_KM
from .spatial_index import GeohashTrie

__all__ = [
           "encode",
             "decode",
             "decode_bounds",
             "neighbors",
             "BASE32",
             "haversine_km",
             "EARTH_RADIUS_KM",
             "GeohashTrie",
             ]
