import pytest

from geo.geohash import BASE32, decode, decode_bounds, encode, neighbors


def test_encode_known_values():
    """
    Standard geohash reference points.
    """
    assert encode(57.64911, 10.40744, 11) == "u4pruydqqvj"
    assert encode(0.0, 0.0, 1) == "s"
    assert encode(-90.0, -180.0, 4) == "0000"


def test_encode_default_precision_is_six(bangalore):
    code = encode(*bangalore)
    assert len(code) == 6
    assert all(char in BASE32 for char in code)


def test_longer_precision_extends_shorter_code(bangalore):
    assert encode(*bangalore, 9).startswith(encode(*bangalore, 5))


@pytest.mark.parametrize("lat, lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.1), (0.0, -181.0)])
def test_encode_rejects_out_of_range_coordinates(lat, lon):
    with pytest.raises(ValueError):
        encode(lat, lon)


@pytest.mark.parametrize("precision", [0, 13])
def test_encode_rejects_bad_precision(precision):
    with pytest.raises(ValueError):
        encode(10.0, 10.0, precision)


@pytest.mark.parametrize("lat, lon", [(12.9716, 77.5946), (-33.8688, 151.2093), (40.7128, -74.0060), (89.9, 179.9)])
def test_decode_lies_inside_encoded_cell(lat, lon):
    for precision in (1, 4, 6, 9, 12):
        code = encode(lat, lon, precision)
        lat_min, lat_max, lon_min, lon_max = decode_bounds(code)

        # 1. The original point sits in the cell it was encoded to
        assert lat_min <= lat <= lat_max
        assert lon_min <= lon <= lon_max

        # 2. The decoded centre sits in that same cell
        centre_lat, centre_lon = decode(code)
        assert lat_min <= centre_lat <= lat_max
        assert lon_min <= centre_lon <= lon_max


def test_decode_error_shrinks_with_precision():
    lat, lon = 40.7128, -74.0060
    errors = []
    for precision in range(1, 13):
        centre_lat, centre_lon = decode(encode(lat, lon, precision))
        lat_min, lat_max, lon_min, lon_max = decode_bounds(encode(lat, lon, precision))
        errors.append(max(lat_max - lat_min, lon_max - lon_min))
        assert abs(centre_lat - lat) <= (lat_max - lat_min) / 2
        assert abs(centre_lon - lon) <= (lon_max - lon_min) / 2

    assert errors == sorted(errors, reverse=True)
    assert len(set(errors)) == len(errors)


def test_decode_rejects_invalid_characters():
    with pytest.raises(ValueError):
        decode("abc")  # 'a' is not in the alphabet
    with pytest.raises(ValueError):
        decode("")


def test_neighbors_are_siblings_under_same_parent():
    result = neighbors("tdr1vz")

    assert len(result) == 32
    assert "tdr1vz" in result
    assert all(code.startswith("tdr1v") and len(code) == 6 for code in result)
    assert [code[-1] for code in result] == list(BASE32)


def test_neighbors_of_single_character_is_itself():
    assert neighbors("t") == ["t"]
