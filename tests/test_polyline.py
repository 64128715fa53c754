# tests/test_polyline.py
import pytest

from routeline.core.errors import InvalidCoordinateError, MalformedPolylineError
from routeline.services.polyline import decode_polyline, encode_polyline

REFERENCE_ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
REFERENCE_COORDS = [[-120.2, 38.5], [-120.95, 40.7], [-126.453, 43.252]]


def assert_coords_close(actual, expected, tol=1e-9):
    assert len(actual) == len(expected)
    for (lng, lat), (exp_lng, exp_lat) in zip(actual, expected):
        assert lng == pytest.approx(exp_lng, abs=tol)
        assert lat == pytest.approx(exp_lat, abs=tol)


def test_decode_reference_vector():
    coords = decode_polyline(REFERENCE_ENCODED)
    assert_coords_close(coords, REFERENCE_COORDS)


def test_decode_empty_string():
    assert decode_polyline("") == []


def test_decode_single_pair():
    # "C" is the zig-zag encoding of +2
    coords = decode_polyline("CC")
    assert len(coords) == 1
    assert coords[0][0] == pytest.approx(0.00002, abs=1e-12)
    assert coords[0][1] == pytest.approx(0.00002, abs=1e-12)


def test_decode_negative_deltas():
    # "@" is the zig-zag encoding of -1
    coords = decode_polyline("@@")
    assert_coords_close(coords, [[-0.00001, -0.00001]])


def test_decode_uses_exact_scale_factor():
    # "?" decodes to 0 and "A" to +1
    assert decode_polyline("??") == [[0.0, 0.0]]
    assert decode_polyline("AA") == [[1e-5, 1e-5]]


def test_decode_is_idempotent():
    first = decode_polyline(REFERENCE_ENCODED)
    second = decode_polyline(REFERENCE_ENCODED)
    assert first == second
    assert first is not second


@pytest.mark.parametrize(
    "encoded",
    [
        "_",            # lone character with the continuation bit set
        "C",            # latitude without a longitude
        "CCC",          # trailing incomplete pair
        "CC_",          # truncated value after a full pair
        "C_",           # longitude truncated
        REFERENCE_ENCODED[:-1],
    ],
)
def test_decode_rejects_truncated_input(encoded):
    with pytest.raises(MalformedPolylineError):
        decode_polyline(encoded)


@pytest.mark.parametrize("encoded", ["C C", "CC\n", "Cé"])
def test_decode_rejects_characters_outside_alphabet(encoded):
    with pytest.raises(MalformedPolylineError) as excinfo:
        decode_polyline(encoded)
    assert "outside the polyline alphabet" in str(excinfo.value)


def test_malformed_error_reports_index():
    with pytest.raises(MalformedPolylineError) as excinfo:
        decode_polyline("CC_")
    assert excinfo.value.index == 3
    assert isinstance(excinfo.value, ValueError)


def test_encode_reference_vector():
    assert encode_polyline(REFERENCE_COORDS) == REFERENCE_ENCODED


def test_encode_empty():
    assert encode_polyline([]) == ""


def test_round_trip_within_tolerance():
    route = [
        [9.19, 45.4642],
        [9.2213, 45.47201],
        [9.25, 45.48],
        [-0.12765, 51.50735],
        [151.20929, -33.86882],
    ]
    decoded = decode_polyline(encode_polyline(route))
    assert_coords_close(decoded, route, tol=1e-5)


def test_round_trip_precision_six():
    route = [[13.388860, 52.517037], [13.397634, 52.529407], [13.428555, 52.523219]]
    encoded = encode_polyline(route, precision=6)
    assert_coords_close(decode_polyline(encoded, precision=6), route, tol=1e-6)
    # Same string read at precision 5 lands ten times further out
    assert decode_polyline(encoded)[0][0] == pytest.approx(133.8886, abs=1e-6)


def test_decode_rejects_oversized_value():
    # Every "~" carries the continuation bit; the groups never fit a float
    encoded = ("~" * 250 + "?") * 2
    with pytest.raises(MalformedPolylineError) as excinfo:
        decode_polyline(encoded)
    assert "value out of range" in str(excinfo.value)


def test_decode_accepts_widest_value():
    # Thirteen groups is the widest delta the decoder takes
    coords = decode_polyline("~" * 12 + "?" + "?")
    assert len(coords) == 1
    assert coords[0][0] == 0.0


@pytest.mark.parametrize("func, arg", [(decode_polyline, "CC"), (encode_polyline, [[1.0, 2.0]])])
def test_negative_precision_rejected(func, arg):
    with pytest.raises(ValueError) as excinfo:
        func(arg, precision=-1)
    assert "precision must be a non-negative integer" in str(excinfo.value)


@pytest.mark.parametrize("coord", [[float("nan"), 1.0], [1.0, float("inf")], [float("-inf"), 0.0]])
def test_encode_rejects_non_finite(coord):
    with pytest.raises(InvalidCoordinateError) as excinfo:
        encode_polyline([[0.0, 0.0], coord])
    assert "coordinate 1 is not a finite number" in str(excinfo.value)
