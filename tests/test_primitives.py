import numpy as np
import pytest
from scene_codec.errors import ErrorKind, FormatError
from scene_codec.msgs import ColorRGBA, Duration, Point, Quaternion, Time, Vector3
from scene_codec.io.primitives import (
    color_from_yaml,
    color_to_yaml,
    duration_from_yaml,
    duration_to_yaml,
    point_from_yaml,
    quaternion_from_yaml,
    quaternion_to_yaml,
    time_from_yaml,
    time_to_yaml,
    vector3_from_yaml,
    vector3_to_yaml,
)


def test_vector_sequence_form():
    v = vector3_from_yaml([1, 2.5, -3])
    assert v == Vector3(1.0, 2.5, -3.0)
    assert isinstance(v.x, float)
    assert vector3_to_yaml(v) == [1.0, 2.5, -3.0]


def test_vector_mapping_form():
    assert point_from_yaml({"x": 0.1, "y": 0.2, "z": 0.3}) == Point(0.1, 0.2, 0.3)


def test_quaternion_is_not_normalized():
    """Non-unit quaternions are transported as-is."""
    q = quaternion_from_yaml([0.0, 0.0, 2.0, 2.0])
    assert q == Quaternion(0.0, 0.0, 2.0, 2.0)
    assert quaternion_to_yaml(q) == [0.0, 0.0, 2.0, 2.0]


def test_color_round_trip():
    c = ColorRGBA(1.0, 0.5, 0.25, 0.8)
    assert color_from_yaml(color_to_yaml(c)) == c


@pytest.mark.parametrize("node", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0]])
def test_vector_wrong_count(node):
    with pytest.raises(FormatError) as exc:
        vector3_from_yaml(node)
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH


def test_quaternion_mapping_missing_w():
    with pytest.raises(FormatError) as exc:
        quaternion_from_yaml({"x": 0, "y": 0, "z": 0})
    assert exc.value.kind is ErrorKind.MISSING_FIELD
    assert exc.value.path == ("Quaternion", "w")


@pytest.mark.parametrize("bad", ["1.0", True, None, [1.0]])
def test_non_numeric_component(bad):
    """Strings, booleans and nested nodes are never coerced to numbers."""
    with pytest.raises(FormatError) as exc:
        vector3_from_yaml([0.0, bad, 0.0])
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH
    assert exc.value.path == ("Vector3", 1)


def test_scalar_is_not_a_vector():
    with pytest.raises(FormatError) as exc:
        vector3_from_yaml(3.0)
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH


def test_numpy_scalars_accepted():
    v = vector3_from_yaml([np.float64(1.5), np.int32(2), 3])
    assert v == Vector3(1.5, 2.0, 3.0)


def test_time_epoch_scale_is_exact():
    """Epoch stamps keep nanosecond precision because they are not written as floats."""
    t = Time(1700000000, 123456789)
    node = time_to_yaml(t)
    assert node == {"secs": 1700000000, "nsecs": 123456789}
    assert time_from_yaml(node) == t


def test_time_from_float_seconds():
    assert time_from_yaml(12.5) == Time(12, 500000000)


def test_duration_as_seconds():
    d = Duration(1, 500000000)
    assert duration_to_yaml(d) == 1.5
    assert duration_from_yaml(1.5) == d
    assert duration_from_yaml(0.1) == Duration(0, 100000000)
    assert duration_from_yaml({"secs": 2, "nsecs": 5}) == Duration(2, 5)


def test_duration_negative_seconds():
    assert duration_from_yaml(-0.5) == Duration(-1, 500000000)
    assert Duration(-1, 500000000).to_sec() == pytest.approx(-0.5)


@pytest.mark.parametrize("nsecs", [-1, 1_000_000_000, 2_500_000_000])
def test_nanoseconds_out_of_range(nsecs):
    """Mapping-form stamps must already be normalized; they are never carried over."""
    for decode, root in ((time_from_yaml, "Time"), (duration_from_yaml, "Duration")):
        with pytest.raises(FormatError) as exc:
            decode({"secs": 5, "nsecs": nsecs})
        assert exc.value.kind is ErrorKind.TYPE_MISMATCH
        assert exc.value.path == (root, "nsecs")


def test_nanoseconds_upper_edge():
    assert time_from_yaml({"secs": 0, "nsecs": 999_999_999}) == Time(0, 999_999_999)


@pytest.mark.parametrize("seconds", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_seconds(seconds):
    with pytest.raises(FormatError) as exc:
        duration_from_yaml(seconds)
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH
    assert exc.value.path == ("Duration",)


def test_large_duration_is_exact():
    """A duration float64 seconds cannot hold falls back to the mapping form."""
    d = Duration(100_000_000, 1)
    node = duration_to_yaml(d)
    assert node == {"secs": 100_000_000, "nsecs": 1}
    assert duration_from_yaml(node) == d
