import pytest
from scene_codec.errors import ErrorKind, FormatError
from scene_codec.msgs import (
    Header,
    Point,
    Pose,
    Quaternion,
    Time,
    Transform,
    TransformStamped,
    Twist,
    Vector3,
    Wrench,
)
from scene_codec.io.geometry import (
    header_from_yaml,
    header_to_yaml,
    pose_from_yaml,
    pose_to_yaml,
    transform_stamped_from_yaml,
    transform_stamped_to_yaml,
    twist_from_yaml,
    wrench_from_yaml,
    wrench_to_yaml,
)


def test_header_defaults_and_compact_output():
    """All header fields are optional and zero values are not written."""
    assert header_from_yaml({}) == Header()
    assert header_to_yaml(Header()) == {}

    h = Header(seq=3, stamp=Time(10, 20), frame_id="world")
    node = header_to_yaml(h)
    assert node == {"seq": 3, "stamp": {"secs": 10, "nsecs": 20}, "frame_id": "world"}
    assert header_from_yaml(node) == h


def test_header_seq_must_be_integer():
    with pytest.raises(FormatError) as exc:
        header_from_yaml({"seq": 1.5})
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH
    assert exc.value.path == ("Header", "seq")


def test_pose_layout():
    pose = Pose(Point(1.0, 2.0, 3.0), Quaternion(0.0, 0.0, 0.0, 1.0))
    node = pose_to_yaml(pose)
    assert node == {"position": [1.0, 2.0, 3.0], "orientation": [0.0, 0.0, 0.0, 1.0]}
    assert pose_from_yaml(node) == pose


def test_pose_requires_both_children():
    with pytest.raises(FormatError) as exc:
        pose_from_yaml({"position": [0, 0, 0]})
    assert exc.value.kind is ErrorKind.MISSING_FIELD
    assert exc.value.path == ("Pose", "orientation")


def test_pose_nested_error_path():
    """The error path runs from the root entity down to the offending value."""
    with pytest.raises(FormatError) as exc:
        pose_from_yaml({"position": [0, 0, "z"], "orientation": [0, 0, 0, 1]})
    assert exc.value.path == ("Pose", "position", 2)
    assert str(exc.value).startswith("Pose.position[2]:")


def test_transform_stamped_without_header_is_unstamped():
    node = {
        "child_frame_id": "camera",
        "transform": {"translation": [0.1, 0, 0.5], "rotation": [0, 0, 0, 1]},
    }
    tf = transform_stamped_from_yaml(node)
    assert tf.header == Header()
    assert tf.child_frame_id == "camera"
    assert tf.transform == Transform(Vector3(0.1, 0.0, 0.5), Quaternion(0, 0, 0, 1))
    # Unstamped transforms do not grow an empty header on the way out
    assert transform_stamped_to_yaml(tf) == node


def test_transform_stamped_with_header():
    tf = TransformStamped(
        header=Header(frame_id="base_link"),
        child_frame_id="tool",
        transform=Transform(Vector3(1, 2, 3), Quaternion(0, 0, 1, 0)),
    )
    node = transform_stamped_to_yaml(tf)
    assert node["header"] == {"frame_id": "base_link"}
    assert transform_stamped_from_yaml(node) == tf


def test_twist_and_wrench():
    tw = twist_from_yaml({"linear": [1, 0, 0], "angular": {"x": 0, "y": 0, "z": 0.5}})
    assert tw == Twist(Vector3(1, 0, 0), Vector3(0, 0, 0.5))

    w = Wrench(Vector3(0, 0, -9.81), Vector3(0.1, 0, 0))
    assert wrench_from_yaml(wrench_to_yaml(w)) == w

    with pytest.raises(FormatError) as exc:
        wrench_from_yaml({"force": [0, 0, 0]})
    assert exc.value.path == ("Wrench", "torque")
