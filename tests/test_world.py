import numpy as np
import pytest
from scene_codec.errors import ErrorKind, FormatError
from scene_codec.msgs import (
    Header,
    Octomap,
    OctomapWithPose,
    PlanningSceneWorld,
    Point,
    Pose,
    Quaternion,
)
from scene_codec.io.world import (
    octomap_from_yaml,
    octomap_to_yaml,
    octomap_with_pose_from_yaml,
    octomap_with_pose_to_yaml,
    planning_scene_world_from_yaml,
    planning_scene_world_to_yaml,
)


@pytest.mark.parametrize("payload", [
    b"",
    bytes(range(256)),
    b"\x00\x00\x00",
    b"\xff" * 1001,
])
def test_octomap_payload_is_exact(payload):
    """Any byte payload, including empty and all 256 byte values, survives unchanged."""
    m = Octomap(binary=True, id="OcTree", resolution=0.05, data=payload)
    node = octomap_to_yaml(m)
    assert isinstance(node["data"], str)
    decoded = octomap_from_yaml(node)
    assert decoded.data == payload
    assert decoded == m


def test_octomap_layout():
    m = Octomap(header=Header(frame_id="map"), id="ColorOcTree", resolution=0.1, data=b"\x01\x02")
    assert octomap_to_yaml(m) == {
        "header": {"frame_id": "map"},
        "binary": False,
        "id": "ColorOcTree",
        "resolution": 0.1,
        "data": "AQI=",
    }


def test_octomap_data_from_signed_array():
    """The message stores int8 values; negative entries map onto 128-255."""
    m = Octomap(id="OcTree", resolution=0.1, data=np.array([-1, 0, 127, -128], dtype=np.int8))
    assert m.data == b"\xff\x00\x7f\x80"


def test_octomap_payload_ignores_whitespace():
    node = {"id": "OcTree", "resolution": 0.1, "data": "AAEC\nAwQF\n"}
    assert octomap_from_yaml(node).data == bytes(range(6))


@pytest.mark.parametrize("text", ["AQI", "AQ=I", "A$I=", "AQI=="])
def test_octomap_corrupt_payload(text):
    node = {"id": "OcTree", "resolution": 0.1, "data": text}
    with pytest.raises(FormatError) as exc:
        octomap_from_yaml(node)
    assert exc.value.kind is ErrorKind.PAYLOAD_CORRUPT
    assert exc.value.path == ("Octomap", "data")


def test_octomap_payload_must_be_text():
    node = {"id": "OcTree", "resolution": 0.1, "data": [1, 2, 3]}
    with pytest.raises(FormatError) as exc:
        octomap_from_yaml(node)
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH


def test_octomap_required_fields():
    with pytest.raises(FormatError) as exc:
        octomap_from_yaml({"id": "OcTree"})
    assert exc.value.kind is ErrorKind.MISSING_FIELD
    assert exc.value.path == ("Octomap", "resolution")


def test_octomap_with_pose():
    posed = OctomapWithPose(
        header=Header(frame_id="world"),
        origin=Pose(Point(0, 0, 1), Quaternion(0, 0, 0, 1)),
        octomap=Octomap(id="OcTree", resolution=0.02, data=b"abc"),
    )
    assert octomap_with_pose_from_yaml(octomap_with_pose_to_yaml(posed)) == posed


def test_world_without_octomap():
    world = planning_scene_world_from_yaml({"collision_objects": [{"id": "a"}]})
    assert world.octomap is None
    assert [o.id for o in world.collision_objects] == ["a"]
    assert planning_scene_world_to_yaml(world) == {"collision_objects": [{"id": "a"}]}


def test_empty_world():
    assert planning_scene_world_from_yaml({}) == PlanningSceneWorld()
    assert planning_scene_world_to_yaml(PlanningSceneWorld()) == {}


def test_world_with_octomap_error_path():
    node = {"octomap": {"octomap": {"id": "OcTree", "resolution": 0.1, "data": "!!"}}}
    with pytest.raises(FormatError) as exc:
        planning_scene_world_from_yaml(node)
    assert exc.value.path == ("PlanningSceneWorld", "octomap", "octomap", "data")
