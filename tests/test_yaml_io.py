import pytest
import yaml
from scene_codec import dumps, loads
from scene_codec.errors import ErrorKind, FormatError
from scene_codec.msgs import (
    Allowance,
    CollisionObject,
    Octomap,
    PlanningScene,
    Pose,
    SolidPrimitive,
)

SCENE_YAML = """\
name: pick_and_place
robot_state:
  joint_state:
    header: {frame_id: base_link}
    name: [shoulder, elbow, wrist]
    position: [0.0, 1.57, -0.3]
  attached_collision_objects:
    - link_name: gripper
      object:
        id: cup
        primitives:
          - {type: cylinder, dimensions: [0.12, 0.04]}
        primitive_poses:
          - {position: [0, 0, 0.06], orientation: [0, 0, 0, 1]}
      touch_links: [left_finger, right_finger]
robot_model_name: ur5
fixed_frame_transforms:
  - header: {frame_id: world, stamp: {secs: 1700000000, nsecs: 5}}
    child_frame_id: base_link
    transform: {translation: [0, 0, 0.8], rotation: [0, 0, 0, 1]}
allowed_collision_matrix:
  entry_names: [gripper, table]
  entry_values:
    - [true, false]
    - [false, ~]
link_padding:
  - {link_name: gripper, padding: 0.01}
object_colors:
  - {id: table, color: [0.6, 0.4, 0.2, 1.0]}
world:
  collision_objects:
    - header: {frame_id: world}
      id: table
      primitives:
        - type: box
          dimensions: [1.2, 0.8, 0.05]
      primitive_poses:
        - position: {x: 0.6, y: 0.0, z: 0.75}
          orientation: {x: 0, y: 0, z: 0, w: 1}
      planes:
        - [0, 0, 1, 0]
      plane_poses:
        - {position: [0, 0, 0], orientation: [0, 0, 0, 1]}
  octomap:
    header: {frame_id: world}
    origin: {position: [0, 0, 0], orientation: [0, 0, 0, 1]}
    octomap:
      binary: true
      id: OcTree
      resolution: 0.05
      data: AAECAwQFBgc=
is_diff: false
"""


def test_load_full_scene():
    scene = loads(SCENE_YAML, PlanningScene)

    assert scene.name == "pick_and_place"
    assert scene.robot_state.joint_state.position == (0.0, 1.57, -0.3)
    cup = scene.robot_state.attached_collision_objects[0].object
    assert cup.primitives == (SolidPrimitive.cylinder(0.12, 0.04),)

    assert scene.fixed_frame_transforms[0].header.stamp.secs == 1700000000
    assert scene.fixed_frame_transforms[0].header.stamp.nsecs == 5
    assert scene.allowed_collision_matrix.get_entry("table", "table") is Allowance.UNSPECIFIED

    table = scene.world.collision_objects[0]
    assert table.primitive_poses[0].position.x == 0.6
    assert len(table.planes) == 1
    assert scene.world.octomap.octomap.data == bytes(range(8))
    assert scene.is_diff is False


def test_dump_load_is_identity():
    scene = loads(SCENE_YAML, PlanningScene)
    text = dumps(scene)
    assert loads(text, PlanningScene) == scene
    assert dumps(loads(text, PlanningScene)) == text


def test_dump_keeps_field_order_and_flow_vectors():
    text = dumps(loads(SCENE_YAML, PlanningScene))
    assert text.startswith("name: pick_and_place\nrobot_state:")
    assert text.rstrip().endswith("is_diff: false")
    assert "translation: [0.0, 0.0, 0.8]" in text
    assert "data: AAECAwQFBgc=" in text


def test_dump_is_plain_yaml():
    """The output only uses standard YAML tags."""
    node = yaml.safe_load(dumps(CollisionObject(id="box", primitives=[SolidPrimitive.sphere(0.1)],
                                                primitive_poses=[Pose()])))
    assert node["primitives"] == [{"type": "sphere", "dimensions": [0.1]}]


def test_load_by_tag():
    m = loads("id: OcTree\nresolution: 0.1\ndata: ''\n", "octomap_msgs/Octomap")
    assert m == Octomap(id="OcTree", resolution=0.1)


def test_load_empty_document():
    """An empty document is a null node, not a mapping."""
    with pytest.raises(FormatError) as exc:
        loads("", PlanningScene)
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH
    assert exc.value.path == ("PlanningScene",)


def test_load_invalid_yaml():
    with pytest.raises(yaml.YAMLError):
        loads("name: [unclosed", PlanningScene)


def test_load_reports_nested_path():
    text = SCENE_YAML.replace("[1.2, 0.8, 0.05]", "[1.2, 0.8]")
    with pytest.raises(FormatError) as exc:
        loads(text, PlanningScene)
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH
    assert str(exc.value).startswith(
        "PlanningScene.world.collision_objects[0].primitives[0].dimensions:"
    )
