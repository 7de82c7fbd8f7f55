# MIT License (see LICENSE)
"""
Codec for the planning-scene world and its occupancy map.

YAML layout:
---------------------
world:
  collision_objects: [collision_object, ...]   # optional
  octomap:                                     # optional
    header: {...}
    origin: pose                               # default zero pose
    octomap:
      header: {...}
      binary: bool                             # default false
      id: string                               # required, e.g. OcTree
      resolution: float                        # required
      data: base64 string                      # default ""

The octree payload is opaque. It is carried as standard padded base64
text so that any byte sequence, including an empty one, survives the
YAML round trip unchanged.
"""
from __future__ import annotations
import base64
import binascii
from typing import Any

from ..errors import ErrorKind, FormatError, NodePath
from ..msgs.geometry import Header, Pose
from ..msgs.scene import Octomap, OctomapWithPose, PlanningSceneWorld
from . import nodes
from .geometry import header_to_yaml, optional_header, pose_from_yaml, pose_to_yaml
from .scene import collision_object_from_yaml, collision_object_to_yaml


# -----------------------------------------------------------------------------
# Binary payload
# -----------------------------------------------------------------------------

def payload_from_yaml(node: Any, path: NodePath) -> bytes:
    """
    Decode base64 payload text to bytes.

    Whitespace inside the text (e.g. from a folded YAML block) is ignored.

    Raises:
        FormatError: TypeMismatch if the node is not a string,
            PayloadCorrupt if the text is not valid padded base64.
    """
    text = "".join(nodes.as_str(node, path).split())
    if len(text) % 4 != 0:
        raise FormatError(
            ErrorKind.PAYLOAD_CORRUPT, path,
            f"base64 text length {len(text)} is not a multiple of 4",
        )
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatError(ErrorKind.PAYLOAD_CORRUPT, path, f"invalid base64 payload: {e}") from e


def payload_to_yaml(data: bytes) -> str:
    """Encode payload bytes as padded base64 text."""
    return base64.b64encode(data).decode("ascii")


# -----------------------------------------------------------------------------
# Octomap
# -----------------------------------------------------------------------------

def octomap_from_yaml(node: Any, path: NodePath = ("Octomap",)) -> Octomap:
    """
    Decode an Octomap.

    Args:
        node: Mapping with required `id` and `resolution`.
        path: Structural path of `node`, for error reporting.

    Raises:
        FormatError: PayloadCorrupt if `data` is not valid base64 text.
    """
    data = nodes.as_mapping(node, path)
    return Octomap(
        header=optional_header(data, path),
        binary=nodes.field(data, "binary", path, nodes.as_bool, False),
        id=nodes.required_field(data, "id", path, nodes.as_str),
        resolution=nodes.required_field(data, "resolution", path, nodes.as_float),
        data=nodes.field(data, "data", path, payload_from_yaml, b""),
    )


def octomap_to_yaml(m: Octomap) -> dict[str, Any]:
    """Serialize an Octomap. `binary`, `id`, `resolution` and `data` are always written."""
    result: dict[str, Any] = {}
    if m.header != Header():
        result["header"] = header_to_yaml(m.header)
    result["binary"] = m.binary
    result["id"] = m.id
    result["resolution"] = m.resolution
    result["data"] = payload_to_yaml(m.data)
    return result


def octomap_with_pose_from_yaml(
    node: Any, path: NodePath = ("OctomapWithPose",)
) -> OctomapWithPose:
    """Decode an OctomapWithPose; only `octomap` is required."""
    data = nodes.as_mapping(node, path)
    return OctomapWithPose(
        header=optional_header(data, path),
        origin=nodes.field(data, "origin", path, pose_from_yaml, Pose()),
        octomap=nodes.required_field(data, "octomap", path, octomap_from_yaml),
    )


def octomap_with_pose_to_yaml(m: OctomapWithPose) -> dict[str, Any]:
    result: dict[str, Any] = {}
    if m.header != Header():
        result["header"] = header_to_yaml(m.header)
    if m.origin != Pose():
        result["origin"] = pose_to_yaml(m.origin)
    result["octomap"] = octomap_to_yaml(m.octomap)
    return result


# -----------------------------------------------------------------------------
# World
# -----------------------------------------------------------------------------

def planning_scene_world_from_yaml(
    node: Any, path: NodePath = ("PlanningSceneWorld",)
) -> PlanningSceneWorld:
    """Decode the world. An absent octomap yields None."""
    data = nodes.as_mapping(node, path)
    return PlanningSceneWorld(
        collision_objects=nodes.field(
            data, "collision_objects", path, nodes.sequence_of(collision_object_from_yaml), ()
        ),
        octomap=nodes.field(data, "octomap", path, octomap_with_pose_from_yaml, None),
    )


def planning_scene_world_to_yaml(w: PlanningSceneWorld) -> dict[str, Any]:
    """Serialize the world, leaving out empty object lists and a missing octomap."""
    result: dict[str, Any] = {}
    if w.collision_objects:
        result["collision_objects"] = [collision_object_to_yaml(o) for o in w.collision_objects]
    if w.octomap is not None:
        result["octomap"] = octomap_with_pose_to_yaml(w.octomap)
    return result
