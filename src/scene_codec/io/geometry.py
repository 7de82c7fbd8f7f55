# MIT License (see LICENSE)
"""
Codec for headers, poses, transforms, twists and wrenches.

YAML layout:
---------------------
header:                      # every field optional
  seq: int                   # default 0
  stamp: {secs: int, nsecs: int}
  frame_id: string           # default ""

pose:
  position: [x, y, z]        # required
  orientation: [x, y, z, w]  # required

transform_stamped:
  header: {...}              # optional, absent means unstamped
  child_frame_id: string     # required
  transform:
    translation: [x, y, z]
    rotation: [x, y, z, w]

twist:  {linear: [x, y, z], angular: [x, y, z]}
wrench: {force: [x, y, z], torque: [x, y, z]}
"""
from __future__ import annotations
from typing import Any

from ..errors import NodePath
from ..msgs.geometry import Header, Pose, Time, Transform, TransformStamped, Twist, Wrench
from . import nodes
from .primitives import (
    point_from_yaml,
    point_to_yaml,
    quaternion_from_yaml,
    quaternion_to_yaml,
    time_from_yaml,
    time_to_yaml,
    vector3_from_yaml,
    vector3_to_yaml,
)


def header_from_yaml(node: Any, path: NodePath = ("Header",)) -> Header:
    """Decode a Header. Every field is optional."""
    data = nodes.as_mapping(node, path)
    return Header(
        seq=nodes.field(data, "seq", path, nodes.as_int, 0),
        stamp=nodes.field(data, "stamp", path, time_from_yaml, Time()),
        frame_id=nodes.field(data, "frame_id", path, nodes.as_str, ""),
    )


def header_to_yaml(h: Header) -> dict[str, Any]:
    """Serialize a Header, leaving out zero-valued fields."""
    result: dict[str, Any] = {}
    if h.seq != 0:
        result["seq"] = h.seq
    if h.stamp != Time():
        result["stamp"] = time_to_yaml(h.stamp)
    if h.frame_id:
        result["frame_id"] = h.frame_id
    return result


def optional_header(data, path: NodePath) -> Header:
    """Decode the `header` field of a stamped record; absent means unstamped."""
    return nodes.field(data, "header", path, header_from_yaml, Header())


def pose_from_yaml(node: Any, path: NodePath = ("Pose",)) -> Pose:
    """
    Decode a Pose.

    Args:
        node: Mapping with required `position` and `orientation`.
        path: Structural path of `node`, for error reporting.

    Returns:
        Pose record.
    """
    data = nodes.as_mapping(node, path)
    return Pose(
        position=nodes.required_field(data, "position", path, point_from_yaml),
        orientation=nodes.required_field(data, "orientation", path, quaternion_from_yaml),
    )


def pose_to_yaml(p: Pose) -> dict[str, Any]:
    """Serialize a Pose as a position / orientation mapping."""
    return {
        "position": point_to_yaml(p.position),
        "orientation": quaternion_to_yaml(p.orientation),
    }


def transform_from_yaml(node: Any, path: NodePath = ("Transform",)) -> Transform:
    """Decode a Transform; `translation` and `rotation` are required."""
    data = nodes.as_mapping(node, path)
    return Transform(
        translation=nodes.required_field(data, "translation", path, vector3_from_yaml),
        rotation=nodes.required_field(data, "rotation", path, quaternion_from_yaml),
    )


def transform_to_yaml(t: Transform) -> dict[str, Any]:
    """Serialize a Transform as a translation / rotation mapping."""
    return {
        "translation": vector3_to_yaml(t.translation),
        "rotation": quaternion_to_yaml(t.rotation),
    }


def transform_stamped_from_yaml(
    node: Any, path: NodePath = ("TransformStamped",)
) -> TransformStamped:
    """Decode a TransformStamped. An absent header means unstamped."""
    data = nodes.as_mapping(node, path)
    return TransformStamped(
        header=optional_header(data, path),
        child_frame_id=nodes.required_field(data, "child_frame_id", path, nodes.as_str),
        transform=nodes.required_field(data, "transform", path, transform_from_yaml),
    )


def transform_stamped_to_yaml(t: TransformStamped) -> dict[str, Any]:
    """Serialize a TransformStamped, leaving out a default header."""
    result: dict[str, Any] = {}
    if t.header != Header():
        result["header"] = header_to_yaml(t.header)
    result["child_frame_id"] = t.child_frame_id
    result["transform"] = transform_to_yaml(t.transform)
    return result


def twist_from_yaml(node: Any, path: NodePath = ("Twist",)) -> Twist:
    """Decode a Twist; `linear` and `angular` are required."""
    data = nodes.as_mapping(node, path)
    return Twist(
        linear=nodes.required_field(data, "linear", path, vector3_from_yaml),
        angular=nodes.required_field(data, "angular", path, vector3_from_yaml),
    )


def twist_to_yaml(t: Twist) -> dict[str, Any]:
    """Serialize a Twist as a linear / angular mapping."""
    return {"linear": vector3_to_yaml(t.linear), "angular": vector3_to_yaml(t.angular)}


def wrench_from_yaml(node: Any, path: NodePath = ("Wrench",)) -> Wrench:
    """Decode a Wrench; `force` and `torque` are required."""
    data = nodes.as_mapping(node, path)
    return Wrench(
        force=nodes.required_field(data, "force", path, vector3_from_yaml),
        torque=nodes.required_field(data, "torque", path, vector3_from_yaml),
    )


def wrench_to_yaml(w: Wrench) -> dict[str, Any]:
    """Serialize a Wrench as a force / torque mapping."""
    return {"force": vector3_to_yaml(w.force), "torque": vector3_to_yaml(w.torque)}
