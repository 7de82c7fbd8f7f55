# MIT License (see LICENSE)
"""
Type registry: the encode/decode pair of every record type.

The table is built once, at import, from an explicit ordered list of
registrations and is read-only afterwards. Callers that have located a
node in a document themselves can decode it by type:

    from scene_codec.io.registry import decode, encode
    scene = decode(PlanningScene, document["scene"])
    node = encode(scene)

Types can also be looked up by class name ("PlanningScene") or message
type tag ("moveit_msgs/PlanningScene").
"""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Any, Callable, NamedTuple, Optional, Union

from ..errors import NodePath
from ..msgs import geometry as g
from ..msgs import scene as sc
from ..msgs import sensor as se
from ..msgs import shapes as sh
from . import aggregate, geometry, primitives, robot_state, scene, shapes, world

logger = logging.getLogger("scene_codec.registry")


class Codec(NamedTuple):
    """Matched encode/decode pair for one record type."""
    type: type
    encode: Callable[[Any], Any]
    decode: Callable[[Any, NodePath], Any]


# Leaves first, aggregates last.
_REGISTRATIONS: tuple[Codec, ...] = (
    # Primitive Codec
    Codec(g.Time, primitives.time_to_yaml, primitives.time_from_yaml),
    Codec(g.Duration, primitives.duration_to_yaml, primitives.duration_from_yaml),
    Codec(g.Vector3, primitives.vector3_to_yaml, primitives.vector3_from_yaml),
    Codec(g.Point, primitives.point_to_yaml, primitives.point_from_yaml),
    Codec(g.Quaternion, primitives.quaternion_to_yaml, primitives.quaternion_from_yaml),
    Codec(g.ColorRGBA, primitives.color_to_yaml, primitives.color_from_yaml),
    # Geometric Composite Codec
    Codec(g.Header, geometry.header_to_yaml, geometry.header_from_yaml),
    Codec(g.Pose, geometry.pose_to_yaml, geometry.pose_from_yaml),
    Codec(g.Transform, geometry.transform_to_yaml, geometry.transform_from_yaml),
    Codec(g.TransformStamped, geometry.transform_stamped_to_yaml, geometry.transform_stamped_from_yaml),
    Codec(g.Twist, geometry.twist_to_yaml, geometry.twist_from_yaml),
    Codec(g.Wrench, geometry.wrench_to_yaml, geometry.wrench_from_yaml),
    # Robot-State Codec
    Codec(se.JointState, robot_state.joint_state_to_yaml, robot_state.joint_state_from_yaml),
    Codec(se.MultiDOFJointState, robot_state.multi_dof_joint_state_to_yaml,
          robot_state.multi_dof_joint_state_from_yaml),
    Codec(se.JointTrajectoryPoint, robot_state.joint_trajectory_point_to_yaml,
          robot_state.joint_trajectory_point_from_yaml),
    Codec(se.JointTrajectory, robot_state.joint_trajectory_to_yaml,
          robot_state.joint_trajectory_from_yaml),
    # Shape & Mesh Codec
    Codec(sh.SolidPrimitive, shapes.solid_primitive_to_yaml, shapes.solid_primitive_from_yaml),
    Codec(sh.MeshTriangle, shapes.mesh_triangle_to_yaml, shapes.mesh_triangle_from_yaml),
    Codec(sh.Mesh, shapes.mesh_to_yaml, shapes.mesh_from_yaml),
    Codec(sh.Plane, shapes.plane_to_yaml, shapes.plane_from_yaml),
    # Scene-Composition Codec
    Codec(sc.ObjectType, scene.object_type_to_yaml, scene.object_type_from_yaml),
    Codec(sc.CollisionObject, scene.collision_object_to_yaml, scene.collision_object_from_yaml),
    Codec(sc.AttachedCollisionObject, scene.attached_collision_object_to_yaml,
          scene.attached_collision_object_from_yaml),
    Codec(sc.AllowedCollisionEntry, scene.allowed_collision_entry_to_yaml,
          scene.allowed_collision_entry_from_yaml),
    Codec(sc.AllowedCollisionMatrix, scene.allowed_collision_matrix_to_yaml,
          scene.allowed_collision_matrix_from_yaml),
    Codec(sc.LinkPadding, scene.link_padding_to_yaml, scene.link_padding_from_yaml),
    Codec(sc.LinkScale, scene.link_scale_to_yaml, scene.link_scale_from_yaml),
    Codec(sc.ObjectColor, scene.object_color_to_yaml, scene.object_color_from_yaml),
    # World & Map Codec
    Codec(sc.Octomap, world.octomap_to_yaml, world.octomap_from_yaml),
    Codec(sc.OctomapWithPose, world.octomap_with_pose_to_yaml, world.octomap_with_pose_from_yaml),
    Codec(sc.PlanningSceneWorld, world.planning_scene_world_to_yaml,
          world.planning_scene_world_from_yaml),
    # Aggregate Codec
    Codec(sc.RobotState, aggregate.robot_state_to_yaml, aggregate.robot_state_from_yaml),
    Codec(sc.PlanningScene, aggregate.planning_scene_to_yaml, aggregate.planning_scene_from_yaml),
)


def _build_tables(
    registrations: tuple[Codec, ...],
) -> tuple[MappingProxyType, MappingProxyType]:
    by_type: dict[type, Codec] = {}
    by_tag: dict[str, Codec] = {}
    for codec in registrations:
        if codec.type in by_type:
            raise ValueError(f"Duplicate codec registration for {codec.type.__name__}")
        by_type[codec.type] = codec
        by_tag[codec.type.__name__] = codec
        by_tag[codec.type.__msgtype__] = codec
    return MappingProxyType(by_type), MappingProxyType(by_tag)


_BY_TYPE, _BY_TAG = _build_tables(_REGISTRATIONS)

EntityRef = Union[type, str]


def registered_types() -> tuple[type, ...]:
    """All registered record types, in registration order."""
    return tuple(codec.type for codec in _REGISTRATIONS)


def codec_for(entity: EntityRef) -> Codec:
    """
    Look up the codec of a record type.

    Args:
        entity: The record class, its name or its message type tag.

    Raises:
        KeyError: If no codec is registered for `entity`.
    """
    table = _BY_TAG if isinstance(entity, str) else _BY_TYPE
    try:
        return table[entity]
    except KeyError:
        name = entity if isinstance(entity, str) else getattr(entity, "__name__", repr(entity))
        raise KeyError(f"No codec registered for '{name}'") from None


def encode(record: Any) -> Any:
    """
    Encode any registered record into a document node.

    Raises:
        TypeError: If `record` is not an instance of a registered type.
    """
    codec = _BY_TYPE.get(type(record))
    if codec is None:
        raise TypeError(f"Cannot encode object of type {type(record).__name__}")
    return codec.encode(record)


def decode(entity: EntityRef, node: Any, path: Optional[NodePath] = None) -> Any:
    """
    Decode a document node into a record of the given type.

    Args:
        entity: The record class, its name or its message type tag.
        node: The document node to read. It is not modified.
        path: Structural path of `node`, for error reporting. Defaults to
              the record type name, i.e. `node` is treated as a root.

    Raises:
        KeyError: If no codec is registered for `entity`.
        FormatError: If the node does not describe a valid record.
    """
    codec = codec_for(entity)
    if path is None:
        path = (codec.type.__name__,)
        logger.debug("Decoding %s document", codec.type.__name__)
    return codec.decode(node, path)
