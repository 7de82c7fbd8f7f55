# MIT License (see LICENSE)
"""
Codec for the aggregate records: PlanningScene and RobotState.

Every sub-entity is decoded and encoded through the type registry, so this
module only states which field holds which record type.

YAML layout:
---------------------
planning_scene:
  name: string
  robot_state: robot_state
  robot_model_name: string
  fixed_frame_transforms: [transform_stamped, ...]
  allowed_collision_matrix: allowed_collision_matrix
  link_padding: [link_padding, ...]       # ordered, duplicates kept
  link_scale: [link_scale, ...]           # ordered, duplicates kept
  object_colors: [object_color, ...]      # ordered, duplicates kept
  world: planning_scene_world
  is_diff: bool                           # default false

robot_state:
  joint_state: joint_state
  multi_dof_joint_state: multi_dof_joint_state
  attached_collision_objects: [attached_collision_object, ...]
  is_diff: bool                           # default false

Every field is optional on decode and yields the zero value when absent.
On encode a sub-entity equal to its zero value is left out, while
`is_diff` is always written. An explicitly empty sub-entity therefore
reads back the same as an absent one; that asymmetry is kept on purpose
because diff overlays treat both as "no change".
"""
from __future__ import annotations
import logging
from collections import Counter
from typing import Any

from ..errors import NodePath, format_path
from ..msgs.geometry import TransformStamped
from ..msgs.scene import (
    AllowedCollisionMatrix,
    AttachedCollisionObject,
    LinkPadding,
    LinkScale,
    ObjectColor,
    PlanningScene,
    PlanningSceneWorld,
    RobotState,
)
from ..msgs.sensor import JointState, MultiDOFJointState
from . import nodes

logger = logging.getLogger("scene_codec.aggregate")


def _sub_entity(data, key: str, path: NodePath, entity_type: type, default: Any) -> Any:
    # Imported here: the registry imports this module to register its codecs.
    from .registry import decode
    if not nodes.has(data, key):
        return default
    return decode(entity_type, data[key], path + (key,))


def _sub_entities(data, key: str, path: NodePath, entity_type: type) -> tuple:
    from .registry import decode
    if not nodes.has(data, key):
        return ()
    return nodes.each(
        data[key], path + (key,), lambda item, item_path: decode(entity_type, item, item_path)
    )


def _put(result: dict[str, Any], key: str, value: Any, default: Any) -> None:
    from .registry import encode
    if value != default:
        result[key] = encode(value)


def _put_all(result: dict[str, Any], key: str, values: tuple) -> None:
    from .registry import encode
    if values:
        result[key] = [encode(v) for v in values]


def _log_duplicates(what: str, ids: list[str], path: NodePath) -> None:
    repeated = [i for i, n in Counter(ids).items() if n > 1]
    if repeated:
        logger.debug(
            "%s at %s repeats %s; lookups use the last occurrence",
            what, format_path(path), ", ".join(repeated),
        )


# -----------------------------------------------------------------------------
# RobotState
# -----------------------------------------------------------------------------

def robot_state_from_yaml(node: Any, path: NodePath = ("RobotState",)) -> RobotState:
    """
    Decode a full or diff robot state.

    Args:
        node: Mapping node; every field is optional.
        path: Structural path of `node`, for error reporting.

    Returns:
        RobotState with zero-value defaults for absent parts.
    """
    data = nodes.as_mapping(node, path)
    return RobotState(
        joint_state=_sub_entity(data, "joint_state", path, JointState, JointState()),
        multi_dof_joint_state=_sub_entity(
            data, "multi_dof_joint_state", path, MultiDOFJointState, MultiDOFJointState()
        ),
        attached_collision_objects=_sub_entities(
            data, "attached_collision_objects", path, AttachedCollisionObject
        ),
        is_diff=nodes.field(data, "is_diff", path, nodes.as_bool, False),
    )


def robot_state_to_yaml(state: RobotState) -> dict[str, Any]:
    """Serialize a robot state, leaving out zero parts; `is_diff` is always written."""
    result: dict[str, Any] = {}
    _put(result, "joint_state", state.joint_state, JointState())
    _put(result, "multi_dof_joint_state", state.multi_dof_joint_state, MultiDOFJointState())
    _put_all(result, "attached_collision_objects", state.attached_collision_objects)
    result["is_diff"] = state.is_diff
    return result


# -----------------------------------------------------------------------------
# PlanningScene
# -----------------------------------------------------------------------------

def planning_scene_from_yaml(node: Any, path: NodePath = ("PlanningScene",)) -> PlanningScene:
    """
    Decode a full or diff planning scene.

    The `is_diff` flag is transported as-is; no overlay merging happens here.
    """
    data = nodes.as_mapping(node, path)
    scene = PlanningScene(
        name=nodes.field(data, "name", path, nodes.as_str, ""),
        robot_state=_sub_entity(data, "robot_state", path, RobotState, RobotState()),
        robot_model_name=nodes.field(data, "robot_model_name", path, nodes.as_str, ""),
        fixed_frame_transforms=_sub_entities(
            data, "fixed_frame_transforms", path, TransformStamped
        ),
        allowed_collision_matrix=_sub_entity(
            data, "allowed_collision_matrix", path, AllowedCollisionMatrix, AllowedCollisionMatrix()
        ),
        link_padding=_sub_entities(data, "link_padding", path, LinkPadding),
        link_scale=_sub_entities(data, "link_scale", path, LinkScale),
        object_colors=_sub_entities(data, "object_colors", path, ObjectColor),
        world=_sub_entity(data, "world", path, PlanningSceneWorld, PlanningSceneWorld()),
        is_diff=nodes.field(data, "is_diff", path, nodes.as_bool, False),
    )
    _log_duplicates("link_padding", [p.link_name for p in scene.link_padding], path)
    _log_duplicates("link_scale", [s.link_name for s in scene.link_scale], path)
    _log_duplicates("object_colors", [c.id for c in scene.object_colors], path)
    logger.debug(
        "Decoded planning scene '%s' (%d world objects, is_diff=%s)",
        scene.name, len(scene.world.collision_objects), scene.is_diff,
    )
    return scene


def planning_scene_to_yaml(scene: PlanningScene) -> dict[str, Any]:
    """
    Serialize a planning scene.

    Only non-default sub-entities are included; `is_diff` is always written.
    """
    result: dict[str, Any] = {}
    if scene.name:
        result["name"] = scene.name
    _put(result, "robot_state", scene.robot_state, RobotState())
    if scene.robot_model_name:
        result["robot_model_name"] = scene.robot_model_name
    _put_all(result, "fixed_frame_transforms", scene.fixed_frame_transforms)
    _put(result, "allowed_collision_matrix", scene.allowed_collision_matrix, AllowedCollisionMatrix())
    _put_all(result, "link_padding", scene.link_padding)
    _put_all(result, "link_scale", scene.link_scale)
    _put_all(result, "object_colors", scene.object_colors)
    _put(result, "world", scene.world, PlanningSceneWorld())
    result["is_diff"] = scene.is_diff
    return result
