# MIT License (see LICENSE)
"""
Codec for collision objects, the allowed collision matrix and the
per-link / per-object scene settings.

YAML layout:
---------------------
collision_object:
  header: {...}                       # optional
  id: string                          # required
  type: {key: string, db: string}     # optional
  primitives: [solid_primitive, ...]  # optional
  primitive_poses: [pose, ...]        # one per primitive
  meshes: [mesh, ...]                 # optional
  mesh_poses: [pose, ...]             # one per mesh
  planes: [plane, ...]                # optional
  plane_poses: [pose, ...]            # one per plane
  operation: add | remove | append | move   # default add

attached_collision_object:
  link_name: string                   # required
  object: collision_object            # required
  touch_links: [string, ...]          # optional
  detach_posture: joint_trajectory    # optional
  weight: float                       # optional

allowed_collision_matrix:
  entry_names: [a, b]                 # unique
  entry_values:                       # square: one row per name, one cell per name
    - [true, false]                   # true = allowed, false = not allowed,
    - [false, null]                   # null = unspecified
  default_entry_names: [c]            # optional
  default_entry_values: [true]        # parallel to default_entry_names

link_padding: {link_name: string, padding: float}
link_scale:   {link_name: string, scale: float}
object_color: {id: string, color: [r, g, b, a]}
"""
from __future__ import annotations
from typing import Any

from ..constants import COLLISION_OBJECT_OPERATIONS
from ..errors import ErrorKind, FormatError, NodePath
from ..msgs.geometry import Header
from ..msgs.scene import (
    AllowedCollisionEntry,
    AllowedCollisionMatrix,
    Allowance,
    AttachedCollisionObject,
    CollisionObject,
    LinkPadding,
    LinkScale,
    ObjectColor,
    ObjectType,
)
from ..msgs.sensor import JointTrajectory
from . import nodes
from .geometry import header_to_yaml, optional_header, pose_from_yaml, pose_to_yaml
from .primitives import color_from_yaml, color_to_yaml
from .robot_state import joint_trajectory_from_yaml, joint_trajectory_to_yaml
from .shapes import (
    mesh_from_yaml,
    mesh_to_yaml,
    plane_from_yaml,
    plane_to_yaml,
    solid_primitive_from_yaml,
    solid_primitive_to_yaml,
)


# =============================================================================
# Collision objects
# =============================================================================

# (shape key, pose key, shape decoder, shape encoder)
_SHAPE_FIELDS = (
    ("primitives", "primitive_poses", solid_primitive_from_yaml, solid_primitive_to_yaml),
    ("meshes", "mesh_poses", mesh_from_yaml, mesh_to_yaml),
    ("planes", "plane_poses", plane_from_yaml, plane_to_yaml),
)


def object_type_from_yaml(node: Any, path: NodePath = ("ObjectType",)) -> ObjectType:
    """Decode a recognition database type; both keys are optional."""
    data = nodes.as_mapping(node, path)
    return ObjectType(
        key=nodes.field(data, "key", path, nodes.as_str, ""),
        db=nodes.field(data, "db", path, nodes.as_str, ""),
    )


def object_type_to_yaml(t: ObjectType) -> dict[str, Any]:
    """Serialize an ObjectType as a key / db mapping."""
    return {"key": t.key, "db": t.db}


def operation_from_yaml(node: Any, path: NodePath) -> str:
    """Read a collision object operation token, raising UnknownEnum if unknown."""
    token = nodes.as_str(node, path)
    if token not in COLLISION_OBJECT_OPERATIONS:
        raise FormatError(ErrorKind.UNKNOWN_ENUM, path, f"unknown operation '{token}'")
    return token


def collision_object_from_yaml(
    node: Any, path: NodePath = ("CollisionObject",)
) -> CollisionObject:
    """
    Decode a collision object.

    Each shape sequence must come with a pose sequence of the same length,
    so the object carries exactly one pose per shape.

    Raises:
        FormatError: MissingField if `id` is absent, UnknownEnum for an
            unknown operation or primitive type, ArityMismatch if a pose
            sequence does not match its shape sequence.
    """
    data = nodes.as_mapping(node, path)
    fields: dict[str, Any] = {
        "id": nodes.required_field(data, "id", path, nodes.as_str),
        "header": optional_header(data, path),
        "operation": nodes.field(data, "operation", path, operation_from_yaml, "add"),
        "type": nodes.field(data, "type", path, object_type_from_yaml, ObjectType()),
    }
    for shape_key, pose_key, decode_shape, _ in _SHAPE_FIELDS:
        shapes = nodes.field(data, shape_key, path, nodes.sequence_of(decode_shape), ())
        poses = nodes.field(data, pose_key, path, nodes.sequence_of(pose_from_yaml), ())
        if len(poses) != len(shapes):
            raise FormatError(
                ErrorKind.ARITY_MISMATCH,
                path + (pose_key,),
                f"'{pose_key}' has {len(poses)} poses for {len(shapes)} {shape_key}",
            )
        fields[shape_key] = shapes
        fields[pose_key] = poses
    return CollisionObject(**fields)


def collision_object_to_yaml(obj: CollisionObject) -> dict[str, Any]:
    """Serialize a collision object, leaving out empty shape lists and defaults."""
    result: dict[str, Any] = {"id": obj.id}
    if obj.header != Header():
        result["header"] = header_to_yaml(obj.header)
    if obj.type != ObjectType():
        result["type"] = object_type_to_yaml(obj.type)
    for shape_key, pose_key, _, encode_shape in _SHAPE_FIELDS:
        shapes = getattr(obj, shape_key)
        if shapes:
            result[shape_key] = [encode_shape(s) for s in shapes]
            result[pose_key] = [pose_to_yaml(p) for p in getattr(obj, pose_key)]
    if obj.operation != "add":
        result["operation"] = obj.operation
    return result


def attached_collision_object_from_yaml(
    node: Any, path: NodePath = ("AttachedCollisionObject",)
) -> AttachedCollisionObject:
    """
    Decode an attached collision object.

    `link_name` and `object` are required; `touch_links`, `detach_posture`
    and `weight` default to their zero values.
    """
    data = nodes.as_mapping(node, path)
    return AttachedCollisionObject(
        link_name=nodes.required_field(data, "link_name", path, nodes.as_str),
        object=nodes.required_field(data, "object", path, collision_object_from_yaml),
        touch_links=nodes.field(data, "touch_links", path, nodes.str_list, ()),
        detach_posture=nodes.field(
            data, "detach_posture", path, joint_trajectory_from_yaml, JointTrajectory()
        ),
        weight=nodes.field(data, "weight", path, nodes.as_float, 0.0),
    )


def attached_collision_object_to_yaml(obj: AttachedCollisionObject) -> dict[str, Any]:
    """Serialize an attached collision object, leaving out zero-valued optionals."""
    result: dict[str, Any] = {
        "link_name": obj.link_name,
        "object": collision_object_to_yaml(obj.object),
    }
    if obj.touch_links:
        result["touch_links"] = list(obj.touch_links)
    if obj.detach_posture != JointTrajectory():
        result["detach_posture"] = joint_trajectory_to_yaml(obj.detach_posture)
    if obj.weight != 0.0:
        result["weight"] = obj.weight
    return result


# =============================================================================
# Allowed collision matrix
# =============================================================================

_ALLOWANCE_FROM_NODE = {True: Allowance.ALLOWED, False: Allowance.NOT_ALLOWED}
_ALLOWANCE_TO_NODE = {
    Allowance.ALLOWED: True,
    Allowance.NOT_ALLOWED: False,
    Allowance.UNSPECIFIED: None,
}


def allowance_from_yaml(node: Any, path: NodePath) -> Allowance:
    """Read one matrix cell: true, false or null."""
    if node is None:
        return Allowance.UNSPECIFIED
    return _ALLOWANCE_FROM_NODE[nodes.as_bool(node, path)]


def allowed_collision_entry_from_yaml(
    node: Any, path: NodePath = ("AllowedCollisionEntry",)
) -> AllowedCollisionEntry:
    """Decode one matrix row, given as ``[cells]`` or ``{enabled: [cells]}``."""
    if not nodes.is_sequence(node):
        node = nodes.require(nodes.as_mapping(node, path), "enabled", path)
        path = path + ("enabled",)
    cells = nodes.as_sequence(node, path)
    return AllowedCollisionEntry(
        tuple(allowance_from_yaml(cell, path + (i,)) for i, cell in enumerate(cells))
    )


def allowed_collision_entry_to_yaml(entry: AllowedCollisionEntry) -> list[bool | None]:
    """Serialize one matrix row as a list of true / false / null cells."""
    return [_ALLOWANCE_TO_NODE[cell] for cell in entry.enabled]


def allowed_collision_matrix_from_yaml(
    node: Any, path: NodePath = ("AllowedCollisionMatrix",)
) -> AllowedCollisionMatrix:
    """
    Decode the allowed collision matrix.

    Raises:
        FormatError: ShapeMismatch if names repeat or the grid is not
            square with one row and one column per name; ArityMismatch if
            the default entry arrays are not parallel.
    """
    data = nodes.as_mapping(node, path)
    names = nodes.field(data, "entry_names", path, nodes.str_list, ())
    if len(set(names)) != len(names):
        repeated = sorted({n for n in names if names.count(n) > 1})
        raise FormatError(
            ErrorKind.SHAPE_MISMATCH,
            path + ("entry_names",),
            f"entry names must be unique, repeated: {', '.join(repeated)}",
        )

    rows_path = path + ("entry_values",)
    rows = nodes.field(
        data, "entry_values", path, nodes.sequence_of(allowed_collision_entry_from_yaml), ()
    )
    if len(rows) != len(names):
        raise FormatError(
            ErrorKind.SHAPE_MISMATCH, rows_path,
            f"matrix has {len(rows)} rows for {len(names)} entries",
        )
    for i, row in enumerate(rows):
        if len(row.enabled) != len(names):
            raise FormatError(
                ErrorKind.SHAPE_MISMATCH, rows_path + (i,),
                f"row has {len(row.enabled)} cells for {len(names)} entries",
            )

    default_names = nodes.field(data, "default_entry_names", path, nodes.str_list, ())
    default_values = nodes.field(
        data, "default_entry_values", path, nodes.sequence_of(nodes.as_bool), ()
    )
    if len(default_values) != len(default_names):
        raise FormatError(
            ErrorKind.ARITY_MISMATCH,
            path + ("default_entry_values",),
            f"'default_entry_values' has {len(default_values)} values "
            f"for {len(default_names)} names",
        )

    return AllowedCollisionMatrix(
        entry_names=names,
        entry_values=rows,
        default_entry_names=default_names,
        default_entry_values=default_values,
    )


def allowed_collision_matrix_to_yaml(acm: AllowedCollisionMatrix) -> dict[str, Any]:
    """Serialize the matrix; default entries are written only when present."""
    result: dict[str, Any] = {
        "entry_names": list(acm.entry_names),
        "entry_values": [allowed_collision_entry_to_yaml(row) for row in acm.entry_values],
    }
    if acm.default_entry_names:
        result["default_entry_names"] = list(acm.default_entry_names)
        result["default_entry_values"] = list(acm.default_entry_values)
    return result


# =============================================================================
# Per-link and per-object settings
# =============================================================================

def link_padding_from_yaml(node: Any, path: NodePath = ("LinkPadding",)) -> LinkPadding:
    """Decode a LinkPadding; both fields are required."""
    data = nodes.as_mapping(node, path)
    return LinkPadding(
        link_name=nodes.required_field(data, "link_name", path, nodes.as_str),
        padding=nodes.required_field(data, "padding", path, nodes.as_float),
    )


def link_padding_to_yaml(p: LinkPadding) -> dict[str, Any]:
    return {"link_name": p.link_name, "padding": p.padding}


def link_scale_from_yaml(node: Any, path: NodePath = ("LinkScale",)) -> LinkScale:
    """Decode a LinkScale; both fields are required."""
    data = nodes.as_mapping(node, path)
    return LinkScale(
        link_name=nodes.required_field(data, "link_name", path, nodes.as_str),
        scale=nodes.required_field(data, "scale", path, nodes.as_float),
    )


def link_scale_to_yaml(s: LinkScale) -> dict[str, Any]:
    return {"link_name": s.link_name, "scale": s.scale}


def object_color_from_yaml(node: Any, path: NodePath = ("ObjectColor",)) -> ObjectColor:
    """Decode an ObjectColor; `id` and `color` are required."""
    data = nodes.as_mapping(node, path)
    return ObjectColor(
        id=nodes.required_field(data, "id", path, nodes.as_str),
        color=nodes.required_field(data, "color", path, color_from_yaml),
    )


def object_color_to_yaml(c: ObjectColor) -> dict[str, Any]:
    return {"id": c.id, "color": color_to_yaml(c.color)}
