# MIT License (see LICENSE)
"""
Codec for joint states and joint trajectories.

YAML layout:
---------------------
joint_state:
  header: {...}                # optional
  name: [j1, j2, j3]           # default []
  position: [0.0, 0.1, 0.2]    # optional, else exactly len(name) values
  velocity: [...]              # optional, same rule
  effort: [...]                # optional, same rule

multi_dof_joint_state:
  header: {...}
  joint_names: [base]
  transforms: [{translation: ..., rotation: ...}]   # same rule
  twist: [{linear: ..., angular: ...}]              # same rule
  wrench: [{force: ..., torque: ...}]               # same rule

joint_trajectory:
  header: {...}
  joint_names: [j1, j2]
  points:
    - positions: [0.0, 0.0]    # each array optional, else len(joint_names)
      velocities: [...]
      accelerations: [...]
      effort: [...]
      time_from_start: 0.5     # seconds

A present value array must match the name array exactly; an empty array
next to a non-empty name array is a mismatch too. Encoding leaves empty
value arrays out, so round trips never produce that case.
"""
from __future__ import annotations
from typing import Any, Callable, Sequence

from ..errors import ErrorKind, FormatError, NodePath
from ..msgs.geometry import Duration, Header
from ..msgs.sensor import JointState, JointTrajectory, JointTrajectoryPoint, MultiDOFJointState
from . import nodes
from .geometry import (
    header_to_yaml,
    optional_header,
    transform_from_yaml,
    transform_to_yaml,
    twist_from_yaml,
    twist_to_yaml,
    wrench_from_yaml,
    wrench_to_yaml,
)
from .primitives import duration_from_yaml, duration_to_yaml


def parallel_field(
    data,
    key: str,
    path: NodePath,
    decode: Callable[[Any, NodePath], tuple],
    names: Sequence[str],
) -> tuple:
    """
    Decode an optional array that runs parallel to `names`.

    Absent yields an empty tuple. Present must hold exactly ``len(names)``
    values, otherwise ArityMismatch naming the array.
    """
    if not nodes.has(data, key):
        return ()
    values = decode(data[key], path + (key,))
    if len(values) != len(names):
        raise FormatError(
            ErrorKind.ARITY_MISMATCH,
            path + (key,),
            f"'{key}' has {len(values)} values for {len(names)} joints",
        )
    return values


def _put_nonempty(result: dict[str, Any], key: str, values: Sequence, encode=None) -> None:
    if values:
        result[key] = [encode(v) for v in values] if encode else list(values)


# -----------------------------------------------------------------------------
# JointState
# -----------------------------------------------------------------------------

def joint_state_from_yaml(node: Any, path: NodePath = ("JointState",)) -> JointState:
    """
    Decode a JointState.

    Raises:
        FormatError: ArityMismatch if a value array does not match `name`.
    """
    data = nodes.as_mapping(node, path)
    names = nodes.field(data, "name", path, nodes.str_list, ())
    return JointState(
        header=optional_header(data, path),
        name=names,
        position=parallel_field(data, "position", path, nodes.float_list, names),
        velocity=parallel_field(data, "velocity", path, nodes.float_list, names),
        effort=parallel_field(data, "effort", path, nodes.float_list, names),
    )


def joint_state_to_yaml(js: JointState) -> dict[str, Any]:
    """
    Serialize a JointState.

    `name` is always written; value arrays only when non-empty.
    """
    result: dict[str, Any] = {}
    if js.header != Header():
        result["header"] = header_to_yaml(js.header)
    result["name"] = list(js.name)
    _put_nonempty(result, "position", js.position)
    _put_nonempty(result, "velocity", js.velocity)
    _put_nonempty(result, "effort", js.effort)
    return result


# -----------------------------------------------------------------------------
# MultiDOFJointState
# -----------------------------------------------------------------------------

def multi_dof_joint_state_from_yaml(
    node: Any, path: NodePath = ("MultiDOFJointState",)
) -> MultiDOFJointState:
    """Decode a MultiDOFJointState; value arrays run parallel to `joint_names`."""
    data = nodes.as_mapping(node, path)
    names = nodes.field(data, "joint_names", path, nodes.str_list, ())
    return MultiDOFJointState(
        header=optional_header(data, path),
        joint_names=names,
        transforms=parallel_field(
            data, "transforms", path, nodes.sequence_of(transform_from_yaml), names
        ),
        twist=parallel_field(data, "twist", path, nodes.sequence_of(twist_from_yaml), names),
        wrench=parallel_field(data, "wrench", path, nodes.sequence_of(wrench_from_yaml), names),
    )


def multi_dof_joint_state_to_yaml(js: MultiDOFJointState) -> dict[str, Any]:
    """Serialize a MultiDOFJointState. `joint_names` is always written."""
    result: dict[str, Any] = {}
    if js.header != Header():
        result["header"] = header_to_yaml(js.header)
    result["joint_names"] = list(js.joint_names)
    _put_nonempty(result, "transforms", js.transforms, transform_to_yaml)
    _put_nonempty(result, "twist", js.twist, twist_to_yaml)
    _put_nonempty(result, "wrench", js.wrench, wrench_to_yaml)
    return result


# -----------------------------------------------------------------------------
# JointTrajectory
# -----------------------------------------------------------------------------

_POINT_ARRAYS = ("positions", "velocities", "accelerations", "effort")


def _point_from_yaml(
    node: Any, path: NodePath, names: Sequence[str] | None
) -> JointTrajectoryPoint:
    data = nodes.as_mapping(node, path)
    if names is None:
        arrays = {key: nodes.field(data, key, path, nodes.float_list, ()) for key in _POINT_ARRAYS}
    else:
        arrays = {
            key: parallel_field(data, key, path, nodes.float_list, names)
            for key in _POINT_ARRAYS
        }
    return JointTrajectoryPoint(
        **arrays,
        time_from_start=nodes.field(data, "time_from_start", path, duration_from_yaml, Duration()),
    )


def joint_trajectory_point_from_yaml(
    node: Any, path: NodePath = ("JointTrajectoryPoint",)
) -> JointTrajectoryPoint:
    """Decode a waypoint on its own; array lengths are checked by the trajectory."""
    return _point_from_yaml(node, path, None)


def joint_trajectory_point_to_yaml(p: JointTrajectoryPoint) -> dict[str, Any]:
    """Serialize a waypoint; `time_from_start` is always written."""
    result: dict[str, Any] = {}
    for key in _POINT_ARRAYS:
        _put_nonempty(result, key, getattr(p, key))
    result["time_from_start"] = duration_to_yaml(p.time_from_start)
    return result


def joint_trajectory_from_yaml(
    node: Any, path: NodePath = ("JointTrajectory",)
) -> JointTrajectory:
    """
    Decode a JointTrajectory.

    Every point's value arrays must be empty or hold one value per joint in
    `joint_names`.
    """
    data = nodes.as_mapping(node, path)
    names = nodes.field(data, "joint_names", path, nodes.str_list, ())

    def point(item: Any, item_path: NodePath) -> JointTrajectoryPoint:
        return _point_from_yaml(item, item_path, names)

    return JointTrajectory(
        header=optional_header(data, path),
        joint_names=names,
        points=nodes.field(data, "points", path, nodes.sequence_of(point), ()),
    )


def joint_trajectory_to_yaml(t: JointTrajectory) -> dict[str, Any]:
    """Serialize a JointTrajectory, leaving out a default header and empty points."""
    result: dict[str, Any] = {}
    if t.header != Header():
        result["header"] = header_to_yaml(t.header)
    result["joint_names"] = list(t.joint_names)
    _put_nonempty(result, "points", t.points, joint_trajectory_point_to_yaml)
    return result
