# MIT License (see LICENSE)
"""
Joint-space record types: joint states and joint trajectories.

These records use parallel arrays: the value arrays describe the joints
named in the name array, position by position. A value array is either
empty (not reported) or exactly as long as the name array. The codec
enforces this on decode; constructing a record that violates it is the
caller's responsibility.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar

from ..util import f64_tuple, str_tuple
from .geometry import Duration, Header, Transform, Twist, Wrench


@dataclass(frozen=True)
class JointState:
    """
    State of a set of single degree-of-freedom joints.

    Attributes:
        header: Stamp and frame of the measurement.
        name: Joint names.
        position: Joint positions (rad or m), parallel to `name`.
        velocity: Joint velocities, parallel to `name`.
        effort: Joint efforts (Nm or N), parallel to `name`.

    Note:
        Array-likes (lists, numpy arrays) are converted to tuples on init.
    """
    header: Header = field(default_factory=Header)
    name: tuple[str, ...] = ()
    position: tuple[float, ...] = ()
    velocity: tuple[float, ...] = ()
    effort: tuple[float, ...] = ()

    __msgtype__: ClassVar[str] = "sensor_msgs/JointState"

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", str_tuple(self.name))
        object.__setattr__(self, "position", f64_tuple(self.position))
        object.__setattr__(self, "velocity", f64_tuple(self.velocity))
        object.__setattr__(self, "effort", f64_tuple(self.effort))


@dataclass(frozen=True)
class MultiDOFJointState:
    """State of a set of multi degree-of-freedom joints (e.g. planar, floating)."""
    header: Header = field(default_factory=Header)
    joint_names: tuple[str, ...] = ()
    transforms: tuple[Transform, ...] = ()
    twist: tuple[Twist, ...] = ()
    wrench: tuple[Wrench, ...] = ()

    __msgtype__: ClassVar[str] = "sensor_msgs/MultiDOFJointState"

    def __post_init__(self) -> None:
        object.__setattr__(self, "joint_names", str_tuple(self.joint_names))
        object.__setattr__(self, "transforms", tuple(self.transforms))
        object.__setattr__(self, "twist", tuple(self.twist))
        object.__setattr__(self, "wrench", tuple(self.wrench))


@dataclass(frozen=True)
class JointTrajectoryPoint:
    """One waypoint of a joint trajectory, reached `time_from_start` after its start."""
    positions: tuple[float, ...] = ()
    velocities: tuple[float, ...] = ()
    accelerations: tuple[float, ...] = ()
    effort: tuple[float, ...] = ()
    time_from_start: Duration = field(default_factory=Duration)

    __msgtype__: ClassVar[str] = "trajectory_msgs/JointTrajectoryPoint"

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", f64_tuple(self.positions))
        object.__setattr__(self, "velocities", f64_tuple(self.velocities))
        object.__setattr__(self, "accelerations", f64_tuple(self.accelerations))
        object.__setattr__(self, "effort", f64_tuple(self.effort))


@dataclass(frozen=True)
class JointTrajectory:
    header: Header = field(default_factory=Header)
    joint_names: tuple[str, ...] = ()
    points: tuple[JointTrajectoryPoint, ...] = ()

    __msgtype__: ClassVar[str] = "trajectory_msgs/JointTrajectory"

    def __post_init__(self) -> None:
        object.__setattr__(self, "joint_names", str_tuple(self.joint_names))
        object.__setattr__(self, "points", tuple(self.points))
