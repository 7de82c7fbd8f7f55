# MIT License (see LICENSE)
"""
Geometric record types: time stamps, headers, vectors, poses and transforms.

These mirror the std_msgs / geometry_msgs messages of the robotics stack.
All records are immutable; every field defaults to its zero value so that
``Pose()`` is the zero pose (note: a zero quaternion, not the identity).
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field, fields
from typing import ClassVar

from ..constants import NSEC_PER_SEC


# =============================================================================
# Time
# =============================================================================

def _split_seconds(seconds: float) -> tuple[int, int]:
    """Split float seconds into (secs, nsecs) with 0 <= nsecs < 1e9."""
    secs = math.floor(seconds)
    nsecs = int(round((seconds - secs) * NSEC_PER_SEC))
    if nsecs >= NSEC_PER_SEC:
        secs += 1
        nsecs -= NSEC_PER_SEC
    return int(secs), nsecs


@dataclass(frozen=True)
class Time:
    """
    A point in time as whole seconds plus nanoseconds.

    Attributes:
        secs: Whole seconds since the epoch.
        nsecs: Nanoseconds past `secs`, in [0, 1e9).
    """
    secs: int = 0
    nsecs: int = 0

    __msgtype__: ClassVar[str] = "time"

    def to_sec(self) -> float:
        return self.secs + self.nsecs / NSEC_PER_SEC

    @classmethod
    def from_sec(cls, seconds: float) -> "Time":
        return cls(*_split_seconds(seconds))


@dataclass(frozen=True)
class Duration:
    """A signed time span as whole seconds plus nanoseconds in [0, 1e9)."""
    secs: int = 0
    nsecs: int = 0

    __msgtype__: ClassVar[str] = "duration"

    def to_sec(self) -> float:
        return self.secs + self.nsecs / NSEC_PER_SEC

    @classmethod
    def from_sec(cls, seconds: float) -> "Duration":
        return cls(*_split_seconds(seconds))


@dataclass(frozen=True)
class Header:
    """
    Stamp and coordinate frame attached to time-varying data.

    Attributes:
        seq: Consecutively increasing sequence number.
        stamp: Acquisition time.
        frame_id: Frame this data is associated with.
    """
    seq: int = 0
    stamp: Time = field(default_factory=Time)
    frame_id: str = ""

    __msgtype__: ClassVar[str] = "std_msgs/Header"


# =============================================================================
# Fixed-arity numeric tuples
# =============================================================================

def _as_floats(record) -> None:
    """Store every field of a numeric tuple record as a Python float."""
    for f in fields(record):
        object.__setattr__(record, f.name, float(getattr(record, f.name)))


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __msgtype__: ClassVar[str] = "geometry_msgs/Vector3"

    def __post_init__(self) -> None:
        _as_floats(self)


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __msgtype__: ClassVar[str] = "geometry_msgs/Point"

    def __post_init__(self) -> None:
        _as_floats(self)


@dataclass(frozen=True)
class Quaternion:
    """
    Orientation as (x, y, z, w). Unit length is not enforced here; callers
    that need a valid rotation must normalize.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    __msgtype__: ClassVar[str] = "geometry_msgs/Quaternion"

    def __post_init__(self) -> None:
        _as_floats(self)


@dataclass(frozen=True)
class ColorRGBA:
    """Color with alpha, each channel nominally in [0, 1]."""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    __msgtype__: ClassVar[str] = "std_msgs/ColorRGBA"

    def __post_init__(self) -> None:
        _as_floats(self)


# =============================================================================
# Composites
# =============================================================================

@dataclass(frozen=True)
class Pose:
    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)

    __msgtype__: ClassVar[str] = "geometry_msgs/Pose"


@dataclass(frozen=True)
class Transform:
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)

    __msgtype__: ClassVar[str] = "geometry_msgs/Transform"


@dataclass(frozen=True)
class TransformStamped:
    """
    Transform from `header.frame_id` to `child_frame_id`.

    A default `header` means the transform is unstamped.
    """
    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    transform: Transform = field(default_factory=Transform)

    __msgtype__: ClassVar[str] = "geometry_msgs/TransformStamped"


@dataclass(frozen=True)
class Twist:
    """Velocity in free space, split into linear and angular parts."""
    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)

    __msgtype__: ClassVar[str] = "geometry_msgs/Twist"


@dataclass(frozen=True)
class Wrench:
    """Force in free space, split into force and torque parts."""
    force: Vector3 = field(default_factory=Vector3)
    torque: Vector3 = field(default_factory=Vector3)

    __msgtype__: ClassVar[str] = "geometry_msgs/Wrench"
