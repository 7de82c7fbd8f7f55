# MIT License (see LICENSE)
"""
Codec for fixed-arity numeric records and time values.

Vectors, points, quaternions and colors are written as flow sequences:

    position: [0.5, 0.0, 1.2]
    orientation: [0.0, 0.0, 0.0, 1.0]
    color: [1.0, 0.0, 0.0, 1.0]

On decode the named-field form is accepted as well:

    position: {x: 0.5, y: 0.0, z: 1.2}

Time stamps are written as ``{secs: int, nsecs: int}`` so that epoch-scale
stamps survive exactly. Durations are written as float seconds, falling
back to the mapping when float64 cannot hold them exactly. Both accept
either form on decode; `nsecs` must lie in [0, 1e9).
"""
from __future__ import annotations
import math
from typing import Any, Callable, TypeVar

from ..constants import NSEC_PER_SEC
from ..errors import ErrorKind, FormatError, NodePath
from ..msgs.geometry import ColorRGBA, Duration, Point, Quaternion, Time, Vector3
from ..util import is_number
from . import nodes

T = TypeVar("T")


def _fixed_arity_decoder(cls: type[T], names: tuple[str, ...]) -> Callable[[Any, NodePath], T]:
    """Build a decoder for a record whose fields are all float64 `names`."""
    def decode(node: Any, path: NodePath) -> T:
        if nodes.is_sequence(node):
            nodes.check_arity(node, len(names), path, cls.__name__)
            return cls(*(nodes.as_float(v, path + (i,)) for i, v in enumerate(node)))
        data = nodes.as_mapping(node, path)
        return cls(**{name: nodes.required_field(data, name, path, nodes.as_float) for name in names})
    return decode


_vector3 = _fixed_arity_decoder(Vector3, ("x", "y", "z"))
_point = _fixed_arity_decoder(Point, ("x", "y", "z"))
_quaternion = _fixed_arity_decoder(Quaternion, ("x", "y", "z", "w"))
_color = _fixed_arity_decoder(ColorRGBA, ("r", "g", "b", "a"))

def vector3_from_yaml(node: Any, path: NodePath = ("Vector3",)) -> Vector3:
    """
    Decode a Vector3 from ``[x, y, z]`` or ``{x, y, z}``.

    Args:
        node: Sequence or mapping node.
        path: Structural path of `node`, for error reporting.

    Returns:
        Vector3 with float components.
    """
    return _vector3(node, path)


def vector3_to_yaml(v: Vector3) -> list[float]:
    """Serialize a Vector3 as ``[x, y, z]``."""
    return [v.x, v.y, v.z]


def point_from_yaml(node: Any, path: NodePath = ("Point",)) -> Point:
    """Decode a Point from ``[x, y, z]`` or ``{x, y, z}``."""
    return _point(node, path)


def point_to_yaml(p: Point) -> list[float]:
    """Serialize a Point as ``[x, y, z]``."""
    return [p.x, p.y, p.z]


def quaternion_from_yaml(node: Any, path: NodePath = ("Quaternion",)) -> Quaternion:
    """Decode an (x, y, z, w) quaternion. Unit length is not checked."""
    return _quaternion(node, path)


def quaternion_to_yaml(q: Quaternion) -> list[float]:
    """Serialize a Quaternion as ``[x, y, z, w]``."""
    return [q.x, q.y, q.z, q.w]


def color_from_yaml(node: Any, path: NodePath = ("ColorRGBA",)) -> ColorRGBA:
    """Decode a color from ``[r, g, b, a]`` or ``{r, g, b, a}``."""
    return _color(node, path)


def color_to_yaml(c: ColorRGBA) -> list[float]:
    """Serialize a color as ``[r, g, b, a]``."""
    return [c.r, c.g, c.b, c.a]


# -----------------------------------------------------------------------------
# Time
# -----------------------------------------------------------------------------

def _split_time(cls, node: Any, path: NodePath):
    if is_number(node):
        seconds = float(node)
        if not math.isfinite(seconds):
            raise FormatError(
                ErrorKind.TYPE_MISMATCH, path, f"expected finite seconds, got {seconds}"
            )
        return cls.from_sec(seconds)
    data = nodes.as_mapping(node, path)
    nsecs = nodes.field(data, "nsecs", path, nodes.as_int, 0)
    if not 0 <= nsecs < NSEC_PER_SEC:
        raise FormatError(
            ErrorKind.TYPE_MISMATCH,
            path + ("nsecs",),
            f"nsecs must be in [0, {NSEC_PER_SEC}), got {nsecs}",
        )
    return cls(secs=nodes.field(data, "secs", path, nodes.as_int, 0), nsecs=nsecs)


def time_from_yaml(node: Any, path: NodePath = ("Time",)) -> Time:
    """
    Decode a time stamp.

    Args:
        node: ``{secs, nsecs}`` mapping (either key optional) or float seconds.
        path: Structural path of `node`, for error reporting.

    Raises:
        FormatError: TypeMismatch for non-finite seconds or `nsecs` outside
            [0, 1e9).
    """
    return _split_time(Time, node, path)


def time_to_yaml(t: Time) -> dict[str, int]:
    """Serialize a time stamp as ``{secs, nsecs}``."""
    return {"secs": t.secs, "nsecs": t.nsecs}


def duration_from_yaml(node: Any, path: NodePath = ("Duration",)) -> Duration:
    """Decode a duration. Accepts the same forms as `time_from_yaml`."""
    return _split_time(Duration, node, path)


def duration_to_yaml(d: Duration) -> float | dict[str, int]:
    """
    Serialize a duration as float seconds.

    Durations that float64 seconds cannot hold exactly (large `secs` with
    fine `nsecs`) are written as ``{secs, nsecs}`` instead.
    """
    seconds = d.to_sec()
    if Duration.from_sec(seconds) == d:
        return seconds
    return {"secs": d.secs, "nsecs": d.nsecs}
