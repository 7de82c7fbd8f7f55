# MIT License (see LICENSE)
"""
Collision geometry: solid primitives, triangle meshes and planes.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

from ..util import f64_tuple, index_tuple
from .geometry import Point


@dataclass(frozen=True)
class SolidPrimitive:
    """
    A box, sphere, cylinder or cone centered on its pose.

    The meaning and number of `dimensions` depend on `type`:
      box:      (size_x, size_y, size_z)
      sphere:   (radius,)
      cylinder: (height, radius)
      cone:     (height, radius)

    Attributes:
        type: One of the keys of constants.SOLID_PRIMITIVE_DIMENSIONS.
        dimensions: Dimension values in meters.
    """
    type: str = "box"
    dimensions: tuple[float, ...] = (0.0, 0.0, 0.0)

    __msgtype__: ClassVar[str] = "shape_msgs/SolidPrimitive"

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimensions", f64_tuple(self.dimensions))

    @classmethod
    def box(cls, x: float, y: float, z: float) -> "SolidPrimitive":
        return cls("box", (x, y, z))

    @classmethod
    def sphere(cls, radius: float) -> "SolidPrimitive":
        return cls("sphere", (radius,))

    @classmethod
    def cylinder(cls, height: float, radius: float) -> "SolidPrimitive":
        return cls("cylinder", (height, radius))

    @classmethod
    def cone(cls, height: float, radius: float) -> "SolidPrimitive":
        return cls("cone", (height, radius))


@dataclass(frozen=True)
class MeshTriangle:
    """Three indices into the owning mesh's vertex list."""
    vertex_indices: tuple[int, int, int] = (0, 0, 0)

    __msgtype__: ClassVar[str] = "shape_msgs/MeshTriangle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertex_indices", index_tuple(self.vertex_indices))


@dataclass(frozen=True)
class Mesh:
    """
    Triangle mesh. Triangle indices are not checked against the vertex count.
    """
    vertices: tuple[Point, ...] = ()
    triangles: tuple[MeshTriangle, ...] = ()

    __msgtype__: ClassVar[str] = "shape_msgs/Mesh"

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "triangles", tuple(self.triangles))


@dataclass(frozen=True)
class Plane:
    """Plane a*x + b*y + c*z + d = 0, stored as `coef` = (a, b, c, d)."""
    coef: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    __msgtype__: ClassVar[str] = "shape_msgs/Plane"

    def __post_init__(self) -> None:
        object.__setattr__(self, "coef", f64_tuple(self.coef))
