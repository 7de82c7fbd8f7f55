# MIT License (see LICENSE)
"""
Codec for solid primitives, meshes and planes.

YAML layout:
---------------------
solid_primitive:
  type: box | sphere | cylinder | cone      # required, read first
  dimensions: [float, ...]                  # required, count fixed by type
                                            # (box 3, sphere 1, cylinder 2, cone 2)
mesh:
  vertices: [[x, y, z], ...]                # required
  triangles: [[i, j, k], ...]               # required, integer indices
plane: [a, b, c, d]                         # a*x + b*y + c*z + d = 0
"""
from __future__ import annotations
from typing import Any

from ..constants import SOLID_PRIMITIVE_DIMENSIONS
from ..errors import ErrorKind, FormatError, NodePath
from ..msgs.shapes import Mesh, MeshTriangle, Plane, SolidPrimitive
from . import nodes
from .primitives import point_from_yaml, point_to_yaml


def solid_primitive_type(node: Any, path: NodePath) -> str:
    """Read a primitive type token, raising UnknownEnum if it is not in the arity table."""
    token = nodes.as_str(node, path)
    if token not in SOLID_PRIMITIVE_DIMENSIONS:
        known = ", ".join(SOLID_PRIMITIVE_DIMENSIONS)
        raise FormatError(
            ErrorKind.UNKNOWN_ENUM, path, f"unknown primitive type '{token}' (expected one of: {known})"
        )
    return token


def solid_primitive_from_yaml(
    node: Any, path: NodePath = ("SolidPrimitive",)
) -> SolidPrimitive:
    """
    Decode a SolidPrimitive.

    Args:
        node: Mapping with `type` and `dimensions`.
        path: Structural path of `node`, for error reporting.

    Raises:
        FormatError: UnknownEnum for an unknown type, ArityMismatch if the
            dimension count does not match the type.
    """
    data = nodes.as_mapping(node, path)
    kind = nodes.required_field(data, "type", path, solid_primitive_type)
    dimensions = nodes.required_field(data, "dimensions", path, nodes.float_list)
    nodes.check_arity(
        dimensions, SOLID_PRIMITIVE_DIMENSIONS[kind], path + ("dimensions",), f"{kind} dimensions"
    )
    return SolidPrimitive(type=kind, dimensions=dimensions)


def solid_primitive_to_yaml(s: SolidPrimitive) -> dict[str, Any]:
    """Serialize a SolidPrimitive as a type / dimensions mapping."""
    return {"type": s.type, "dimensions": list(s.dimensions)}


def mesh_triangle_from_yaml(node: Any, path: NodePath = ("MeshTriangle",)) -> MeshTriangle:
    """Decode a triangle from exactly three integer vertex indices."""
    indices = nodes.int_list(node, path)
    nodes.check_arity(indices, 3, path, "triangle")
    return MeshTriangle(indices)


def mesh_triangle_to_yaml(t: MeshTriangle) -> list[int]:
    """Serialize a triangle as ``[i, j, k]``."""
    return list(t.vertex_indices)


def mesh_from_yaml(node: Any, path: NodePath = ("Mesh",)) -> Mesh:
    """
    Decode a mesh. Triangle indices are read as integers but not checked
    against the number of vertices.
    """
    data = nodes.as_mapping(node, path)
    return Mesh(
        vertices=nodes.required_field(data, "vertices", path, nodes.sequence_of(point_from_yaml)),
        triangles=nodes.required_field(
            data, "triangles", path, nodes.sequence_of(mesh_triangle_from_yaml)
        ),
    )


def mesh_to_yaml(m: Mesh) -> dict[str, Any]:
    """Serialize a Mesh as vertex and triangle lists."""
    return {
        "vertices": [point_to_yaml(v) for v in m.vertices],
        "triangles": [mesh_triangle_to_yaml(t) for t in m.triangles],
    }


def plane_from_yaml(node: Any, path: NodePath = ("Plane",)) -> Plane:
    """Decode a plane from its four coefficients ``[a, b, c, d]``."""
    coef = nodes.float_list(node, path)
    nodes.check_arity(coef, 4, path, "plane")
    return Plane(coef)


def plane_to_yaml(p: Plane) -> list[float]:
    """Serialize a plane as ``[a, b, c, d]``."""
    return list(p.coef)
