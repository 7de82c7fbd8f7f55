# MIT License (see LICENSE)
"""
Fixed tables shared by the record types and the codecs.

These values define the wire vocabulary of the YAML representation: the
tokens used for enumerations, the number of dimensions each solid primitive
carries, and the options used when printing documents.
"""
from __future__ import annotations

# Solid primitive kinds and the number of dimension values each one carries.
#   box:      [size_x, size_y, size_z]
#   sphere:   [radius]
#   cylinder: [height, radius]
#   cone:     [height, radius]
SOLID_PRIMITIVE_DIMENSIONS: dict[str, int] = {
    "box": 3,
    "sphere": 1,
    "cylinder": 2,
    "cone": 2,
}

# Collision object operations, in the order of their message constants.
COLLISION_OBJECT_OPERATIONS: tuple[str, ...] = ("add", "remove", "append", "move")

NSEC_PER_SEC: int = 1_000_000_000

# Options handed to yaml.safe_dump by the text helpers. Flow style is used
# for leaf collections only, so vectors print as [x, y, z].
YAML_DUMP_OPTIONS: dict[str, object] = {
    "default_flow_style": None,
    "sort_keys": False,
}
