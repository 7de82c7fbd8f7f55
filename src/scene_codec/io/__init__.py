# MIT License (see LICENSE)
"""
Conversion between records and YAML document trees.

This subpackage provides:
    - One codec module per record family (primitives, geometry, robot_state,
      shapes, scene, world, aggregate), each exposing `<name>_to_yaml` and
      `<name>_from_yaml` functions.
    - registry: type-dispatched `encode` / `decode` for every record type.
    - yaml_io: `dumps` / `loads` for YAML text.

Typical usage:
    from scene_codec.io import decode, dumps, loads
    from scene_codec.msgs import PlanningScene

    scene = loads(text, PlanningScene)
    text = dumps(scene)

    # Decode a node located inside a larger document
    scene = decode(PlanningScene, document["scene"])
"""
from .registry import Codec, codec_for, decode, encode, registered_types
from .yaml_io import dumps, loads

__all__ = [
    # Dispatch
    "Codec",
    "codec_for",
    "decode",
    "encode",
    "registered_types",
    # Text
    "dumps",
    "loads",
]
