# MIT License (see LICENSE)
"""
scene_codec - YAML codec for robot world-model records.

This package converts planning scenes, robot states and their building
blocks (poses, joint states, collision geometry, trajectories, occupancy
maps) to and from YAML document trees, with exact round trips.

Main entry points:
    - decode / encode: Convert between a document node and a record.
    - loads / dumps: Same, for YAML text.
    - FormatError: Raised when a document does not describe a valid record.

Submodules:
    - msgs: Immutable record types.
    - io: Codecs, type registry and YAML text helpers.

Example:
    from scene_codec import loads, dumps
    from scene_codec.msgs import PlanningScene

    scene = loads(open("scene.yaml").read(), PlanningScene)
    print(dumps(scene))
"""
from .errors import ErrorKind, FormatError
from .io import codec_for, decode, dumps, encode, loads, registered_types

__version__ = "0.1.0"

__all__ = [
    # Codec
    "decode",
    "encode",
    "loads",
    "dumps",
    "codec_for",
    "registered_types",
    # Errors
    "FormatError",
    "ErrorKind",
]
