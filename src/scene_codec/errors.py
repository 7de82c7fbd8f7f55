# MIT License (see LICENSE)
"""
Decode failures.

Every failure raised while reading a document is a `FormatError` carrying
an `ErrorKind` and the structural path of the offending node: the root
entity name followed by the chain of field names and sequence indices.
"""
from __future__ import annotations

import enum
from typing import Union

PathElement = Union[str, int]
NodePath = tuple[PathElement, ...]


class ErrorKind(enum.Enum):
    """Classification of decode failures."""

    MISSING_FIELD = "MissingField"
    TYPE_MISMATCH = "TypeMismatch"
    ARITY_MISMATCH = "ArityMismatch"
    UNKNOWN_ENUM = "UnknownEnum"
    SHAPE_MISMATCH = "ShapeMismatch"
    PAYLOAD_CORRUPT = "PayloadCorrupt"


def format_path(path: NodePath) -> str:
    """
    Render a node path as text, e.g. ``PlanningScene.world.collision_objects[0].id``.
    """
    out = ""
    for element in path:
        if isinstance(element, int):
            out += f"[{element}]"
        elif out:
            out += f".{element}"
        else:
            out = element
    return out or "<root>"


class FormatError(ValueError):
    """
    A document node could not be decoded into the expected record.

    Attributes:
        kind: What went wrong.
        path: Structural location of the offending node.
        detail: Human-readable description without the path.
    """

    def __init__(self, kind: ErrorKind, path: NodePath, detail: str) -> None:
        self.kind = kind
        self.path = tuple(path)
        self.detail = detail
        super().__init__(f"{format_path(self.path)}: {detail} ({kind.value})")
