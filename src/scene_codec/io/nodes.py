# MIT License (see LICENSE)
"""
Typed access to YAML document nodes.

A document node is what ``yaml.safe_load`` produces: mappings, sequences
and scalars. The helpers here check the kind of a node, read fields out of
mappings and raise `FormatError` carrying the node's structural path when
something does not fit. They never modify the node they read.
"""
from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any, Callable, TypeVar

from ..errors import ErrorKind, FormatError, NodePath
from ..util import is_integer, is_number

T = TypeVar("T")

Node = Any


def describe(node: Node) -> str:
    """Short description of a node's kind, for error messages."""
    if node is None:
        return "null"
    if isinstance(node, bool):
        return "boolean"
    if is_number(node):
        return "number"
    if isinstance(node, str):
        return "string"
    if isinstance(node, Mapping):
        return "mapping"
    if isinstance(node, Sequence):
        return "sequence"
    return type(node).__name__


def _mismatch(expected: str, node: Node, path: NodePath) -> FormatError:
    return FormatError(
        ErrorKind.TYPE_MISMATCH, path, f"expected {expected}, got {describe(node)}"
    )


# -----------------------------------------------------------------------------
# Containers
# -----------------------------------------------------------------------------

def as_mapping(node: Node, path: NodePath) -> Mapping[str, Any]:
    if not isinstance(node, Mapping):
        raise _mismatch("a mapping", node, path)
    return node


def is_sequence(node: Node) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def as_sequence(node: Node, path: NodePath) -> Sequence[Any]:
    if not is_sequence(node):
        raise _mismatch("a sequence", node, path)
    return node


def require(node: Mapping[str, Any], key: str, path: NodePath) -> Node:
    """Return ``node[key]``, raising MissingField if the key is absent."""
    if key not in node:
        raise FormatError(ErrorKind.MISSING_FIELD, path + (key,), f"missing required field '{key}'")
    return node[key]


def has(node: Mapping[str, Any], key: str) -> bool:
    """True if an optional field is present. A null value counts as absent."""
    return node.get(key) is not None


def field(
    node: Mapping[str, Any],
    key: str,
    path: NodePath,
    decode: Callable[[Node, NodePath], T],
    default: T,
) -> T:
    """Decode an optional field, returning `default` when it is absent."""
    if not has(node, key):
        return default
    return decode(node[key], path + (key,))


def required_field(
    node: Mapping[str, Any],
    key: str,
    path: NodePath,
    decode: Callable[[Node, NodePath], T],
) -> T:
    """Decode a required field."""
    return decode(require(node, key, path), path + (key,))


def each(node: Node, path: NodePath, decode: Callable[[Node, NodePath], T]) -> tuple[T, ...]:
    """Decode every element of a sequence node, tracking indices in the path."""
    seq = as_sequence(node, path)
    return tuple(decode(item, path + (i,)) for i, item in enumerate(seq))


def sequence_of(decode: Callable[[Node, NodePath], T]) -> Callable[[Node, NodePath], tuple[T, ...]]:
    """Lift an element decoder to a decoder for a sequence of such elements."""
    def _decode(node: Node, path: NodePath) -> tuple[T, ...]:
        return each(node, path, decode)
    return _decode


def check_arity(
    values: Sequence[Any], expected: int, path: NodePath, what: str
) -> None:
    """Raise ArityMismatch if `values` does not hold exactly `expected` items."""
    if len(values) != expected:
        raise FormatError(
            ErrorKind.ARITY_MISMATCH,
            path,
            f"{what} has {len(values)} values, expected {expected}",
        )


# -----------------------------------------------------------------------------
# Scalars
# -----------------------------------------------------------------------------

def as_float(node: Node, path: NodePath) -> float:
    if not is_number(node):
        raise _mismatch("a number", node, path)
    return float(node)


def as_int(node: Node, path: NodePath) -> int:
    if not is_integer(node):
        raise _mismatch("an integer", node, path)
    return int(node)


def as_str(node: Node, path: NodePath) -> str:
    if not isinstance(node, str):
        raise _mismatch("a string", node, path)
    return node


def as_bool(node: Node, path: NodePath) -> bool:
    if not isinstance(node, bool):
        raise _mismatch("a boolean", node, path)
    return node


float_list = sequence_of(as_float)
int_list = sequence_of(as_int)
str_list = sequence_of(as_str)
