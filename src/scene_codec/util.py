# MIT License (see LICENSE)
"""
Utility functions for numeric normalization.

Records accept lists, tuples or numpy arrays from callers (planners
typically hand over numpy arrays) and store them as tuples of plain Python
values. Keeping Python scalars in the records makes equality and hashing
well-defined and lets the YAML dumper emit them without representers.
"""
from __future__ import annotations

import numpy as np


def f64_tuple(values) -> tuple[float, ...]:
    """
    Convert any 1-D array-like to a tuple of Python floats (float64 precision).
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        arr = arr.reshape(-1)
    return tuple(float(v) for v in arr)


def index_tuple(values) -> tuple[int, ...]:
    """
    Convert an array-like of integer indices to a tuple of Python ints.

    Raises:
        ValueError: If the values are not integers (floats are never truncated).
    """
    arr = np.asarray(values)
    if arr.size == 0:
        return ()
    if arr.dtype.kind not in "iu":
        raise ValueError(f"Indices must be integers, got {arr.reshape(-1).tolist()}")
    return tuple(int(v) for v in arr.reshape(-1))


def str_tuple(values) -> tuple[str, ...]:
    """Convert a sequence of names to a tuple of str."""
    return tuple(str(v) for v in values)


def as_bytes(data) -> bytes:
    """
    Convert a byte payload to an immutable `bytes` object.

    Accepts bytes-like objects, numpy arrays and sequences of ints. Signed
    values (the octomap message stores int8) are wrapped into 0-255.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    arr = np.asarray(data, dtype=np.int64)
    if arr.size == 0:
        return b""
    return (arr.reshape(-1) & 0xFF).astype(np.uint8).tobytes()


def is_number(value) -> bool:
    """True for int/float values (Python or numpy), excluding booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def is_integer(value) -> bool:
    """True for int values (Python or numpy), excluding booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))
