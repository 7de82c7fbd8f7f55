# MIT License (see LICENSE)
"""
YAML text helpers.

Thin wrappers pairing the registry with PyYAML's safe loader and dumper.
They work on strings only; reading and writing files is left to the caller.
"""
from __future__ import annotations
from typing import Any

import yaml

from ..constants import YAML_DUMP_OPTIONS
from .registry import EntityRef, decode, encode


def dumps(record: Any) -> str:
    """Serialize a record to YAML text."""
    return yaml.safe_dump(encode(record), **YAML_DUMP_OPTIONS)


def loads(text: str, entity: EntityRef) -> Any:
    """
    Parse YAML text and decode it as a record of the given type.

    Args:
        text: YAML document.
        entity: The record class, its name or its message type tag.

    Raises:
        yaml.YAMLError: If the text is not valid YAML.
        FormatError: If the document does not describe a valid record.
    """
    return decode(entity, yaml.safe_load(text))
