#!/usr/bin/env python3
"""
PODLINT CORE MODELS
-------------------
Defines the fundamental data structures used across the PodLint engine.
These models represent the lowest level of manifest abstraction: the
generic node tree handed over by the loader, and the violations the
validator produces while walking it.

Author: PodLint Team
Date: 2026-10-17
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

# Normalised semantic tags. Non-core tags are kept verbatim by the loader.
TAG_STRING = "string"
TAG_INTEGER = "integer"
TAG_FLOAT = "float"
TAG_BOOLEAN = "boolean"
TAG_NULL = "null"
TAG_MAPPING = "mapping"
TAG_SEQUENCE = "sequence"


class NodeKind(str, Enum):
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class Node:
    """
    A single element of the parsed manifest.

    Mappings store their entries flattened as alternating key/value
    children; sequences store their elements in order. Absent nodes are
    represented by ``None`` rather than a dedicated kind.
    """
    kind: NodeKind
    tag: str                                   # Semantic label (e.g. 'string', 'integer')
    value: str = ""                            # Raw scalar text, empty for collections
    children: Tuple["Node", ...] = field(default_factory=tuple)
    line: int = 0                              # 1-based source line

    @property
    def is_scalar(self) -> bool:
        return self.kind is NodeKind.SCALAR

    @property
    def is_mapping(self) -> bool:
        return self.kind is NodeKind.MAPPING

    @property
    def is_sequence(self) -> bool:
        return self.kind is NodeKind.SEQUENCE


@dataclass(frozen=True)
class Known:
    """Position of a violation whose offending node exists in the source."""
    line: int


@dataclass(frozen=True)
class Unknown:
    """Position of a violation about a field that does not exist at all."""


UNKNOWN = Unknown()

Position = Union[Known, Unknown]


@dataclass(frozen=True)
class Violation:
    """A single schema non-conformance."""
    message: str
    position: Position = UNKNOWN

    @property
    def line(self) -> Optional[int]:
        """The source line, or None when the position is unknown."""
        if isinstance(self.position, Known):
            return self.position.line
        return None
