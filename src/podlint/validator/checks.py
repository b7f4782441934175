#!/usr/bin/env python3
"""
PODLINT CHECKS - Type & Format Predicates
-----------------------------------------
Stateless predicates used by the structural validators. None of them
report anything: they answer yes/no and the validator decides which
message to emit.

Author: PodLint Team
Date: 2026-10-17
"""

import re
from typing import Optional

from podlint.core.models import Node, TAG_INTEGER, TAG_STRING

API_VERSIONS = frozenset({"v1"})
KINDS = frozenset({"Pod"})
OS_NAMES = frozenset({"linux", "windows"})
PROTOCOLS = frozenset({"TCP", "UDP"})

PORT_MIN = 1
PORT_MAX = 65535

NAME_PATTERN = re.compile(r'^[a-z0-9]+(_[a-z0-9]+)*$')
MEMORY_PATTERN = re.compile(r'^[0-9]+(Gi|Mi|Ki)$')
# The integer tag alone also covers 0x1F, 0o17 and 1_000
DECIMAL_PATTERN = re.compile(r'^[-+]?[0-9]+$')


def is_string(node: Optional[Node]) -> bool:
    return node is not None and node.is_scalar and node.tag == TAG_STRING


def is_integer(node: Optional[Node]) -> bool:
    """True for integer-tagged scalars whose raw text is a base-10 literal."""
    if node is None or not node.is_scalar or node.tag != TAG_INTEGER:
        return False
    return DECIMAL_PATTERN.fullmatch(node.value) is not None


def integer_value(node: Node) -> int:
    """Parsed value of a node that passed `is_integer`."""
    return int(node.value, 10)


def in_port_range(port: int) -> bool:
    return PORT_MIN <= port <= PORT_MAX


def matches_name(value: str) -> bool:
    return NAME_PATTERN.fullmatch(value) is not None


def matches_memory(value: str) -> bool:
    return MEMORY_PATTERN.fullmatch(value) is not None


def matches_http_path(value: str) -> bool:
    return value.startswith("/")


class ImageReference:
    """
    Image format bound to a registry host:
    `<registry>/<repository>:<tag>`. The tag follows the last `/`, is
    non-empty, and holds no whitespace, colon or slash.
    """

    def __init__(self, registry: str):
        self.registry = registry
        self.pattern = re.compile(
            r'^' + re.escape(registry) + r'/[^:\s]+:[^:\s/]+$'
        )

    def matches(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None
