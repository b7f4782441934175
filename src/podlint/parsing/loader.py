#!/usr/bin/env python3
"""
PODLINT LOADER - The Cartographer
---------------------------------
Turns raw manifest text into the generic Node tree the validator walks.

ruamel.yaml is only asked to *compose* the document: no Python objects
are constructed, so every node keeps its resolved tag and the line it
was found on. Duplicate keys are left untouched for the field accessor
to resolve.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from typing import Any, Set

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode

from podlint.core.errors import DocumentParseError
from podlint.core.models import (
    Node,
    NodeKind,
    TAG_BOOLEAN,
    TAG_FLOAT,
    TAG_INTEGER,
    TAG_MAPPING,
    TAG_NULL,
    TAG_SEQUENCE,
    TAG_STRING,
)

logger = logging.getLogger("podlint.loader")

CORE_TAGS = {
    "tag:yaml.org,2002:str": TAG_STRING,
    "tag:yaml.org,2002:int": TAG_INTEGER,
    "tag:yaml.org,2002:float": TAG_FLOAT,
    "tag:yaml.org,2002:bool": TAG_BOOLEAN,
    "tag:yaml.org,2002:null": TAG_NULL,
    "tag:yaml.org,2002:map": TAG_MAPPING,
    "tag:yaml.org,2002:omap": TAG_MAPPING,
    "tag:yaml.org,2002:seq": TAG_SEQUENCE,
    "tag:yaml.org,2002:timestamp": "timestamp",
    "tag:yaml.org,2002:binary": "binary",
    "tag:yaml.org,2002:merge": "merge",
}


class ManifestLoader:
    """
    Composes a single YAML document into an immutable Node tree.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')

    def load(self, text: str) -> Node:
        """
        Parses `text` and returns the root Node.

        Raises:
            DocumentParseError: on syntax errors, multiple documents or
                recursive aliases.
        """
        try:
            composed = self.yaml.compose(text)
        except YAMLError as e:
            mark = getattr(e, 'problem_mark', None) or getattr(e, 'context_mark', None)
            line = mark.line + 1 if mark is not None else None
            logger.debug(f"YAML composition failed: {e}")
            raise DocumentParseError(self._describe(e), line=line) from e

        if composed is None:
            # Empty stream: surface it as a null root so the validator reports it
            return Node(kind=NodeKind.SCALAR, tag=TAG_NULL, value="", line=1)

        return self._convert(composed, set())

    def _convert(self, node: Any, active: Set[int]) -> Node:
        """Recursively mirrors a ruamel node. `active` holds the ids on the current path."""
        if id(node) in active:
            raise DocumentParseError(
                "recursive alias is not supported", line=node.start_mark.line + 1
            )

        line = node.start_mark.line + 1
        tag = self._normalise_tag(node.tag)

        if isinstance(node, ScalarNode):
            return Node(kind=NodeKind.SCALAR, tag=tag, value=str(node.value), line=line)

        active.add(id(node))
        try:
            if isinstance(node, MappingNode):
                children = []
                for key, value in node.value:
                    children.append(self._convert(key, active))
                    children.append(self._convert(value, active))
                return Node(kind=NodeKind.MAPPING, tag=tag, children=tuple(children), line=line)

            if isinstance(node, SequenceNode):
                children = [self._convert(item, active) for item in node.value]
                return Node(kind=NodeKind.SEQUENCE, tag=tag, children=tuple(children), line=line)
        finally:
            active.discard(id(node))

        raise DocumentParseError(f"unsupported node type {type(node).__name__}", line=line)

    def _normalise_tag(self, tag: Any) -> str:
        # Newer ruamel.yaml releases wrap tags in a Tag object
        raw = getattr(tag, 'value', tag)
        raw = "" if raw is None else str(raw)
        return CORE_TAGS.get(raw, raw)

    def _describe(self, error: YAMLError) -> str:
        """ruamel's own message, collapsed onto one line."""
        return " ".join(str(error).split())
