#!/usr/bin/env python3
"""
PODLINT VALIDATOR - The Judge
-----------------------------
Walks the generic node tree of a Pod manifest and enforces the schema:
presence, type, format and range of every known field.

The traversal order is fixed (apiVersion, kind, metadata, spec, then the
field order of each nested entity, then sequence order). Under fail-fast
it decides which violation is reported; under accumulate-all it decides
the order of the report. Both must be reproducible run to run.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from typing import Callable, FrozenSet, List, Optional

from podlint.core.config import ValidatorConfig
from podlint.core.errors import ValidationAborted
from podlint.core.models import Node, Violation
from podlint.validator import checks
from podlint.validator.accessor import field, pairs
from podlint.validator.reporter import Reporter

logger = logging.getLogger("podlint.validator")


class PodValidator:
    """
    Enforces the Pod schema on a node tree. Holds configuration only;
    all per-run state lives in the Reporter passed to each check.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()
        self.image_reference = checks.ImageReference(self.config.image_registry)

    def validate(self, root: Node) -> List[Violation]:
        """
        Runs a full pass over `root` and returns the violations found,
        in traversal order. Empty list means the manifest is valid.
        """
        report = Reporter(self.config.policy)
        try:
            self.validate_root(root, report)
        except ValidationAborted as aborted:
            logger.debug(f"fail-fast stop: {aborted.violation.message}")
        return report.violations

    # --- Shared field rules ---

    def _require(self, parent: Node, key: str, report: Reporter) -> Optional[Node]:
        value = field(parent, key)
        if value is None:
            report.missing(key)
        return value

    def _string(self, node: Node, name: str, report: Reporter) -> bool:
        if not checks.is_string(node):
            report.fail(f"{name} must be string", node)
            return False
        return True

    def _object(self, node: Node, name: str, report: Reporter) -> bool:
        if not node.is_mapping:
            report.fail(f"{name} must be object", node)
            return False
        return True

    def _one_of(self, node: Node, name: str, allowed: FrozenSet[str], report: Reporter):
        if self._string(node, name, report) and node.value not in allowed:
            report.fail(f"{name} has unsupported value '{node.value}'", node)

    def _formatted(self, node: Node, name: str, matches: Callable[[str], bool], report: Reporter):
        if self._string(node, name, report) and not matches(node.value):
            report.fail(f"{name} has invalid format '{node.value}'", node)

    def _port(self, node: Node, name: str, report: Reporter):
        if not checks.is_integer(node):
            report.fail(f"{name} must be int", node)
        elif not checks.in_port_range(checks.integer_value(node)):
            report.fail(f"{name} value out of range", node)

    # --- Entities ---

    def validate_root(self, root: Node, report: Reporter):
        if not root.is_mapping:
            report.fail("root must be object", root)
            return

        api = self._require(root, "apiVersion", report)
        if api is not None:
            self._one_of(api, "apiVersion", checks.API_VERSIONS, report)

        kind = self._require(root, "kind", report)
        if kind is not None:
            self._one_of(kind, "kind", checks.KINDS, report)

        metadata = self._require(root, "metadata", report)
        if metadata is not None:
            self.validate_metadata(metadata, report)

        spec = self._require(root, "spec", report)
        if spec is not None:
            self.validate_spec(spec, report)

    def validate_metadata(self, node: Node, report: Reporter):
        if not self._object(node, "metadata", report):
            return

        name = self._require(node, "name", report)
        if name is not None and self._string(name, "name", report):
            if not name.value.strip():
                # Whitespace-only names count as missing
                report.fail("name is required", name)

        namespace = field(node, "namespace")
        if namespace is not None:
            self._string(namespace, "namespace", report)

        labels = field(node, "labels")
        if labels is not None and self._object(labels, "labels", report):
            for key, value in pairs(labels):
                if not checks.is_string(key):
                    report.fail("labels key must be string", key)
                if not checks.is_string(value):
                    report.fail("labels value must be string", value)

    def validate_spec(self, node: Node, report: Reporter):
        if not self._object(node, "spec", report):
            return

        os_node = field(node, "os")
        if os_node is not None:
            self.validate_os(os_node, report)

        containers = self._require(node, "containers", report)
        if containers is None:
            return
        if not containers.is_sequence:
            report.fail("containers must be array", containers)
            return
        if not containers.children and not self.config.allow_empty_containers:
            report.fail("containers value out of range", containers)
            return

        for container in containers.children:
            self.validate_container(container, report)

    def validate_os(self, node: Node, report: Reporter):
        """`os` is either a bare OS name or an object with a `name` field."""
        if node.is_scalar:
            self._one_of(node, "os", checks.OS_NAMES, report)
        elif node.is_mapping:
            name = self._require(node, "name", report)
            if name is not None:
                self._one_of(name, "name", checks.OS_NAMES, report)
        else:
            report.fail("os must be string or object", node)

    def validate_container(self, node: Node, report: Reporter):
        if not node.is_mapping:
            report.fail("container must be object", node)
            return

        name = self._require(node, "name", report)
        if name is not None:
            self._formatted(name, "name", checks.matches_name, report)

        image = self._require(node, "image", report)
        if image is not None:
            self._formatted(image, "image", self.image_reference.matches, report)

        ports = field(node, "ports")
        if ports is not None:
            if not ports.is_sequence:
                report.fail("ports must be array", ports)
            else:
                for port in ports.children:
                    self.validate_port(port, report)

        for probe_name in ("readinessProbe", "livenessProbe"):
            probe = field(node, probe_name)
            if probe is not None:
                self.validate_probe(probe, probe_name, report)

        resources = self._require(node, "resources", report)
        if resources is not None:
            self.validate_resources(resources, report)

    def validate_port(self, node: Node, report: Reporter):
        if not node.is_mapping:
            report.fail("ports item must be object", node)
            return

        container_port = self._require(node, "containerPort", report)
        if container_port is not None:
            self._port(container_port, "containerPort", report)

        protocol = field(node, "protocol")
        if protocol is not None:
            self._one_of(protocol, "protocol", checks.PROTOCOLS, report)

    def validate_probe(self, node: Node, probe_name: str, report: Reporter):
        """Only httpGet probes are recognised; exec/tcpSocket are ignored."""
        if not self._object(node, probe_name, report):
            return

        http_get = self._require(node, "httpGet", report)
        if http_get is None or not self._object(http_get, "httpGet", report):
            return

        path = self._require(http_get, "path", report)
        if path is not None:
            self._formatted(path, "path", checks.matches_http_path, report)

        port = self._require(http_get, "port", report)
        if port is not None:
            self._port(port, "port", report)

    def validate_resources(self, node: Node, report: Reporter):
        if not self._object(node, "resources", report):
            return

        for section in ("limits", "requests"):
            quantities = field(node, section)
            if quantities is not None:
                self.validate_quantities(quantities, section, report)

    def validate_quantities(self, node: Node, section: str, report: Reporter):
        """Checks cpu/memory entries; other resource names pass through."""
        if not self._object(node, section, report):
            return

        cpu = field(node, "cpu")
        if cpu is not None and not checks.is_integer(cpu):
            report.fail("cpu must be int", cpu)

        memory = field(node, "memory")
        if memory is not None:
            self._formatted(memory, "memory", checks.matches_memory, report)


def validate(root: Node, config: Optional[ValidatorConfig] = None) -> List[Violation]:
    """Convenience wrapper: validate `root` with a fresh PodValidator."""
    return PodValidator(config).validate(root)
