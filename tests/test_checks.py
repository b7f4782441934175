"""
PODLINT CHECKS SUITE
--------------------
Boundary behaviour of the stateless type and format predicates.
"""

import pytest

from podlint.core.models import Node, NodeKind
from podlint.validator import checks


def scalar(tag, value):
    return Node(kind=NodeKind.SCALAR, tag=tag, value=value, line=1)


@pytest.mark.parametrize("port, accepted", [
    (0, False),
    (1, True),
    (8080, True),
    (65535, True),
    (65536, False),
    (-1, False),
])
def test_port_range_boundaries(port, accepted):
    assert checks.in_port_range(port) is accepted


@pytest.mark.parametrize("value, accepted", [
    ("512Mi", True),
    ("2Gi", True),
    ("100Ki", True),
    ("512mi", False),
    ("512", False),
    ("512Xi", False),
    ("-5Gi", False),
    ("1.5Gi", False),
    ("Gi", False),
    ("512Mi\n", False),
])
def test_memory_quantity_format(value, accepted):
    assert checks.matches_memory(value) is accepted


@pytest.mark.parametrize("value, accepted", [
    ("registry.bigbrother.io/app:1.0", True),
    ("registry.bigbrother.io/team/app:latest", True),
    ("registry.bigbrother.io/team/:1.0", True),
    ("docker.io/app:1.0", False),
    ("registry.bigbrother.io/app", False),
    ("registry.bigbrother.io/app:", False),
    ("registry.bigbrother.io/app:1.0/x", False),
    ("registry.bigbrother.io/:1.0", False),
    ("registry.bigbrother.io/app name:1.0", False),
    ("registry.bigbrother.iox/app:1.0", False),
])
def test_image_reference_format(value, accepted):
    assert checks.ImageReference("registry.bigbrother.io").matches(value) is accepted


def test_image_reference_uses_configured_registry():
    ref = checks.ImageReference("registry.internal:5000")
    assert ref.matches("registry.internal:5000/app:1.0")
    assert not ref.matches("registry.bigbrother.io/app:1.0")


@pytest.mark.parametrize("value, accepted", [
    ("web", True),
    ("web_server", True),
    ("web_server_2", True),
    ("1st", True),
    ("Web-1", False),
    ("_web", False),
    ("web_", False),
    ("web__server", False),
    ("", False),
])
def test_snake_case_name_format(value, accepted):
    assert checks.matches_name(value) is accepted


def test_http_path_must_be_absolute():
    assert checks.matches_http_path("/health")
    assert not checks.matches_http_path("health")


def test_is_integer_requires_tag_and_decimal_text():
    assert checks.is_integer(scalar("integer", "8080"))
    assert checks.is_integer(scalar("integer", "-3"))
    # Integer-tagged but not a base-10 literal: a type violation, not a crash
    assert not checks.is_integer(scalar("integer", "0x1F90"))
    assert not checks.is_integer(scalar("integer", "1_000"))
    assert not checks.is_integer(scalar("string", "8080"))
    assert not checks.is_integer(None)


def test_is_string_only_for_string_scalars():
    assert checks.is_string(scalar("string", "web"))
    assert not checks.is_string(scalar("integer", "1"))
    assert not checks.is_string(Node(kind=NodeKind.MAPPING, tag="mapping"))
    assert not checks.is_string(None)


def test_integer_value_parses_base_ten():
    assert checks.integer_value(scalar("integer", "0080")) == 80
