import os
import sys

import pytest

# Ensure the 'src' directory is in the python path so we can import podlint
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from podlint.core.config import ValidatorConfig
from podlint.parsing.loader import ManifestLoader
from podlint.validator.validator import PodValidator

# Line numbers below are referenced by the tests; keep the layout stable.
VALID_POD = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
  namespace: default
  labels:
    app: web
spec:
  os: linux
  containers:
    - name: web_server
      image: registry.bigbrother.io/web:1.0
      ports:
        - containerPort: 8080
          protocol: TCP
      readinessProbe:
        httpGet:
          path: /health
          port: 8080
      livenessProbe:
        httpGet:
          path: /live
          port: 8080
      resources:
        limits:
          cpu: 2
          memory: 512Mi
        requests:
          cpu: 1
          memory: 256Mi
"""

MINIMAL_HEADER = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
spec:
"""


@pytest.fixture
def valid_pod():
    return VALID_POD


@pytest.fixture
def loader():
    return ManifestLoader()


@pytest.fixture
def lint(loader):
    """Validates YAML text and returns [(line, message), ...]."""
    def _lint(text, **config):
        validator = PodValidator(ValidatorConfig(**config))
        return [(v.line, v.message) for v in validator.validate(loader.load(text))]
    return _lint


@pytest.fixture
def lint_container(lint):
    """Validates a single container body (indented 6 spaces) inside a minimal Pod."""
    def _lint(body, **config):
        text = MINIMAL_HEADER + "  containers:\n    - name: web\n" + body
        return lint(text, **config)
    return _lint
