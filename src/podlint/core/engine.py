#!/usr/bin/env python3
"""
PODLINT ENGINE - The Orchestrator
---------------------------------
The LintEngine takes a manifest through its three phases:
read (BOM-aware), compose into a node tree, validate. System-level
failures in the first two phases raise PodLintError subclasses; the
validator itself only ever produces violations.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from podlint.core.config import ValidatorConfig
from podlint.core.errors import DocumentReadError
from podlint.core.models import Violation
from podlint.parsing.loader import ManifestLoader
from podlint.validator.validator import PodValidator

logger = logging.getLogger("podlint.engine")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_SYSTEM_ERROR = 2


@dataclass
class LintReport:
    """Outcome of linting one manifest."""
    file_name: str
    policy: str
    violations: List[Violation] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.violations

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.success else EXIT_VIOLATIONS


class LintEngine:
    """
    Principal orchestrator. Holds the loader and validator for a run
    configuration; safe to reuse across files.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()
        self.loader = ManifestLoader()
        self.validator = PodValidator(self.config)

    def lint_file(self, path: Union[str, Path]) -> LintReport:
        """
        Reads and validates a manifest from disk.

        Raises:
            DocumentReadError: the file cannot be read or decoded.
            DocumentParseError: the content is not a single YAML document.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Unable to read {path}: {e}")
            raise DocumentReadError(str(e)) from e

        return self.lint_text(text, file_name=path.name)

    def lint_text(self, text: str, file_name: str = "<stdin>") -> LintReport:
        """Validates manifest text that is already in memory."""
        root = self.loader.load(text)
        violations = self.validator.validate(root)
        logger.info(f"{file_name}: {len(violations)} violation(s) under {self.config.policy}")
        return LintReport(file_name=file_name, policy=self.config.policy, violations=violations)
