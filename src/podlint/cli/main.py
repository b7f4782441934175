#!/usr/bin/env python3
"""
PODLINT CLI - Pod Manifest Linter
---------------------------------
Translates the command line into a single LintEngine run and maps the
outcome onto process exit codes:

    0  no violations
    1  at least one schema violation
    2  usage error, unreadable file or unparseable document

Author: PodLint Team
Date: 2026-10-17
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from podlint.cli.formatter import ReportFormatter
from podlint.core.config import (
    DEFAULT_REGISTRY,
    POLICY_ACCUMULATE_ALL,
    POLICY_FAIL_FAST,
    ValidatorConfig,
)
from podlint.core.engine import EXIT_SYSTEM_ERROR, LintEngine
from podlint.core.errors import PodLintError

VERSION = "podlint v1.0.0"

logger = logging.getLogger("podlint.cli")


class PodLintCLI:
    """
    CLI wrapper that turns user arguments into a validator configuration
    and prints the resulting report.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="podlint",
            description="PodLint - schema validator for Pod manifests",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=VERSION)
        self.parser.add_argument("path", help="Path to the manifest to validate")
        self.parser.add_argument("--fail-fast", action="store_true",
                                 help="Stop at the first violation instead of reporting all of them")
        self.parser.add_argument("--allow-empty-containers", action="store_true",
                                 help="Accept an empty spec.containers list")
        self.parser.add_argument("--registry", default=DEFAULT_REGISTRY,
                                 help=f"Registry every image must come from (default: {DEFAULT_REGISTRY})")
        self.parser.add_argument("--format", dest="output_format", choices=ReportFormatter.FORMATS,
                                 default="text", help="Output format (default: text)")
        self.parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr")

    def _configure_logging(self, debug: bool):
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.debug)

        formatter = ReportFormatter(args.output_format)
        file_name = Path(args.path).name

        try:
            config = ValidatorConfig(
                policy=POLICY_FAIL_FAST if args.fail_fast else POLICY_ACCUMULATE_ALL,
                allow_empty_containers=args.allow_empty_containers,
                image_registry=args.registry,
            )
        except ValueError as e:
            self.parser.error(str(e))

        try:
            report = LintEngine(config).lint_file(args.path)
        except PodLintError as e:
            formatter.print_system_error(file_name, str(e))
            return EXIT_SYSTEM_ERROR

        formatter.print_report(report)
        logger.debug(f"exit code {report.exit_code}")
        return report.exit_code


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        sys.exit(PodLintCLI().run(argv))
    except KeyboardInterrupt:
        ReportFormatter().print_system_error("podlint", "terminated by user")
        sys.exit(EXIT_SYSTEM_ERROR)


if __name__ == "__main__":
    main()
