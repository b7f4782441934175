#!/usr/bin/env python3
"""
PODLINT REPORTER - The Court Clerk
----------------------------------
Collects violations in discovery order. What happens after a violation
is recorded is decided by the policy the reporter was created with:

* AccumulateAll - record and keep walking.
* FailFast      - record and unwind the whole pass.

A Reporter lives for exactly one validation pass and is threaded
explicitly through every validator call.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from typing import Dict, List, Optional, Union

from podlint.core.config import POLICY_ACCUMULATE_ALL, POLICY_FAIL_FAST
from podlint.core.errors import ValidationAborted
from podlint.core.models import Known, Node, UNKNOWN, Violation

logger = logging.getLogger("podlint.validator")


class AccumulateAll:
    name = POLICY_ACCUMULATE_ALL

    def after_record(self, violation: Violation) -> None:
        return None


class FailFast:
    name = POLICY_FAIL_FAST

    def after_record(self, violation: Violation) -> None:
        raise ValidationAborted(violation)


POLICIES: Dict[str, Union[AccumulateAll, FailFast]] = {
    POLICY_ACCUMULATE_ALL: AccumulateAll(),
    POLICY_FAIL_FAST: FailFast(),
}


class Reporter:
    """Per-run violation accumulator."""

    def __init__(self, policy: str = POLICY_ACCUMULATE_ALL):
        try:
            self.policy = POLICIES[policy]
        except KeyError:
            raise ValueError(f"Unknown policy '{policy}'") from None
        self.violations: List[Violation] = []

    def fail(self, message: str, node: Optional[Node] = None) -> None:
        """
        Records a violation at `node`'s line, or with an unknown position
        when no node exists (the field is absent from its parent).
        """
        position = Known(node.line) if node is not None else UNKNOWN
        violation = Violation(message=message, position=position)
        self.violations.append(violation)
        logger.debug(f"violation #{len(self.violations)}: {message} ({position})")
        self.policy.after_record(violation)

    def missing(self, field_name: str) -> None:
        self.fail(f"{field_name} is required")
