#!/usr/bin/env python3
"""
PODLINT CONFIGURATION
---------------------
Run-level settings shared by the engine and the validator. A config is
selected once per run; it never changes in the middle of a pass.

Author: PodLint Team
Date: 2026-10-17
"""

from dataclasses import dataclass

POLICY_ACCUMULATE_ALL = "accumulate-all"
POLICY_FAIL_FAST = "fail-fast"
POLICY_NAMES = (POLICY_ACCUMULATE_ALL, POLICY_FAIL_FAST)

DEFAULT_REGISTRY = "registry.bigbrother.io"


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Args:
        policy: 'accumulate-all' collects every violation, 'fail-fast'
            stops at the first one.
        allow_empty_containers: Accept `containers: []` instead of
            reporting it as out of range.
        image_registry: Registry host every container image must be pulled from.
    """
    policy: str = POLICY_ACCUMULATE_ALL
    allow_empty_containers: bool = False
    image_registry: str = DEFAULT_REGISTRY

    def __post_init__(self):
        if self.policy not in POLICY_NAMES:
            raise ValueError(
                f"Unknown policy '{self.policy}'. Expected one of: {', '.join(POLICY_NAMES)}"
            )
        if not self.image_registry or self.image_registry.endswith("/"):
            raise ValueError(f"Invalid image registry '{self.image_registry}'")
