"""
Validation module for robot-language models.

Checks that run on the fully loaded model before any resolution:
- duplicate_validators: name uniqueness per namespace, and local types
  against the types of included skillset files
"""

from rlc_dsl.validation.duplicate_validators import (
    verify_unique_includes,
    verify_unique_names,
    verify_unique_types,
)

__all__ = [
    "verify_unique_includes",
    "verify_unique_names",
    "verify_unique_types",
]
