"""
Processors module for the robot language.

Turns textX parse trees into the semantic model consumed by validation and
resolution.
"""

from rlc_dsl.processors.model_builder import (
    add_skillset_elements,
    build_rlc_model,
    convert_expr,
)

__all__ = [
    "add_skillset_elements",
    "build_rlc_model",
    "convert_expr",
]
