"""
Resolution passes, run in order after duplicate validation:
- type_resolver: parameter types of functions and declared methods
- expr_resolver: identifiers in function bodies
"""

from rlc_dsl.resolution.expr_resolver import GlobalScope, resolve_expr, resolve_function_body
from rlc_dsl.resolution.type_resolver import resolve_parameters, resolve_type_name

__all__ = [
    "GlobalScope",
    "resolve_expr",
    "resolve_function_body",
    "resolve_parameters",
    "resolve_type_name",
]
