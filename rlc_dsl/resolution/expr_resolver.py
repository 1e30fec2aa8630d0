"""
Identifier resolution inside function bodies.

All bodies are resolved against one snapshot of the model taken when the
pass starts. Bindings are written into the live model's expressions. ROS
calls reach the live model's call registry only once every body resolved.
"""

import copy

from rlc_dsl.errors import ResolveError
from rlc_dsl.log import get_logger
from rlc_dsl.model.expressions import FunctionCall, ParameterRef, Reference, RosCallExpr
from rlc_dsl.model.ros_call import CallRegistry
from rlc_dsl.model.types import ImportedType, LocalType, SkillsetType

logger = get_logger(__name__)


class GlobalScope:
    """
    Names visible from every function body.

    Values: functions, then local types, imported types and skillsets, in
    decreasing precedence. Callables: functions, then declared methods.
    """

    def __init__(self, snapshot):
        self.values = {}
        self.callables = {}

        # lowest precedence first, later entries overwrite
        for skillset in snapshot.imported_model.skillsets():
            self.values[str(skillset)] = SkillsetType(skillset.id)
        for data_type in snapshot.imported_model.types():
            self.values[data_type.name] = ImportedType(data_type.id)
        for rlc_type in snapshot.types:
            self.values[rlc_type.name] = LocalType(rlc_type.id)
        for function in snapshot.functions:
            self.values[function.name] = function.id

        for method in snapshot.declared_methods:
            self.callables[method.name] = method.id
        for function in snapshot.functions:
            self.callables[function.name] = function.id

    def lookup(self, name):
        return self.values.get(name)

    def lookup_callable(self, name):
        return self.callables.get(name)


def resolve_function_body(function, scope, calls):
    """Bind every identifier in `function`'s body; raise on the first unbound one."""

    def resolve(expr):
        if isinstance(expr, Reference):
            index = function.parameter_index(expr.name)
            if index is not None:
                expr.target = ParameterRef(index)
            else:
                target = scope.lookup(expr.name)
                if target is None:
                    raise ResolveError(f"identifier '{expr.name}'", expr.position)
                expr.target = target
        elif isinstance(expr, FunctionCall):
            target = scope.lookup_callable(expr.name)
            if target is None:
                raise ResolveError(f"function '{expr.name}'", expr.position)
            expr.target = target
        elif isinstance(expr, RosCallExpr):
            calls.register_call(expr.topic, expr.kind)

        for child in expr.children():
            resolve(child)

    for expr in function.body:
        resolve(expr)


def resolve_expr(model):
    """Resolve the bodies of all functions in stored order, failing fast."""
    logger.info("[RESOLVE] Expressions")
    snapshot = copy.deepcopy(model)
    scope = GlobalScope(snapshot)
    pending = CallRegistry()
    for function in model.functions:
        logger.debug(f"[RESOLVE] Function '{function.name}'")
        resolve_function_body(function, scope, pending)

    # only a fully resolved pass reaches the model's registry
    for call in pending:
        model.add_ros_call(call.topic, call.kind)
