"""
Unit tests for identifier resolution in function bodies.
"""

import pytest

from rlc_dsl.errors import ResolveError
from rlc_dsl.model import (
    DeclMethod,
    DeclMethodId,
    Function,
    FunctionCall,
    FunctionId,
    ImportedType,
    Literal,
    LocalType,
    Model,
    ParameterRef,
    Reference,
    RlcType,
    RlcTypeId,
    RosCall,
    RosCallExpr,
    RosCallType,
    SkillsetType,
)
from rlc_dsl.resolution import GlobalScope
from rlc_dsl.skillset import SkillsetId, TypeId


class TestBinding:
    def test_parameter_reference(self, make_param):
        ref = Reference("g")
        model = Model()
        model.add_type(RlcType("Gripper"))
        model.add_function(Function("f", [make_param("x", "Gripper"), make_param("g", "Gripper")], [ref]))

        model.resolve()

        assert ref.target == ParameterRef(1)

    def test_global_references(self, imported_model):
        refs = [Reference(n) for n in ("Gripper", "Float", "Arm", "helper")]
        model = Model(imported_model)
        model.add_type(RlcType("Gripper"))
        model.add_function(Function("helper"))
        model.add_function(Function("f", body=refs))

        model.resolve_expr()

        assert [r.target for r in refs] == [
            LocalType(RlcTypeId(0)),
            ImportedType(TypeId(0)),
            SkillsetType(SkillsetId(0)),
            FunctionId(0),
        ]

    def test_parameter_shadows_global_name(self, make_param):
        ref = Reference("helper")
        model = Model()
        model.add_type(RlcType("T"))
        model.add_function(Function("helper"))
        model.add_function(Function("f", [make_param("helper", "T")], [ref]))

        model.resolve()

        assert ref.target == ParameterRef(0)

    def test_calls_bind_functions_before_methods(self):
        to_function = FunctionCall("go")
        to_method = FunctionCall("grasp")
        model = Model()
        model.add_declared_method(DeclMethod("go"))
        model.add_declared_method(DeclMethod("grasp"))
        model.add_function(Function("go"))
        model.add_function(Function("f", body=[to_function, to_method]))

        model.resolve_expr()

        assert to_function.target == FunctionId(0)
        assert to_method.target == DeclMethodId(1)

    def test_call_arguments_are_resolved(self, make_param):
        arg = Reference("x")
        model = Model()
        model.add_type(RlcType("T"))
        model.add_function(Function("g"))
        model.add_function(Function("f", [make_param("x", "T")], [FunctionCall("g", [Literal(1), arg])]))

        model.resolve()

        assert arg.target == ParameterRef(0)

    def test_function_can_refer_to_later_function(self):
        call = FunctionCall("later")
        model = Model()
        model.add_function(Function("first", body=[call]))
        model.add_function(Function("later"))

        model.resolve_expr()

        assert call.target == FunctionId(1)


class TestFailures:
    def test_unbound_identifier(self, make_position):
        model = Model()
        model.add_function(Function("f", body=[Reference("ghost", make_position(3, 9))]))

        with pytest.raises(ResolveError) as exc:
            model.resolve_expr()

        assert exc.value.element == "identifier 'ghost'"
        assert exc.value.position == make_position(3, 9)

    def test_unknown_callee(self):
        model = Model()
        model.add_function(Function("f", body=[FunctionCall("nowhere")]))

        with pytest.raises(ResolveError) as exc:
            model.resolve_expr()

        assert exc.value.element == "function 'nowhere'"

    def test_parameter_of_another_function_is_not_visible(self, make_param):
        model = Model()
        model.add_type(RlcType("T"))
        model.add_function(Function("f", [make_param("x", "T")]))
        model.add_function(Function("g", body=[Reference("x")]))

        with pytest.raises(ResolveError):
            model.resolve()

    def test_fail_fast_leaves_later_functions_untouched(self):
        later = Reference("f")
        model = Model()
        model.add_function(Function("f", body=[Reference("ghost")]))
        model.add_function(Function("g", body=[later]))

        with pytest.raises(ResolveError):
            model.resolve_expr()

        assert later.target is None


class TestRosCalls:
    def test_calls_are_registered_once(self, make_param):
        model = Model()
        model.add_type(RlcType("T"))
        body = [
            RosCallExpr(RosCallType.PUBLISH, "/cmd_vel", [Reference("x")]),
            RosCallExpr(RosCallType.PUBLISH, "/cmd_vel", [Literal(2)]),
            RosCallExpr(RosCallType.SUBSCRIBE, "/cmd_vel"),
        ]
        model.add_function(Function("f", [make_param("x", "T")], body))

        model.resolve()

        assert len(model.ros_calls) == 2
        assert RosCall("/cmd_vel", RosCallType.PUBLISH) in model.ros_calls
        assert RosCall("/cmd_vel", RosCallType.SUBSCRIBE) in model.ros_calls
        assert body[0].args[0].target == ParameterRef(0)

    def test_nested_ros_calls_are_found(self):
        model = Model()
        model.add_function(Function("helper"))
        nested = RosCallExpr(RosCallType.SERVICE, "/reset")
        model.add_function(Function("f", body=[FunctionCall("helper", [nested])]))

        model.resolve_expr()

        assert RosCall("/reset", RosCallType.SERVICE) in model.ros_calls

    def test_failed_pass_registers_no_calls(self):
        model = Model()
        model.add_function(Function("f", body=[RosCallExpr(RosCallType.PUBLISH, "/cmd_vel")]))
        model.add_function(Function("g", body=[Reference("ghost")]))

        with pytest.raises(ResolveError):
            model.resolve_expr()

        assert len(model.ros_calls) == 0
        assert RosCall("/cmd_vel", RosCallType.PUBLISH) not in model.ros_calls


class TestSnapshot:
    def test_scope_is_built_from_snapshot(self):
        model = Model()
        model.add_type(RlcType("T"))
        model.add_function(Function("f"))

        scope = GlobalScope(model)

        assert scope.lookup("T") == LocalType(RlcTypeId(0))
        assert scope.lookup("f") == FunctionId(0)
        assert scope.lookup_callable("T") is None

    def test_live_model_entities_are_bound(self):
        ref = Reference("T")
        model = Model()
        model.add_type(RlcType("T"))
        function = Function("f", body=[ref])
        model.add_function(function)

        model.resolve_expr()

        assert model.functions[0] is function
        assert function.body[0].target == LocalType(RlcTypeId(0))
        assert len(model.functions) == 1
