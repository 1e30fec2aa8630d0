"""
Conversion of textX parse trees into the semantic model.

The robot-language tree becomes a `Model` whose parameter types are still
`Unresolved`; the skillset-file tree is appended to a `SkillsetModel`.
Positions are taken from textX's `get_location()`.
"""

from textx import get_location

from rlc_dsl.model.entities import DeclMethod, Function, Parameter, Robot, RlcType
from rlc_dsl.model.expressions import FunctionCall, Literal, Reference, RosCallExpr
from rlc_dsl.model.model import Model
from rlc_dsl.model.position import Position
from rlc_dsl.model.ros_call import RosCallType
from rlc_dsl.model.types import Boolean, Unresolved
from rlc_dsl.skillset.model import DataType, Skillset

BOOLEAN_TYPE_NAME = "bool"


def _position(obj):
    return Position.from_location(get_location(obj))


# ------------------------------------------------------------------------------
# Robot-language programs

def _convert_type(type_ref):
    if type_ref.name == BOOLEAN_TYPE_NAME:
        return Boolean()
    return Unresolved(type_ref.name, _position(type_ref))


def _convert_parameters(tx_parameters):
    return [
        Parameter(p.name, _convert_type(p.typ), _position(p))
        for p in tx_parameters or []
    ]


def convert_expr(node):
    """Convert one textX expression node."""
    cname = node.__class__.__name__

    if cname == "Literal":
        return Literal(node.value, _position(node))
    if cname == "Ref":
        return Reference(node.name, _position(node))
    if cname == "Call":
        args = [convert_expr(a) for a in node.args or []]
        return FunctionCall(node.func, args, _position(node))
    if cname == "RosCall":
        args = [convert_expr(a) for a in node.args or []]
        return RosCallExpr(RosCallType(node.kind), node.topic, args, _position(node))

    raise ValueError(f"Unsupported expression node: {cname}")


def build_rlc_model(tx_model, imported_model=None) -> Model:
    """Register every declaration of a parsed program, in source order."""
    model = Model(imported_model)

    for element in tx_model.elements:
        cname = element.__class__.__name__

        if cname == "Include":
            model.add_include(element.file)
        elif cname == "Robot":
            model.add_robot(Robot(element.name, _position(element)))
        elif cname == "TypeDecl":
            model.add_type(RlcType(element.name, _position(element)))
        elif cname == "Function":
            model.add_function(Function(
                element.name,
                _convert_parameters(element.parameters),
                [convert_expr(e) for e in element.body or []],
                _position(element),
            ))
        elif cname == "DeclMethod":
            model.add_declared_method(DeclMethod(
                element.name,
                _convert_parameters(element.parameters),
                _position(element),
            ))
        else:
            raise ValueError(f"Unsupported declaration: {cname}")

    return model


# ------------------------------------------------------------------------------
# Skillset files

def add_skillset_elements(tx_model, imported_model):
    """Append the types and skillsets of a parsed skillset file to `imported_model`."""
    for element in tx_model.elements:
        cname = element.__class__.__name__

        if cname == "DataType":
            imported_model.add_type(DataType(element.name, _position(element)))
        elif cname == "Skillset":
            skills = [s.name for s in element.skills or []]
            imported_model.add_skillset(Skillset(element.name, skills, _position(element)))
    return imported_model
