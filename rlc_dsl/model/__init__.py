"""
Semantic model of robot-language programs.

- ids / position: identifiers and source locations
- types: parameter types, unresolved and resolved
- entities: robots, types, functions, declared methods
- expressions / ros_call: function bodies and the ROS call registry
- model: the entity store and pipeline entry points
"""

from rlc_dsl.model.ids import DeclMethodId, FunctionId, RlcTypeId, RobotId
from rlc_dsl.model.position import Position
from rlc_dsl.model.types import (
    Boolean,
    ImportedType,
    LocalType,
    SkillsetType,
    Type,
    Undefined,
    Unresolved,
)
from rlc_dsl.model.ros_call import CallRegistry, RosCall, RosCallType
from rlc_dsl.model.expressions import (
    Expr,
    FunctionCall,
    Literal,
    ParameterRef,
    Reference,
    RosCallExpr,
)
from rlc_dsl.model.entities import DeclMethod, Function, Parameter, Robot, RlcType
from rlc_dsl.model.model import Model

__all__ = [
    "Boolean",
    "CallRegistry",
    "DeclMethod",
    "DeclMethodId",
    "Expr",
    "Function",
    "FunctionCall",
    "FunctionId",
    "ImportedType",
    "Literal",
    "LocalType",
    "Model",
    "Parameter",
    "ParameterRef",
    "Position",
    "Reference",
    "RlcType",
    "RlcTypeId",
    "Robot",
    "RobotId",
    "RosCall",
    "RosCallExpr",
    "RosCallType",
    "SkillsetType",
    "Type",
    "Undefined",
    "Unresolved",
]
