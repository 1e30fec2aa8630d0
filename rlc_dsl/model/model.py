"""
The robot-language model.

`Model` owns every declaration of a program in append-only, per-kind stores:
an entity's identifier is its index in its store and never changes. The
model also owns the ROS call registry and a reference to the imported
skillset model, and drives the pipeline stages:

    duplicate()  ->  resolve_parameters()  ->  resolve_expr()

Rendering with `to_lang()` works at any stage.
"""

from rlc_dsl.model.entities import DeclMethod, Function, Robot, RlcType
from rlc_dsl.model.ids import DeclMethodId, FunctionId, RlcTypeId, RobotId
from rlc_dsl.model.ros_call import CallRegistry, RosCallType
from rlc_dsl.skillset.model import SkillsetModel


def _get(store, id):
    if 0 <= id.index < len(store):
        return store[id.index]
    return None


class Model:
    def __init__(self, imported_model: SkillsetModel = None):
        self.imported_model = imported_model if imported_model is not None else SkillsetModel()
        self._includes = []
        self._robots = []
        self._types = []
        self._functions = []
        self._declared_methods = []
        self._ros_calls = CallRegistry()

    # ------------------------------------------------------------------------------
    # Includes

    def add_include(self, file: str) -> None:
        self._includes.append(str(file))

    @property
    def includes(self):
        return tuple(self._includes)

    # ------------------------------------------------------------------------------
    # Robots

    def add_robot(self, robot: Robot) -> RobotId:
        robot.id = RobotId(len(self._robots))
        self._robots.append(robot)
        return robot.id

    @property
    def robots(self):
        return tuple(self._robots)

    def get_robot(self, id: RobotId):
        return _get(self._robots, id)

    # ------------------------------------------------------------------------------
    # Types

    def add_type(self, rlc_type: RlcType) -> RlcTypeId:
        rlc_type.id = RlcTypeId(len(self._types))
        self._types.append(rlc_type)
        return rlc_type.id

    @property
    def types(self):
        return tuple(self._types)

    def get_type(self, id: RlcTypeId):
        return _get(self._types, id)

    # ------------------------------------------------------------------------------
    # Functions

    def add_function(self, function: Function) -> FunctionId:
        function.id = FunctionId(len(self._functions))
        self._functions.append(function)
        return function.id

    @property
    def functions(self):
        return tuple(self._functions)

    def get_function(self, id: FunctionId):
        return _get(self._functions, id)

    # ------------------------------------------------------------------------------
    # Declared methods

    def add_declared_method(self, method: DeclMethod) -> DeclMethodId:
        method.id = DeclMethodId(len(self._declared_methods))
        self._declared_methods.append(method)
        return method.id

    @property
    def declared_methods(self):
        return tuple(self._declared_methods)

    def get_declared_method(self, id: DeclMethodId):
        return _get(self._declared_methods, id)

    # ------------------------------------------------------------------------------
    # ROS calls

    def add_ros_call(self, topic: str, kind: RosCallType) -> None:
        self._ros_calls.register_call(topic, kind)

    @property
    def ros_calls(self) -> CallRegistry:
        return self._ros_calls

    # ------------------------------------------------------------------------------
    # Lookup by identifier

    def get(self, id):
        """Return the entity for any typed identifier, or None when out of range."""
        getters = {
            RobotId: self.get_robot,
            RlcTypeId: self.get_type,
            FunctionId: self.get_function,
            DeclMethodId: self.get_declared_method,
        }
        getter = getters.get(type(id))
        if getter is None:
            raise TypeError(f"Not a model identifier: {id!r}")
        return getter(id)

    def set_parameter_type(self, owner_id, index: int, typ) -> None:
        """Rewrite the type of one parameter of a function or declared method."""
        if not isinstance(owner_id, (FunctionId, DeclMethodId)):
            raise TypeError(f"Parameters belong to functions or methods, got {owner_id!r}")
        owner = self.get(owner_id)
        if owner is None:
            raise KeyError(owner_id)
        owner.parameters[index].typ = typ

    # ------------------------------------------------------------------------------
    # Pipeline stages

    def duplicate(self) -> None:
        from rlc_dsl.validation import verify_unique_names

        verify_unique_names(self)

    def resolve_parameters(self) -> None:
        from rlc_dsl.resolution import resolve_parameters

        resolve_parameters(self)

    def resolve_expr(self) -> None:
        from rlc_dsl.resolution import resolve_expr

        resolve_expr(self)

    def resolve(self) -> None:
        self.resolve_parameters()
        self.resolve_expr()

    # ------------------------------------------------------------------------------
    # Rendering

    def to_lang(self) -> str:
        lines = [f'include "{x}"' for x in self._includes]
        lines.extend(x.to_lang(self) for x in self._robots)
        lines.extend(x.to_lang(self) for x in self._types)
        lines.append("")
        lines.extend(x.to_lang(self) for x in self._functions)
        lines.extend(x.to_lang(self) for x in self._declared_methods)
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.to_lang()
