"""
Declarations held by the model.

Entities are created by the loader without an identifier; `Model.add_*`
assigns one on insertion.
"""

from typing import List, Optional

from rlc_dsl.model.position import Position
from rlc_dsl.model.types import Type, Undefined


class Robot:
    def __init__(self, name: str, position: Optional[Position] = None):
        self.name = name
        self.position = position
        self.id = None

    def to_lang(self, model) -> str:
        return f"robot {self.name}"

    def __repr__(self):
        return f"Robot({self.name!r}, id={self.id})"


class RlcType:
    """A type declared in the robot-language source."""

    def __init__(self, name: str, position: Optional[Position] = None):
        self.name = name
        self.position = position
        self.id = None

    def to_lang(self, model) -> str:
        return f"type {self.name}"

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"RlcType({self.name!r}, id={self.id})"


class Parameter:
    def __init__(self, name: str, typ: Type = None, position: Optional[Position] = None):
        self.name = name
        self.typ = typ if typ is not None else Undefined()
        self.position = position

    def to_lang(self, model) -> str:
        return f"{self.name}: {self.typ.to_lang(model)}"

    def __repr__(self):
        return f"Parameter({self.name!r}, {self.typ!r})"


def _signature(name: str, parameters: List[Parameter], model) -> str:
    params = ", ".join(p.to_lang(model) for p in parameters)
    return f"{name}({params})"


class Function:
    """A function with a body of expressions."""

    def __init__(self, name: str, parameters=None, body=None, position: Optional[Position] = None):
        self.name = name
        self.parameters: List[Parameter] = list(parameters or [])
        self.body = list(body or [])
        self.position = position
        self.id = None

    def parameter_index(self, name: str) -> Optional[int]:
        for i, param in enumerate(self.parameters):
            if param.name == name:
                return i
        return None

    def to_lang(self, model) -> str:
        header = f"fn {_signature(self.name, self.parameters, model)}"
        if not self.body:
            return header + " {}"
        lines = [header + " {"]
        lines.extend(f"    {expr.to_lang(model)};" for expr in self.body)
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self):
        return f"Function({self.name!r}, id={self.id})"


class DeclMethod:
    """A method signature declared without a body."""

    def __init__(self, name: str, parameters=None, position: Optional[Position] = None):
        self.name = name
        self.parameters: List[Parameter] = list(parameters or [])
        self.position = position
        self.id = None

    def to_lang(self, model) -> str:
        return f"method {_signature(self.name, self.parameters, model)}"

    def __repr__(self):
        return f"DeclMethod({self.name!r}, id={self.id})"
