"""
Function body expressions.

Bodies are opaque to the model except for identifiers: every `Reference`
and every `FunctionCall` callee gets a `target` once the expression
resolver has run. Before that the target is None.
"""

from dataclasses import dataclass

from rlc_dsl.model.ros_call import RosCallType


@dataclass(frozen=True)
class ParameterRef:
    """Binding of an identifier to a parameter of the enclosing function."""

    index: int


class Expr:
    position = None

    def children(self):
        return []

    def to_lang(self, model) -> str:
        raise NotImplementedError


class Literal(Expr):
    def __init__(self, value, position=None):
        self.value = value
        self.position = position

    def to_lang(self, model) -> str:
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, str):
            # STRING only unescapes quotes, backslashes stay literal
            return '"{}"'.format(self.value.replace('"', '\\"'))
        return str(self.value)

    def __repr__(self):
        return f"Literal({self.value!r})"


class Reference(Expr):
    """A bare identifier: a parameter, function, type or skillset name."""

    def __init__(self, name: str, position=None):
        self.name = name
        self.position = position
        self.target = None

    def to_lang(self, model) -> str:
        return self.name

    def __repr__(self):
        return f"Reference({self.name!r}, target={self.target!r})"


class FunctionCall(Expr):
    def __init__(self, name: str, args=None, position=None):
        self.name = name
        self.args = list(args or [])
        self.position = position
        self.target = None

    def children(self):
        return self.args

    def to_lang(self, model) -> str:
        args = ", ".join(a.to_lang(model) for a in self.args)
        return f"{self.name}({args})"

    def __repr__(self):
        return f"FunctionCall({self.name!r}, args={self.args!r}, target={self.target!r})"


class RosCallExpr(Expr):
    """`publish("/topic", ...)`, `subscribe("/topic")` or `service("/topic", ...)`."""

    def __init__(self, kind: RosCallType, topic: str, args=None, position=None):
        self.kind = kind
        self.topic = topic
        self.args = list(args or [])
        self.position = position

    def children(self):
        return self.args

    def to_lang(self, model) -> str:
        parts = [Literal(self.topic).to_lang(model)]
        parts.extend(a.to_lang(model) for a in self.args)
        return f"{self.kind.value}({', '.join(parts)})"

    def __repr__(self):
        return f"RosCallExpr({self.kind.value}, {self.topic!r}, args={self.args!r})"
