"""
Semantic errors raised by the robot-language core.

Every error is a `TextXSemanticError`, so callers that already handle textX
errors from the parser handle these too. Errors are terminal: the first one
raised aborts the stage that produced it.
"""

from textx import TextXSemanticError


class RlcError(TextXSemanticError):
    def __init__(self, message, position=None):
        location = position.location() if position is not None else {}
        super().__init__(message, **location)
        self.position = position


class DuplIncludeError(RlcError):
    """The same file is included twice."""

    def __init__(self, name):
        super().__init__(f"include '{name}' is defined twice")
        self.name = name


class DuplicateError(RlcError):
    """Two declarations of the same kind share a name."""

    def __init__(self, name, first, second, kind=None):
        what = f"{kind} '{name}'" if kind else f"'{name}'"
        super().__init__(
            f"{what} is defined twice (first at {first}, then at {second})",
            position=second,
        )
        self.name = name
        self.first = first
        self.second = second
        self.kind = kind


class DuplTypeError(RlcError):
    """A local type has the same name as a type exported by an included skillset file."""

    def __init__(self, name):
        super().__init__(f"type '{name}' is already defined by an included skillset")
        self.name = name


class ResolveError(RlcError):
    """A type or identifier could not be bound to any declaration."""

    def __init__(self, element, position=None):
        where = f" at {position}" if position is not None else ""
        super().__init__(f"unable to resolve {element}{where}", position=position)
        self.element = element
