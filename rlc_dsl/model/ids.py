"""
Typed entity identifiers.

Each entity kind has its own identifier class so that, for example, a
RobotId can never be used to look up a function. An identifier is the
entity's insertion index in its kind's store.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class RobotId:
    index: int


@dataclass(frozen=True, order=True)
class RlcTypeId:
    index: int


@dataclass(frozen=True, order=True)
class FunctionId:
    index: int


@dataclass(frozen=True, order=True)
class DeclMethodId:
    index: int
