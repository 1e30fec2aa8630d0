"""
Parameter types.

A type starts out as `Unresolved` (the raw name written in the source) and is
rewritten by the type resolver into one of the concrete variants, each of
which refers to its declaration by identifier. Every variant renders back to
source text through `to_lang(model)`, even when the model is only partially
resolved.
"""

from dataclasses import dataclass
from typing import Optional

from rlc_dsl.model.ids import RlcTypeId
from rlc_dsl.model.position import Position
from rlc_dsl.skillset.model import SkillsetId, TypeId


class Type:
    """Base class of every type variant."""

    def is_resolved(self) -> bool:
        return True

    def to_lang(self, model) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Undefined(Type):
    """Placeholder for a type that was never set."""

    def is_resolved(self) -> bool:
        return False

    def to_lang(self, model) -> str:
        return "undef"


@dataclass(frozen=True)
class Unresolved(Type):
    """A type reference that has not been looked up yet."""

    name: str
    position: Optional[Position] = None

    def is_resolved(self) -> bool:
        return False

    def to_lang(self, model) -> str:
        return f"{self.name}?"


@dataclass(frozen=True)
class Boolean(Type):
    def to_lang(self, model) -> str:
        return "bool"


@dataclass(frozen=True)
class SkillsetType(Type):
    """A skillset exported by the imported model."""

    id: SkillsetId

    def to_lang(self, model) -> str:
        skillset = model.imported_model.get_skillset(self.id)
        if skillset is None:
            return f"<skillset #{self.id.index}>"
        return skillset.name


@dataclass(frozen=True)
class ImportedType(Type):
    """A data type exported by the imported model."""

    id: TypeId

    def to_lang(self, model) -> str:
        data_type = model.imported_model.get_type(self.id)
        if data_type is None:
            return f"<type #{self.id.index}>"
        return data_type.name


@dataclass(frozen=True)
class LocalType(Type):
    """A type declared in the robot-language source itself."""

    id: RlcTypeId

    def to_lang(self, model) -> str:
        rlc_type = model.get_type(self.id)
        if rlc_type is None:
            return f"<local type #{self.id.index}>"
        return rlc_type.name
