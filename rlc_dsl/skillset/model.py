"""
Imported skillset model.

Included `.rl` files export skillsets and data types. The robot-language
core only reads this model: it looks entries up by name while resolving
parameter types and by id while rendering.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, order=True)
class SkillsetId:
    index: int


@dataclass(frozen=True, order=True)
class TypeId:
    index: int


class Skillset:
    """A named capability module exported by a skillset file."""

    def __init__(self, name: str, skills: Optional[List[str]] = None, position=None):
        self.name = name
        self.skills = list(skills or [])
        self.position = position
        self.id: Optional[SkillsetId] = None

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Skillset({self.name!r}, id={self.id})"


class DataType:
    """A data type exported by a skillset file."""

    def __init__(self, name: str, position=None):
        self.name = name
        self.position = position
        self.id: Optional[TypeId] = None

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"DataType({self.name!r}, id={self.id})"


class SkillsetModel:
    def __init__(self):
        self._skillsets: List[Skillset] = []
        self._types: List[DataType] = []

    def add_skillset(self, skillset: Skillset) -> SkillsetId:
        skillset.id = SkillsetId(len(self._skillsets))
        self._skillsets.append(skillset)
        return skillset.id

    def add_type(self, data_type: DataType) -> TypeId:
        data_type.id = TypeId(len(self._types))
        self._types.append(data_type)
        return data_type.id

    def skillsets(self) -> List[Skillset]:
        return list(self._skillsets)

    def types(self) -> List[DataType]:
        return list(self._types)

    def get_skillset(self, id: SkillsetId) -> Optional[Skillset]:
        if 0 <= id.index < len(self._skillsets):
            return self._skillsets[id.index]
        return None

    def get_type(self, id: TypeId) -> Optional[DataType]:
        if 0 <= id.index < len(self._types):
            return self._types[id.index]
        return None

    def to_lang(self) -> str:
        lines = [f"type {t.name}" for t in self._types]
        for s in self._skillsets:
            if s.skills:
                skills = " ".join(f"skill {name}" for name in s.skills)
                lines.append(f"skillset {s.name} {{ {skills} }}")
            else:
                lines.append(f"skillset {s.name}")
        return "\n".join(lines) + ("\n" if lines else "")

    def __str__(self):
        return self.to_lang()
