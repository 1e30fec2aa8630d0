"""Imported skillset model consumed by the robot-language resolver."""

from rlc_dsl.skillset.model import (
    DataType,
    Skillset,
    SkillsetId,
    SkillsetModel,
    TypeId,
)

__all__ = [
    "DataType",
    "Skillset",
    "SkillsetId",
    "SkillsetModel",
    "TypeId",
]
