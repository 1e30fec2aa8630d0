"""
Parameter type resolution.

Each `Unresolved` parameter type is looked up in three places, in order:
the skillsets of the imported model, the data types of the imported model,
and the model's own types. Every scan that finds the name overwrites what an
earlier scan found, so local types win over imported types, which win over
skillsets.
"""

from rlc_dsl.errors import ResolveError
from rlc_dsl.log import get_logger
from rlc_dsl.model.types import ImportedType, LocalType, SkillsetType, Unresolved

logger = get_logger(__name__)


def resolve_type_name(name, model):
    """Return the resolved type for `name`, or None if nothing declares it."""
    resolved = None
    for skillset in model.imported_model.skillsets():
        if str(skillset) == name:
            resolved = SkillsetType(skillset.id)
    for data_type in model.imported_model.types():
        if data_type.name == name:
            resolved = ImportedType(data_type.id)
    for rlc_type in model.types:
        if rlc_type.name == name:
            resolved = LocalType(rlc_type.id)
    return resolved


def _resolve_owner(owner, model):
    for index, param in enumerate(owner.parameters):
        typ = param.typ
        if not isinstance(typ, Unresolved):
            continue
        resolved = resolve_type_name(typ.name, model)
        if resolved is None:
            raise ResolveError(f"type '{typ.name}'", typ.position)
        model.set_parameter_type(owner.id, index, resolved)


def resolve_parameters(model):
    """
    Resolve the parameter types of every function, then of every declared method.

    Stops at the first type that cannot be resolved. Parameters whose type is
    already concrete are left untouched, so running this twice is harmless.
    """
    logger.info("[RESOLVE] Parameters")
    for function in model.functions:
        _resolve_owner(function, model)
    for method in model.declared_methods:
        _resolve_owner(method, model)
