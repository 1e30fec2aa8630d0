"""
Duplicate-name validation for robot-language models.

Namespaces are checked in a fixed order: includes, robots, local types
(against each other, then against the types exported by included skillset
files), functions, declared methods. Within a namespace the reported pair is
the one whose first element comes earliest in insertion order, paired with
the next occurrence of the same name.
"""

from rlc_dsl.errors import DuplicateError, DuplIncludeError, DuplTypeError
from rlc_dsl.log import get_logger

logger = get_logger(__name__)


def _first_collision(names):
    """
    Return (i, j) for the first colliding pair of `names`, or None.

    `i` is the smallest index whose name occurs again and `j` the index of
    its second occurrence.
    """
    first_seen = {}
    best = None
    for j, name in enumerate(names):
        i = first_seen.get(name)
        if i is None:
            first_seen[name] = j
        elif best is None or i < best[0]:
            best = (i, j)
    return best


def _ensure_unique(objs, kind):
    objs = list(objs)
    pair = _first_collision([o.name for o in objs])
    if pair is not None:
        first, second = objs[pair[0]], objs[pair[1]]
        raise DuplicateError(first.name, first.position, second.position, kind=kind)


def verify_unique_includes(model):
    pair = _first_collision(model.includes)
    if pair is not None:
        raise DuplIncludeError(model.includes[pair[0]])


def verify_unique_types(model):
    """Local types must be unique and must not shadow an imported type."""
    _ensure_unique(model.types, "type")

    imported = {str(t) for t in model.imported_model.types()}
    for rlc_type in model.types:
        if str(rlc_type) in imported:
            raise DuplTypeError(rlc_type.name)


def verify_unique_names(model):
    """Ensure all named elements have unique names within their namespace."""
    logger.info("[CHECK] Duplicates")
    verify_unique_includes(model)
    _ensure_unique(model.robots, "robot")
    verify_unique_types(model)
    _ensure_unique(model.functions, "function")
    _ensure_unique(model.declared_methods, "method")
