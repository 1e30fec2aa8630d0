from rlc_dsl.model.expressions import FunctionCall, ParameterRef, Reference
from rlc_dsl.model.ids import DeclMethodId, FunctionId


def describe_target(target, model) -> str:
    """Human-readable description of what an identifier was bound to."""
    if target is None:
        return "unbound"
    if isinstance(target, ParameterRef):
        return f"parameter #{target.index}"
    if isinstance(target, (FunctionId, DeclMethodId)):
        entity = model.get(target)
        kind = "function" if isinstance(target, FunctionId) else "method"
        return f"{kind} {entity.name if entity else '?'}"
    # resolved types render to their declaration name
    return f"{type(target).__name__} {target.to_lang(model)}"


def _bindings(expr):
    if isinstance(expr, (Reference, FunctionCall)):
        yield expr
    for child in expr.children():
        yield from _bindings(child)


def print_model_debug(model):
    imported = model.imported_model
    skillsets = imported.skillsets()
    imported_types = imported.types()

    print("=== SUMMARY ===")
    print(f"Includes: {len(model.includes)} | Robots: {len(model.robots)} | Types: {len(model.types)}")
    print(f"Functions: {len(model.functions)} | Methods: {len(model.declared_methods)} | ROS calls: {len(model.ros_calls)}")
    print(f"Imported skillsets: {len(skillsets)} | Imported types: {len(imported_types)}\n")

    if model.includes:
        print("=== INCLUDES ===")
        for inc in model.includes:
            print(f"- {inc}")
        print()

    if skillsets or imported_types:
        print("=== IMPORTED ===")
        for s in skillsets:
            skills = f" skills=[{', '.join(s.skills)}]" if s.skills else ""
            print(f"- skillset {s.name}{skills}")
        for t in imported_types:
            print(f"- type {t.name}")
        print()

    if model.robots:
        print("=== ROBOTS ===")
        for r in model.robots:
            print(f"- {r.name} ({r.position})")
        print()

    if model.types:
        print("=== TYPES ===")
        for t in model.types:
            print(f"- {t.name} ({t.position})")
        print()

    if model.functions:
        print("=== FUNCTIONS ===")
        for f in model.functions:
            params = ", ".join(p.to_lang(model) for p in f.parameters)
            print(f"- {f.name}({params})")
            for expr in f.body:
                for node in _bindings(expr):
                    print(f"    • {node.name} -> {describe_target(node.target, model)}")
        print()

    if model.declared_methods:
        print("=== METHODS ===")
        for m in model.declared_methods:
            params = ", ".join(p.to_lang(model) for p in m.parameters)
            print(f"- {m.name}({params})")
        print()

    if len(model.ros_calls):
        print("=== ROS CALLS ===")
        for call in sorted(model.ros_calls, key=lambda c: (c.topic, c.kind.value)):
            print(f"- {call}")
        print()
