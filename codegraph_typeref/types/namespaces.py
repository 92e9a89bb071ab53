"""
Namespace Requirement Sets

Every translated reference is paired with the namespaces it needs imported.

Three states:
    None         -> nothing needed beyond what the caller already has
    frozenset()  -> requirement present, but empty
    {"System"}   -> these namespaces must be imported

Sets are frozen, so branches can share them without copying.
"""

from collections.abc import Iterable

NamespaceSet = frozenset[str]


def join_namespaces(a: NamespaceSet | None, b: NamespaceSet | None) -> NamespaceSet | None:
    """
    Union of two requirement sets.

    Associative, commutative and idempotent; None is the identity.
    """
    if a is None:
        return b
    if b is None:
        return a
    if b <= a:
        return a
    if a <= b:
        return b
    return a | b


def add_namespace(namespaces: NamespaceSet | None, namespace: str | None) -> NamespaceSet | None:
    """Require one more namespace. A None namespace is a no-op."""
    if namespace is None:
        return namespaces
    if namespaces is None:
        return frozenset((namespace,))
    if namespace in namespaces:
        return namespaces
    return namespaces | {namespace}


def join_all(sets: Iterable[NamespaceSet | None]) -> NamespaceSet | None:
    result: NamespaceSet | None = None
    for namespaces in sets:
        result = join_namespaces(result, namespaces)
    return result
