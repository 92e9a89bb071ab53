"""
Container Mapper

Generic references for dict, list, set and tuple types. Children are
translated through ``recurse`` (the dispatcher) under the recursion guard.
"""

from collections.abc import Callable

from ..config import TargetProfile
from ..types import Translation
from ..types.datatypes import DataType, DictType, ListType, SetType, TupleType
from ..types.namespaces import add_namespace, join_all, join_namespaces
from ..types.reference import TypeReference
from .guard import RecursionGuard

Recurse = Callable[[DataType, RecursionGuard], Translation]


def translate_dict(dict_type: DictType, guard: RecursionGuard, recurse: Recurse, profile: TargetProfile) -> Translation:
    """Dict{K, V} -> Dictionary<K, V>"""
    with guard.entered(dict_type):
        key_ref, key_ns = recurse(dict_type.key_type, guard)
        value_ref, value_ns = recurse(dict_type.value_type, guard)

    namespaces = add_namespace(join_namespaces(key_ns, value_ns), profile.dict_namespace)
    return TypeReference(profile.dict_name, (key_ref, value_ref)), namespaces


def translate_list(list_type: ListType, guard: RecursionGuard, recurse: Recurse, profile: TargetProfile) -> Translation:
    """List{E} -> List<E>"""
    return _translate_element_container(
        list_type, list_type.element_type, profile.list_name, profile.list_namespace, guard, recurse
    )


def translate_set(set_type: SetType, guard: RecursionGuard, recurse: Recurse, profile: TargetProfile) -> Translation:
    """Set{E} -> Set<E>"""
    return _translate_element_container(
        set_type, set_type.element_type, profile.set_name, profile.set_namespace, guard, recurse
    )


def translate_tuple(
    tuple_type: TupleType, guard: RecursionGuard, recurse: Recurse, profile: TargetProfile
) -> Translation:
    """Tuple{E1..En} -> Tuple<E1, ..., En>, positions preserved."""
    with guard.entered(tuple_type):
        elements = [recurse(element_type, guard) for element_type in tuple_type.element_types]

    namespaces = join_all(element_ns for _, element_ns in elements)
    element_refs = tuple(element_ref for element_ref, _ in elements)
    return TypeReference(profile.tuple_name, element_refs), add_namespace(namespaces, profile.tuple_namespace)


def _translate_element_container(
    container: DataType,
    element_type: DataType,
    name: str,
    namespace: str | None,
    guard: RecursionGuard,
    recurse: Recurse,
) -> Translation:
    with guard.entered(container):
        element_ref, element_ns = recurse(element_type, guard)
    return TypeReference(name, (element_ref,)), add_namespace(element_ns, namespace)
