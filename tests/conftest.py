"""
Global test configuration and fixtures
"""

import pytest

from codegraph_typeref import TargetProfile, TypeReferenceTranslator, get_settings


class Node:
    """Stand-in for a syntax node (hashed by identity, like AST nodes)."""

    def __init__(self, label: str):
        self.label = label

    def __repr__(self) -> str:
        return f"Node({self.label})"


@pytest.fixture
def make_node():
    return Node


@pytest.fixture
def translator() -> TypeReferenceTranslator:
    """Translator with the default C# profile and no node bindings"""
    return TypeReferenceTranslator({}, profile=TargetProfile())


@pytest.fixture
def distinct_profile() -> TargetProfile:
    """Profile where every container has its own namespace"""
    return TargetProfile(
        dict_namespace="Collections.Dict",
        list_namespace="Collections.List",
        set_namespace="Collections.Set",
        tuple_namespace="Collections.Tuple",
        callable_namespace="Functional",
    )


@pytest.fixture
def reset_settings():
    """Settings re-read from the environment inside the test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
