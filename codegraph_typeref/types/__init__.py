"""Type model (input), type references and namespace sets (output)."""

from .datatypes import (
    BOOL,
    FLOAT,
    INT,
    NONE,
    NONE_CLASS,
    STR,
    UNKNOWN,
    BoolType,
    ClassType,
    DataType,
    DictType,
    FloatType,
    FunType,
    InstanceType,
    IntType,
    ListType,
    ModuleType,
    SetType,
    StrType,
    TupleType,
    UnionType,
    UnknownType,
)
from .enums import DataTypeKind
from .namespaces import NamespaceSet, add_namespace, join_all, join_namespaces
from .reference import TypeReference

Translation = tuple[TypeReference, NamespaceSet | None]

__all__ = [
    "BOOL",
    "FLOAT",
    "INT",
    "NONE",
    "NONE_CLASS",
    "STR",
    "UNKNOWN",
    "BoolType",
    "ClassType",
    "DataType",
    "DataTypeKind",
    "DictType",
    "FloatType",
    "FunType",
    "InstanceType",
    "IntType",
    "ListType",
    "ModuleType",
    "NamespaceSet",
    "SetType",
    "StrType",
    "Translation",
    "TupleType",
    "TypeReference",
    "UnionType",
    "UnknownType",
    "add_namespace",
    "join_all",
    "join_namespaces",
]
