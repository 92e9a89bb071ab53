"""codegraph-typeref - Inferred Python types to static target type references.

Quick Start:
    >>> from codegraph_typeref import TypeReferenceTranslator, ListType, INT
    >>>
    >>> translator = TypeReferenceTranslator(inferred_types)
    >>> ref, namespaces = translator.translate(ListType(INT))
    >>> str(ref)
    'List<int>'
    >>> sorted(namespaces)
    ['System.Collections.Generic']

For a whole compilation unit:
    >>> from codegraph_typeref import NamespaceCollector
    >>> collector = NamespaceCollector()
    >>> field_type = collector.add(translator.translate_type_of(node))
    >>> collector.render_usings()
    'using System.Collections.Generic;'
"""

__version__ = "0.1.0"  # Keep in sync with pyproject.toml

from codegraph_typeref.config import TargetProfile, TypeRefSettings, get_settings
from codegraph_typeref.errors import (
    ConfigurationError,
    TranslationDepthError,
    TypeRefError,
    UnsupportedTypeKindError,
)
from codegraph_typeref.render import NamespaceCollector, render_type
from codegraph_typeref.translate import RecursionGuard, TypeReferenceTranslator
from codegraph_typeref.types import (
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
    DataTypeKind,
    DictType,
    FloatType,
    FunType,
    InstanceType,
    IntType,
    ListType,
    ModuleType,
    NamespaceSet,
    SetType,
    StrType,
    Translation,
    TupleType,
    TypeReference,
    UnionType,
    UnknownType,
    join_namespaces,
)

__all__ = [
    "__version__",
    # Translator
    "TypeReferenceTranslator",
    "RecursionGuard",
    "NamespaceCollector",
    "render_type",
    # Type model
    "DataType",
    "DataTypeKind",
    "UnknownType",
    "DictType",
    "InstanceType",
    "ListType",
    "SetType",
    "UnionType",
    "StrType",
    "IntType",
    "FloatType",
    "BoolType",
    "TupleType",
    "FunType",
    "ClassType",
    "ModuleType",
    "UNKNOWN",
    "STR",
    "INT",
    "FLOAT",
    "BOOL",
    "NONE",
    "NONE_CLASS",
    # Output
    "TypeReference",
    "NamespaceSet",
    "Translation",
    "join_namespaces",
    # Config & errors
    "TargetProfile",
    "TypeRefSettings",
    "get_settings",
    "TypeRefError",
    "UnsupportedTypeKindError",
    "TranslationDepthError",
    "ConfigurationError",
]
