"""
Type Reference Translator

Translates inferred Python types into target-language type references, plus
the namespaces those references need imported.

Lossy by construction:
- Unknown, Instance and Union types become the opaque ``object`` reference
- Overloaded callables keep only their first-declared signature
- A type reached again while it is still being translated (a cycle) becomes
  ``object`` at the cyclic edge
"""

import sys
from collections.abc import Hashable, Mapping

from ..config import TargetProfile, get_settings
from ..errors import TranslationDepthError, UnsupportedTypeKindError
from ..observability import configure_from_settings, get_logger
from ..types import Translation
from ..types.datatypes import (
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
from ..types.reference import TypeReference
from .callables import translate_fun
from .containers import translate_dict, translate_list, translate_set, translate_tuple
from .guard import RecursionGuard

logger = get_logger(__name__)


class TypeReferenceTranslator:
    """
    Translates type-model values to (TypeReference, namespaces) pairs.

    Stateless between calls: every top-level translation owns a fresh
    RecursionGuard, so one translator can serve a whole compilation unit.

    Usage:
        translator = TypeReferenceTranslator(inferred_types)
        ref, namespaces = translator.translate_type_of(node)
    """

    def __init__(self, types: Mapping[Hashable, DataType], profile: TargetProfile | None = None):
        """
        Args:
            types: Syntax node -> inferred type, owned by the inference engine
            profile: Target names/namespaces (None = settings profile)
        """
        self.types = types
        if profile is None:
            settings = get_settings()
            configure_from_settings(settings)
            profile = settings.profile
        self.profile = profile

    def type_of(self, node: Hashable) -> DataType:
        """Inferred type of ``node``; UNKNOWN when the engine recorded none."""
        return self.types.get(node, UNKNOWN)

    def translate_type_of(self, node: Hashable) -> Translation:
        """Translate the type bound to a syntax node."""
        data_type = self.types.get(node)
        if data_type is None:
            logger.debug("type_not_found", node=repr(node))
            return self._opaque()
        return self.translate(data_type)

    def translate(self, data_type: DataType) -> Translation:
        """
        Translate a type-model value.

        Cycles are cut by the recursion guard. Acyclic nesting is bounded by
        the interpreter stack (each level costs a few frames, so a few
        hundred levels with the default recursion limit).

        Raises:
            UnsupportedTypeKindError: value is not a known type-model variant
            TranslationDepthError: acyclic nesting exceeds the interpreter stack
        """
        try:
            return self._translate(data_type, RecursionGuard())
        except RecursionError as e:
            raise TranslationDepthError(data_type, recursion_limit=sys.getrecursionlimit()) from e

    def translate_list_element_type(self, node: Hashable) -> Translation:
        """Element type of a list-typed node; ``object`` for anything else."""
        data_type = self.type_of(node)
        if isinstance(data_type, ListType):
            return self.translate(data_type.element_type)
        return self._opaque()

    def _translate(self, data_type: DataType, guard: RecursionGuard) -> Translation:
        if data_type in guard:
            logger.debug("cycle_short_circuit", kind=str(data_type.kind), depth=guard.depth)
            return self._opaque()

        profile = self.profile
        match data_type:
            case DictType():
                return translate_dict(data_type, guard, self._translate, profile)
            case ListType():
                return translate_list(data_type, guard, self._translate, profile)
            case SetType():
                return translate_set(data_type, guard, self._translate, profile)
            case TupleType():
                return translate_tuple(data_type, guard, self._translate, profile)
            case FunType():
                return translate_fun(data_type, guard, self._translate, profile)
            case StrType():
                return TypeReference(profile.string_name), None
            case IntType():
                return TypeReference(profile.int_name), None
            case FloatType():
                return TypeReference(profile.float_name), None
            case BoolType():
                return TypeReference(profile.bool_name), None
            case UnknownType() | InstanceType() | UnionType():
                return self._opaque()
            case ClassType(name=name) | ModuleType(name=name):
                # Same compilation unit: already visible to the caller
                return TypeReference(name), None
            case _:
                raise UnsupportedTypeKindError(data_type, depth=guard.depth)

    def _opaque(self) -> Translation:
        return self.profile.object_reference(), None
