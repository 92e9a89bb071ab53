"""Translation of inferred types into target type references."""

from .callables import is_none_instance, select_arrow
from .guard import RecursionGuard
from .translator import TypeReferenceTranslator

__all__ = [
    "RecursionGuard",
    "TypeReferenceTranslator",
    "is_none_instance",
    "select_arrow",
]
