"""
Inferred Type Model

Data types produced by the type-inference engine for Python source.

Values compare by identity (``eq=False``): the inference engine builds
self-referential graphs (a list whose element type is itself, a class whose
field refers back to it), and the recursion guard must recognise the exact
node it is already translating. The translator only reads these objects.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from .enums import DataTypeKind


@dataclass(eq=False)
class DataType:
    """Base class of every type-model variant."""

    kind: ClassVar[DataTypeKind]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


@dataclass(eq=False, repr=False)
class UnknownType(DataType):
    """Nothing was inferred."""

    kind: ClassVar[DataTypeKind] = DataTypeKind.UNKNOWN


@dataclass(eq=False, repr=False)
class StrType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.STR


@dataclass(eq=False, repr=False)
class IntType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.INT


@dataclass(eq=False, repr=False)
class FloatType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.FLOAT


@dataclass(eq=False, repr=False)
class BoolType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.BOOL


@dataclass(eq=False, repr=False)
class ClassType(DataType):
    """Nominal class type."""

    kind: ClassVar[DataTypeKind] = DataTypeKind.CLASS

    name: str

    def __repr__(self) -> str:
        return f"<ClassType {self.name}>"


@dataclass(eq=False, repr=False)
class ModuleType(DataType):
    """Nominal module type."""

    kind: ClassVar[DataTypeKind] = DataTypeKind.MODULE

    name: str

    def __repr__(self) -> str:
        return f"<ModuleType {self.name}>"


@dataclass(eq=False, repr=False)
class InstanceType(DataType):
    """An instance of ``class_type``."""

    kind: ClassVar[DataTypeKind] = DataTypeKind.INSTANCE

    class_type: DataType


@dataclass(eq=False, repr=False)
class DictType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.DICT

    key_type: DataType
    value_type: DataType


@dataclass(eq=False, repr=False)
class ListType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.LIST

    element_type: DataType


@dataclass(eq=False, repr=False)
class SetType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.SET

    element_type: DataType


@dataclass(eq=False, repr=False)
class TupleType(DataType):
    """Positional tuple; element order is significant."""

    kind: ClassVar[DataTypeKind] = DataTypeKind.TUPLE

    element_types: tuple[DataType, ...] = ()


@dataclass(eq=False, repr=False)
class UnionType(DataType):
    kind: ClassVar[DataTypeKind] = DataTypeKind.UNION

    alternatives: tuple[DataType, ...] = ()


@dataclass(eq=False, repr=False)
class FunType(DataType):
    """
    Callable type.

    ``arrows`` maps a parameter type to a return type. Each entry is one call
    signature; more than one entry means the callable is overloaded. Keys are
    hashed by identity, and insertion order is the declaration order.
    """

    kind: ClassVar[DataTypeKind] = DataTypeKind.FUN

    arrows: dict[DataType, DataType] = field(default_factory=dict)


# Shared instances for the payload-free variants
UNKNOWN = UnknownType()
STR = StrType()
INT = IntType()
FLOAT = FloatType()
BOOL = BoolType()

NONE_CLASS = ClassType("None")
NONE = InstanceType(NONE_CLASS)
"""Instance of the ``None`` class: the return type of a procedure."""
