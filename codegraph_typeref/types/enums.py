"""Type-model Enums.

str-based Enums so kinds serialize cleanly into structured log fields.
"""

from enum import Enum


class DataTypeKind(str, Enum):
    """Variants of the inferred type model.

    The set is closed: the inference engine only ever produces these.
    """

    UNKNOWN = "unknown"
    DICT = "dict"
    INSTANCE = "instance"
    LIST = "list"
    SET = "set"
    UNION = "union"
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TUPLE = "tuple"
    FUN = "fun"
    CLASS = "class"
    MODULE = "module"

    def __str__(self) -> str:
        """String representation."""
        return self.value
