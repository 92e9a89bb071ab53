"""
Target Type References

A reference names a type of the statically-typed target language plus its
generic arguments, e.g. ``Dictionary<string, List<int>>``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeReference:
    """Concrete or generic type in the target type system."""

    name: str
    """Base type name (e.g. "Dictionary", "int", "MyClass")"""

    arguments: tuple[TypeReference, ...] = ()
    """Generic arguments, in declaration order"""

    @classmethod
    def of(cls, name: str, *arguments: TypeReference) -> TypeReference:
        return cls(name, tuple(arguments))

    @property
    def arity(self) -> int:
        return len(self.arguments)

    def walk(self):
        """Yield this reference and every nested argument, depth first."""
        yield self
        for argument in self.arguments:
            yield from argument.walk()

    def __str__(self) -> str:
        if not self.arguments:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.arguments)}>"
