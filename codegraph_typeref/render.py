"""
Rendering of translated references into C# source text.

The code generator unions the namespace sets of every translation in a
compilation unit and emits one ``using`` directive per namespace.
"""

from collections.abc import Iterable

from .types import Translation
from .types.namespaces import NamespaceSet, join_namespaces
from .types.reference import TypeReference


def render_type(reference: TypeReference) -> str:
    """``Dictionary<string, List<int>>``"""
    return str(reference)


class NamespaceCollector:
    """
    Accumulates required namespaces for one compilation unit.

    Example:
        collector = NamespaceCollector()
        ref = collector.add(translator.translate(data_type))
        ...
        header = collector.render_usings()
    """

    def __init__(self):
        self._namespaces: NamespaceSet | None = None

    def add(self, translation: Translation) -> TypeReference:
        """Record the translation's namespaces and hand back its reference."""
        reference, namespaces = translation
        self._namespaces = join_namespaces(self._namespaces, namespaces)
        return reference

    def add_namespaces(self, namespaces: Iterable[str]) -> None:
        self._namespaces = join_namespaces(self._namespaces, frozenset(namespaces))

    @property
    def namespaces(self) -> NamespaceSet | None:
        return self._namespaces

    def sorted_namespaces(self) -> list[str]:
        if not self._namespaces:
            return []
        # System first, then alphabetical, as C# tooling orders usings
        return sorted(self._namespaces, key=lambda ns: (ns.split(".")[0] != "System", ns))

    def render_usings(self) -> str:
        return "\n".join(f"using {ns};" for ns in self.sorted_namespaces())
