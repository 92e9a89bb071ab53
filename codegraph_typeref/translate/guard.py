"""
Recursion Guard

Stack of type-model values being translated along the active call chain.
One guard per top-level translation; never shared between calls.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from ..types.datatypes import DataType


class RecursionGuard:
    """
    Detects re-entrant translation of a node already in progress.

    Membership is by identity: two structurally identical but distinct
    type-model values are different nodes.

    Usage:
        guard = RecursionGuard()
        with guard.entered(list_type):
            translate(list_type.element_type, guard)
    """

    def __init__(self):
        self._stack: list[DataType] = []

    def __contains__(self, data_type: DataType) -> bool:
        return any(entry is data_type for entry in self._stack)

    @contextmanager
    def entered(self, data_type: DataType) -> Iterator[None]:
        """Hold ``data_type`` on the stack while its children are translated."""
        self._stack.append(data_type)
        try:
            yield
        finally:
            self._stack.pop()

    @property
    def depth(self) -> int:
        return len(self._stack)
