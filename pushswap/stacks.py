"""The two stacks and the moves that rearrange them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

__all__ = ["Pair", "Stacks"]


@dataclass
class Pair:
    """A number on a stack, with its rank among all numbers (-1 if unranked)."""

    value: int
    index: int = -1


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; the last element of each list is its top.

    Every move that changes something is recorded in ``ops`` and, if
    ``emit`` is set, passed to it by name. A move that cannot apply does
    nothing and returns False.
    """

    a: list[Pair] = field(default_factory=list)
    b: list[Pair] = field(default_factory=list)
    emit: Callable[[str], object] | None = field(
        default=None, repr=False, compare=False
    )
    ops: list[str] = field(default_factory=list, init=False)

    def _record(self, name: str) -> bool:
        self.ops.append(name)
        if self.emit is not None:
            self.emit(name)
        return True

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return False
        self.a.append(self.b.pop())
        return self._record("pa")

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self.b.append(self.a.pop())
        return self._record("pb")

    def ra(self) -> bool:
        """Rotate ``a``: its top goes to the bottom."""
        if len(self.a) < 2:
            return False
        self.a.insert(0, self.a.pop())
        return self._record("ra")

    def sa(self) -> bool:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return False
        self.a[-1], self.a[-2] = self.a[-2], self.a[-1]
        return self._record("sa")

    def rra(self) -> bool:
        """Reverse-rotate ``a``: its bottom goes to the top."""
        if len(self.a) < 2:
            return False
        self.a.append(self.a.pop(0))
        return self._record("rra")