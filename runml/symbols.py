"""Declared-variable tracking for one translation run."""

from __future__ import annotations


class SymbolTable:
    """Names already declared as numeric variables.

    One table lives for exactly one translation run and is shared by the
    entry point and every function. Names are only ever added, in the order
    of their first assignment.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._seen: set[str] = set()

    def is_declared(self, name: str) -> bool:
        return name in self._seen

    def declare(self, name: str) -> bool:
        """Declare name. Returns True only the first time."""
        if name in self._seen:
            return False
        self._seen.add(name)
        self._names.append(name)
        return True

    def names(self) -> list[str]:
        """Declared names in declaration order."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)
