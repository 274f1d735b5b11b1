"""Diagnostics and the translation result."""

from __future__ import annotations


class Diagnostic:
    """A translation diagnostic with line number and category."""

    def __init__(
        self,
        lineno: int,
        category: str,
        message: str,
        is_fatal: bool = False,
    ):
        self.lineno: int = lineno
        self.category: str = category  # "input" | "function" | "statement" | "assign"
        self.message: str = message
        self.is_fatal: bool = is_fatal

    def __repr__(self) -> str:
        return (
            "error:"
            + str(self.lineno)
            + ": ["
            + self.category
            + "] "
            + self.message
        )

    def __str__(self) -> str:
        return self.__repr__()


class TranslateResult:
    """Result of one translation run."""

    def __init__(self) -> None:
        self.output: str = ""
        self.diagnostics: list[Diagnostic] = []

    def add_error(self, lineno: int, category: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(lineno, category, message))

    def add_fatal(self, lineno: int, category: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(lineno, category, message, True))
        self.output = ""

    def errors(self) -> list[Diagnostic]:
        return self.diagnostics

    def fatal(self) -> bool:
        i = 0
        while i < len(self.diagnostics):
            if self.diagnostics[i].is_fatal:
                return True
            i += 1
        return False

    def ok(self) -> bool:
        """True unless the run hit a fatal condition."""
        return not self.fatal()

    def as_tuple(self) -> tuple[str, list[Diagnostic], bool]:
        return (self.output, list(self.diagnostics), self.ok())
