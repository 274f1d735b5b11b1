"""Body statement classification and translation.

Classification tries an ordered list of matchers and the first match wins:

    return > assign > print > call (no space) > call (with space)

Later shapes are more permissive and would shadow earlier ones if reordered.
Expression and argument text is opaque and copied verbatim.
"""

from __future__ import annotations

import re
from typing import Callable

from .emit import PRINT_HELPER_NAME, is_reserved
from .symbols import SymbolTable

_IDENT = r"[A-Za-z_][A-Za-z0-9_]{0,11}"

RETURN_RE = re.compile(r"return (.+)$")
ASSIGN_RE = re.compile(r"(" + _IDENT + r")\s*<-\s*(.+)$")
PRINT_RE = re.compile(r"print (.+)$")
CALL_RE = re.compile(r"(" + _IDENT + r")\((.*)\)$")
CALL_SPACED_RE = re.compile(r"(" + _IDENT + r") (\(.*)$")


class StatementError(ValueError):
    """A body line that cannot be translated."""

    def __init__(self, msg: str, category: str = "statement"):
        self.msg: str = msg
        self.category: str = category
        super().__init__(msg)


class Statement:
    """Base for the four statement forms."""

    kind: str = ""


class Return(Statement):
    kind = "return"

    def __init__(self, expr: str):
        self.expr: str = expr

    def __repr__(self) -> str:
        return "Return(" + repr(self.expr) + ")"


class Assign(Statement):
    kind = "assign"

    def __init__(self, name: str, expr: str):
        self.name: str = name
        self.expr: str = expr

    def __repr__(self) -> str:
        return "Assign(" + self.name + ", " + repr(self.expr) + ")"


class Print(Statement):
    kind = "print"

    def __init__(self, expr: str):
        self.expr: str = expr

    def __repr__(self) -> str:
        return "Print(" + repr(self.expr) + ")"


class Call(Statement):
    kind = "call"

    def __init__(self, name: str, args: str):
        self.name: str = name
        self.args: str = args

    def __repr__(self) -> str:
        return "Call(" + self.name + ", " + repr(self.args) + ")"


def match_return(text: str) -> Statement | None:
    m = RETURN_RE.match(text)
    if m is None:
        return None
    return Return(m.group(1).strip())


def match_assign(text: str) -> Statement | None:
    m = ASSIGN_RE.match(text)
    if m is None:
        return None
    return Assign(m.group(1), m.group(2).strip())


def match_print(text: str) -> Statement | None:
    m = PRINT_RE.match(text)
    if m is None:
        return None
    return Print(m.group(1).strip())


def match_call(text: str) -> Statement | None:
    m = CALL_RE.match(text)
    if m is None:
        return None
    return Call(m.group(1), m.group(2))


def match_call_spaced(text: str) -> Statement | None:
    """`name (args)`: the capture keeps the closing paren, which is dropped here."""
    m = CALL_SPACED_RE.match(text)
    if m is None:
        return None
    args = m.group(2)[1:]
    if args.endswith(")") and args.count(")") > args.count("("):
        args = args[:-1]
    return Call(m.group(1), args)


MATCHERS: list[tuple[str, Callable[[str], Statement | None]]] = [
    ("return", match_return),
    ("assign", match_assign),
    ("print", match_print),
    ("call", match_call),
    ("call-spaced", match_call_spaced),
]


def classify(text: str) -> Statement:
    """Classify a body line with its indentation already removed."""
    for _, matcher in MATCHERS:
        stmt = matcher(text)
        if stmt is not None:
            return stmt
    raise StatementError("unknown statement '" + text + "'")


def emit_statement(stmt: Statement, symbols: SymbolTable) -> list[str]:
    """C lines for a statement. Assignment targets are declared in symbols."""
    if isinstance(stmt, Return):
        return ["return " + stmt.expr + ";"]
    if isinstance(stmt, Assign):
        if is_reserved(stmt.name):
            raise StatementError(
                "invalid assignment target '" + stmt.name + "'", "assign"
            )
        symbols.declare(stmt.name)
        return [stmt.name + " = " + stmt.expr + ";"]
    if isinstance(stmt, Print):
        return [PRINT_HELPER_NAME + "(" + stmt.expr + ");"]
    if isinstance(stmt, Call):
        if is_reserved(stmt.name):
            raise StatementError("invalid call target '" + stmt.name + "'")
        return [stmt.name + "(" + stmt.args + ");"]
    raise StatementError("unsupported statement " + repr(stmt))


def translate_statement(text: str, symbols: SymbolTable) -> list[str]:
    """Classify and translate one body line."""
    return emit_statement(classify(text), symbols)
