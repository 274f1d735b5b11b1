"""Function header recognition and translation.

A header line has the shape `function <name> <params...>` at column 0, with
parameters separated by spaces and/or commas. It becomes a C definition of a
double-returning function taking double parameters in declaration order.
"""

from __future__ import annotations

import re

from .emit import is_reserved

KEYWORD = "function"
MAX_IDENT = 12

IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_HEADER_RE = re.compile(r"function(?:\s|$)")
_SEP_RE = re.compile(r"[\s,]+")


class SignatureError(ValueError):
    """Malformed function header."""

    def __init__(self, msg: str):
        self.msg: str = msg
        super().__init__(msg)


class FunctionSignature:
    """A parsed function header."""

    def __init__(self, name: str, params: list[str]):
        self.name: str = name
        self.params: list[str] = params

    def __repr__(self) -> str:
        return "FunctionSignature(" + self.name + ", " + repr(self.params) + ")"


def is_header(text: str) -> bool:
    """Check if a normalized line is a function header (unindented, keyword first)."""
    return _HEADER_RE.match(text) is not None


def valid_identifier(name: str) -> bool:
    return (
        IDENT_RE.fullmatch(name) is not None
        and len(name) <= MAX_IDENT
        and not is_reserved(name)
    )


def parse_signature(text: str) -> FunctionSignature:
    """Parse a header line. Raises SignatureError if malformed."""
    if not is_header(text):
        raise SignatureError("invalid function definition: expected 'function'")
    rest = text[len(KEYWORD) :].strip()
    if rest == "":
        raise SignatureError("invalid function definition: missing function name")
    parts = rest.split(None, 1)
    name = parts[0]
    if not valid_identifier(name):
        raise SignatureError("invalid function definition: bad function name '" + name + "'")
    params: list[str] = []
    if len(parts) > 1:
        for p in _SEP_RE.split(parts[1]):
            if p == "":
                continue
            if not valid_identifier(p):
                raise SignatureError(
                    "invalid function definition: bad parameter '" + p + "'"
                )
            if p in params:
                raise SignatureError(
                    "invalid function definition: duplicate parameter '" + p + "'"
                )
            params.append(p)
    return FunctionSignature(name, params)


def emit_signature(sig: FunctionSignature) -> str:
    """C header for a signature, ending with the opening brace."""
    if len(sig.params) == 0:
        return "double " + sig.name + "(void) {"
    decls: list[str] = []
    for p in sig.params:
        decls.append("double " + p)
    return "double " + sig.name + "(" + ", ".join(decls) + ") {"
