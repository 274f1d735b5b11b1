"""C11 output assembly: sections, boilerplate, and the print helper."""

from __future__ import annotations

import re

PRINT_HELPER_NAME = "runml_print"

INCLUDES: list[str] = [
    "#include <stdio.h>",
    "#include <stdlib.h>",
    "#include <math.h>",
]

PRINT_HELPER: str = """\
static void runml_print(double value) {
    if (floor(value) == value) {
        printf("%.0f\\n", value);
    } else {
        printf("%.6f\\n", value);
    }
}"""

# C reserved words; source identifiers may not shadow them
C_RESERVED = frozenset(
    {
        "auto",
        "break",
        "case",
        "char",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extern",
        "float",
        "for",
        "goto",
        "if",
        "inline",
        "int",
        "long",
        "register",
        "restrict",
        "return",
        "short",
        "signed",
        "sizeof",
        "static",
        "struct",
        "switch",
        "typedef",
        "union",
        "unsigned",
        "void",
        "volatile",
        "while",
        "_Bool",
        "_Complex",
        "_Imaginary",
        "_Alignas",
        "_Alignof",
        "_Atomic",
        "_Generic",
        "_Noreturn",
        "_Static_assert",
        "_Thread_local",
        "bool",
        "true",
        "false",
        "NULL",
    }
)

# Names the generated unit defines itself
GENERATED_NAMES = frozenset({"main", "argc", "argv", PRINT_HELPER_NAME})

# argN with no leading zeros, so each reference names exactly one index
_ARG_RE = re.compile(r"\barg(0|[1-9][0-9]*)\b")

INDENT = "    "


def is_reserved(name: str) -> bool:
    """Check whether a source identifier would clash in the generated C."""
    if name in C_RESERVED or name in GENERATED_NAMES:
        return True
    return _ARG_RE.fullmatch(name) is not None


def find_arg_refs(text: str) -> list[int]:
    """Indices N of every argN reference in opaque expression text."""
    result: list[int] = []
    for m in _ARG_RE.finditer(text):
        result.append(int(m.group(1)))
    return result


class CProgram:
    """The translation unit under construction.

    Function definitions and entry-point statements are collected into
    separate buffers, each in source order, and joined by render(). Variables
    are declared once at file scope, ahead of the functions, so function
    bodies see top-level variables and parameters shadow them.
    """

    def __init__(self) -> None:
        self.prototypes: list[str] = []
        self.functions: list[str] = []
        self.entry: list[str] = []
        self.arg_refs: set[int] = set()
        self.in_function: bool = False

    def open_function(self, header: str) -> None:
        """Start a function definition from a header ending in '{'."""
        self.prototypes.append(header[: -len(" {")] + ";")
        self.functions.append(header)
        self.in_function = True

    def close_function(self) -> None:
        self.functions.append(INDENT + "return 0.0;")
        self.functions.append("}")
        self.functions.append("")
        self.in_function = False

    def statement(self, text: str) -> None:
        """Append one C statement to the open function or the entry point."""
        for n in find_arg_refs(text):
            self.arg_refs.add(n)
        if self.in_function:
            self.functions.append(INDENT + text)
        else:
            self.entry.append(INDENT + text)

    def render(self, variables: list[str]) -> str:
        """The complete unit, declaring each of variables once at file scope."""
        out: list[str] = []
        for inc in INCLUDES:
            out.append(inc)
        out.append("")
        out.append("// === Helpers ===")
        out.extend(PRINT_HELPER.split("\n"))
        out.append("")
        args = sorted(self.arg_refs)
        if args:
            out.append("// === Command-line arguments ===")
            for n in args:
                out.append("static double arg" + str(n) + " = 0.0;")
            out.append("")
        if variables:
            out.append("// === Variables ===")
            for name in variables:
                out.append("double " + name + " = 0.0;")
            out.append("")
        if self.prototypes:
            out.append("// === Forward declarations ===")
            out.extend(self.prototypes)
            out.append("")
            out.extend(self.functions)
        if args:
            out.append("int main(int argc, char *argv[]) {")
        else:
            out.append("int main(void) {")
        for n in args:
            idx = str(n + 1)
            out.append(
                INDENT + "if (argc > " + idx + ") arg" + str(n) + " = atof(argv[" + idx + "]);"
            )
        out.extend(self.entry)
        out.append(INDENT + "return 0;")
        out.append("}")
        return "\n".join(out) + "\n"
