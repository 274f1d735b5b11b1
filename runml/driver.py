"""Translation driver: source stream -> C11 translation unit."""

from __future__ import annotations

import io
from typing import IO

from .emit import CProgram
from .errors import Diagnostic, TranslateResult
from .lines import SourceLine, read_lines
from .scope import HEADER, ScopeTracker
from .signature import SignatureError, emit_signature, parse_signature
from .statements import StatementError, translate_statement
from .symbols import SymbolTable


class Translator:
    """State for a single translation run. Create one per run."""

    def __init__(self) -> None:
        self.symbols: SymbolTable = SymbolTable()
        self.tracker: ScopeTracker = ScopeTracker()
        self.program: CProgram = CProgram()
        self.result: TranslateResult = TranslateResult()
        self.function_names: set[str] = set()

    def _header(self, line: SourceLine) -> None:
        try:
            sig = parse_signature(line.text)
        except SignatureError as e:
            self.tracker.reject_header()
            self.result.add_error(line.lineno, "function", e.msg)
            return
        if sig.name in self.function_names:
            self.tracker.reject_header()
            self.result.add_error(
                line.lineno,
                "function",
                "invalid function definition: duplicate function '" + sig.name + "'",
            )
            return
        self.function_names.add(sig.name)
        self.program.open_function(emit_signature(sig))

    def _statement(self, line: SourceLine) -> None:
        try:
            lines = translate_statement(line.body(), self.symbols)
        except StatementError as e:
            self.result.add_error(line.lineno, e.category, e.msg)
            return
        for text in lines:
            self.program.statement(text)

    def feed(self, line: SourceLine) -> None:
        """Translate one normalized line."""
        transition = self.tracker.step(line)
        if transition.close:
            self.program.close_function()
        if transition.action == HEADER:
            self._header(line)
        else:
            self._statement(line)

    def finish(self) -> TranslateResult:
        if self.tracker.finish():
            self.program.close_function()
        self.result.output = self.program.render(self.symbols.names())
        return self.result

    def run(self, stream: IO[str]) -> TranslateResult:
        try:
            for line in read_lines(stream):
                self.feed(line)
        except (OSError, UnicodeDecodeError) as e:
            self.result.add_fatal(0, "input", "cannot read input: " + str(e))
            return self.result
        return self.finish()


def translate(stream: IO[str]) -> tuple[str, list[Diagnostic], bool]:
    """Translate a source stream. Returns (output_text, diagnostics, success)."""
    return Translator().run(stream).as_tuple()


def translate_source(source: str) -> tuple[str, list[Diagnostic], bool]:
    return translate(io.StringIO(source))


def translate_path(path: str) -> tuple[str, list[Diagnostic], bool]:
    """Translate the file at path. An unreadable file is fatal to the run."""
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError:
        result = TranslateResult()
        result.add_fatal(0, "input", "cannot open '" + path + "'")
        return result.as_tuple()
    with f:
        return translate(f)
