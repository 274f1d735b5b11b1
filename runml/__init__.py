"""runml - translate indentation-delimited ml programs to C11."""

from .driver import Translator, translate, translate_path, translate_source
from .errors import Diagnostic, TranslateResult
from .lines import SourceLine, normalize_line, read_lines
from .scope import INSIDE, OUTSIDE, ScopeTracker, Transition
from .signature import FunctionSignature, SignatureError, emit_signature, parse_signature
from .statements import Assign, Call, Print, Return, StatementError, classify, translate_statement
from .symbols import SymbolTable

__all__ = [
    "Assign",
    "Call",
    "Diagnostic",
    "FunctionSignature",
    "INSIDE",
    "OUTSIDE",
    "Print",
    "Return",
    "ScopeTracker",
    "SignatureError",
    "SourceLine",
    "StatementError",
    "SymbolTable",
    "TranslateResult",
    "Transition",
    "Translator",
    "classify",
    "emit_signature",
    "normalize_line",
    "parse_signature",
    "read_lines",
    "translate",
    "translate_path",
    "translate_source",
    "translate_statement",
]
