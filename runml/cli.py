"""runml CLI: translate a program, compile it, run it, clean up."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from .build import Toolchain, Workspace, compile_unit, default_compiler, run_binary
from .driver import translate, translate_path
from .errors import Diagnostic

USAGE: str = """\
runml [OPTIONS] FILE [ARGS...]

Translate FILE to C, compile it, and run it with ARGS.
Use - as FILE to read the program from stdin.

Options:
  --emit              Print the generated C to stdout, do not compile or run
  -o, --output FILE   Write the generated C to FILE, do not compile or run
  --cc COMPILER       C compiler to use (default: $CC, else cc)
  --keep              Keep the temporary directory with the .c file and binary
  --keep-going        Compile and run even if translation reported errors
  -v, --verbose       Echo external commands to stderr
  -h, --help          Show this help message
"""


@dataclass
class Options:
    """Command-line configuration."""

    input_file: str = ""
    program_args: list[str] = field(default_factory=list)
    emit: bool = False
    output_file: str | None = None
    cc: str = ""
    keep: bool = False
    keep_going: bool = False
    verbose: bool = False


class UsageError(Exception):
    """Bad command line."""


def parse_args(argv: list[str]) -> Options:
    """Parse command-line arguments. Everything after FILE belongs to the program."""
    opts = Options()
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            sys.exit(0)
        elif arg == "--emit":
            opts.emit = True
            i += 1
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(argv):
                raise UsageError(arg + " requires an argument")
            opts.output_file = argv[i + 1]
            i += 2
        elif arg == "--cc":
            if i + 1 >= len(argv):
                raise UsageError("--cc requires an argument")
            opts.cc = argv[i + 1]
            i += 2
        elif arg == "--keep":
            opts.keep = True
            i += 1
        elif arg == "--keep-going":
            opts.keep_going = True
            i += 1
        elif arg == "-v" or arg == "--verbose":
            opts.verbose = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            raise UsageError("unknown flag '" + arg + "'")
        else:
            opts.input_file = arg
            opts.program_args = argv[i + 1 :]
            break
    if opts.input_file == "":
        raise UsageError("missing file argument")
    if opts.cc == "":
        opts.cc = default_compiler()
    return opts


def _print_diagnostics(diagnostics: list[Diagnostic]) -> None:
    i = 0
    while i < len(diagnostics):
        print(str(diagnostics[i]), file=sys.stderr)
        i += 1


def write_output(output: str, output_file: str | None) -> int:
    """Write output to file or stdout. Returns 0 on success, 1 on error."""
    if output_file is not None:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(output)
        except OSError:
            print("runml: cannot write '" + output_file + "'", file=sys.stderr)
            return 1
        return 0
    sys.stdout.write(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = argv if argv is not None else sys.argv[1:]
    try:
        opts = parse_args(args)
    except UsageError as e:
        print("runml: " + str(e), file=sys.stderr)
        return 2

    if opts.input_file == "-":
        output, diagnostics, ok = translate(sys.stdin)
    else:
        output, diagnostics, ok = translate_path(opts.input_file)
    _print_diagnostics(diagnostics)
    if not ok:
        return 1
    if len(diagnostics) > 0 and not opts.keep_going:
        return 1

    if opts.emit or opts.output_file is not None:
        return write_output(output, opts.output_file)

    toolchain = Toolchain(cc=opts.cc, verbose=opts.verbose)
    with Workspace(keep=opts.keep, verbose=opts.verbose) as workspace:
        code, errors = compile_unit(toolchain, workspace, output)
        if code != 0:
            sys.stderr.write(errors)
            if errors and not errors.endswith("\n"):
                sys.stderr.write("\n")
            print("runml: compilation failed", file=sys.stderr)
            return 1
        sys.stdout.flush()
        return run_binary(toolchain, workspace, opts.program_args)
