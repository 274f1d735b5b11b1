"""Compile and run a generated translation unit with an external C compiler."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import tempfile
from dataclasses import dataclass


@dataclass
class Toolchain:
    """C compiler invocation."""

    cc: str = "cc"
    verbose: bool = False

    def compile_command(self, source: str, binary: str) -> list[str]:
        return [self.cc, "-std=c11", "-o", binary, source, "-lm"]

    def echo(self, cmd: list[str]) -> None:
        if self.verbose:
            print("+ " + " ".join(cmd), file=sys.stderr)


class Workspace:
    """Temporary directory holding the .c file and the binary."""

    def __init__(self, keep: bool = False, verbose: bool = False) -> None:
        self.keep: bool = keep
        self.verbose: bool = verbose
        self.path: str = ""

    @property
    def source_path(self) -> str:
        return os.path.join(self.path, "program.c")

    @property
    def binary_path(self) -> str:
        return os.path.join(self.path, "program")

    def __enter__(self) -> "Workspace":
        self.path = tempfile.mkdtemp(prefix="runml-")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.keep:
            print("runml: kept " + self.path, file=sys.stderr)
            return
        if self.verbose:
            print("+ rm -rf " + self.path, file=sys.stderr)
        shutil.rmtree(self.path, ignore_errors=True)


def default_compiler() -> str:
    return os.environ.get("CC") or "cc"


def compile_unit(toolchain: Toolchain, workspace: Workspace, text: str) -> tuple[int, str]:
    """Write text to the workspace and compile it. Returns (returncode, stderr)."""
    with open(workspace.source_path, "w", encoding="utf-8") as f:
        f.write(text)
    cmd = toolchain.compile_command(workspace.source_path, workspace.binary_path)
    toolchain.echo(cmd)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        return (127, "cannot run '" + toolchain.cc + "': " + str(e))
    return (result.returncode, result.stderr)


def run_binary(toolchain: Toolchain, workspace: Workspace, args: list[str]) -> int:
    """Run the compiled program with inherited stdio. Returns its exit code."""
    cmd = [workspace.binary_path] + list(args)
    toolchain.echo(cmd)
    try:
        result = subprocess.run(cmd)
    except OSError as e:
        print("runml: cannot run program: " + str(e), file=sys.stderr)
        return 1
    return result.returncode
