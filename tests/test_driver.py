"""End-to-end tests for the translation driver."""

import io

from runml.driver import Translator, translate, translate_path, translate_source

ADD_PROGRAM = "function add a b\n\treturn a + b\nx <- add(1, 2)\nprint x\n"

ADD_EXPECTED = """\
#include <stdio.h>
#include <stdlib.h>
#include <math.h>

// === Helpers ===
static void runml_print(double value) {
    if (floor(value) == value) {
        printf("%.0f\\n", value);
    } else {
        printf("%.6f\\n", value);
    }
}

// === Variables ===
double x = 0.0;

// === Forward declarations ===
double add(double a, double b);

double add(double a, double b) {
    return a + b;
    return 0.0;
}

int main(void) {
    x = add(1, 2);
    runml_print(x);
    return 0;
}
"""


def test_add_program():
    output, diagnostics, ok = translate_source(ADD_PROGRAM)
    assert ok
    assert diagnostics == []
    assert output == ADD_EXPECTED


def test_top_level_call_introduces_no_declarations():
    output, diagnostics, ok = translate_source("foo(1,2,3)\n")
    assert ok
    assert diagnostics == []
    assert "    foo(1,2,3);" in output.split("\n")
    assert "double " not in output.split("int main(void) {")[1]


def test_unknown_statement_reported_once():
    output, diagnostics, ok = translate_source("x ?? y\nprint 1\n")
    assert ok
    assert len(diagnostics) == 1
    assert diagnostics[0].lineno == 1
    assert diagnostics[0].category == "statement"
    assert "??" not in output
    assert "runml_print(1);" in output


def test_brace_balance():
    source = (
        "function a x\n\treturn x\n"
        "function b y\n\tt <- y\n\treturn t\n"
        "print a(1) + b(2)\n"
        "function c z\n\treturn z\n"
    )
    output, diagnostics, ok = translate_source(source)
    assert ok and diagnostics == []
    body = output.split("// === Forward declarations ===")[1]
    assert body.count("{") == body.count("}")
    # three functions plus the entry point; the print helper precedes this part
    assert body.count("\n}") == 4


def test_repeated_assignment_declares_once():
    output, _, _ = translate_source("n <- 1\nn <- n + 1\nn <- n + 1\n")
    assert output.count("double n = 0.0;") == 1
    assert output.count("n = ") == 4
    assert output.index("double n = 0.0;") < output.index("n = 1;")


def test_comment_stripping_is_total():
    with_comment, _, _ = translate_source("x <- 1 # comment\n")
    without, _, _ = translate_source("x <- 1\n")
    assert with_comment == without


def test_runs_do_not_share_symbols():
    first, _, _ = translate_source("x <- 1\n")
    second, _, _ = translate_source("x <- 2\n")
    assert "double x = 0.0;" in first
    assert "double x = 0.0;" in second


def test_translator_instance_state():
    translator = Translator()
    result = translator.run(io.StringIO("function f a\n\tv <- a\n\treturn v\n"))
    assert result.ok()
    assert translator.symbols.names() == ["v"]
    assert translator.function_names == {"f"}


def test_malformed_header_inside_function_closes_it():
    source = "function f a\n\treturn a\nfunction 1bad\n\tprint 2\n"
    output, diagnostics, ok = translate_source(source)
    assert ok
    assert len(diagnostics) == 1
    assert diagnostics[0].category == "function"
    assert output.count("{") == output.count("}")
    assert "    runml_print(2);" in output.split("int main(void) {")[1]


def test_translate_accepts_file_objects(tmp_path):
    path = tmp_path / "prog.ml"
    path.write_text(ADD_PROGRAM)
    with open(path) as f:
        output, _, ok = translate(f)
    assert ok
    assert output == ADD_EXPECTED
    assert translate_path(str(path))[0] == ADD_EXPECTED


def test_missing_input_is_fatal(tmp_path):
    output, diagnostics, ok = translate_path(str(tmp_path / "missing.ml"))
    assert not ok
    assert output == ""
    assert len(diagnostics) == 1
    assert diagnostics[0].is_fatal
    assert str(diagnostics[0]).startswith("error:0: [input] cannot open")


class _BrokenStream:
    def __iter__(self):
        yield "x <- 1\n"
        raise OSError("device gone")


def test_read_failure_is_fatal():
    output, diagnostics, ok = translate(_BrokenStream())
    assert not ok
    assert output == ""
    assert "device gone" in diagnostics[0].message


def test_undecodable_file_is_fatal(tmp_path):
    path = tmp_path / "bad.ml"
    path.write_bytes(b"print 1\n\xff\xfe\n")
    output, diagnostics, ok = translate_path(str(path))
    assert not ok
    assert output == ""


def test_one_declaration_across_function_boundary():
    source = "x <- 1\nfunction f a\n\tx <- a\n\treturn x\nx <- f(2)\n"
    output, diagnostics, ok = translate_source(source)
    assert ok and diagnostics == []
    assert output.count("double x = 0.0;") == 1
    assert output.index("double x = 0.0;") < output.index("double f(double a) {")
    assert "    x = a;" in output.split("\n")


def test_parameter_assignment_does_not_redeclare_parameter():
    output, _, _ = translate_source("function inc a\n\ta <- a + 1\n\treturn a\n")
    function_body = output.split("double inc(double a) {")[1].split("\n}")[0]
    assert "double" not in function_body
    assert "    a = a + 1;" in function_body.split("\n")


def test_duplicate_function_rejected():
    source = "function f a\n\treturn a\nfunction f b\n\treturn b\n"
    output, diagnostics, ok = translate_source(source)
    assert ok
    assert [str(d) for d in diagnostics] == [
        "error:3: [function] invalid function definition: duplicate function 'f'"
    ]
    assert output.count("double f(") == 2  # prototype and definition
    assert output.count("{") == output.count("}")
