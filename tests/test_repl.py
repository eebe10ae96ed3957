import io

import pytest

from lisplet.__main__ import main, build_parser
from lisplet.errors import LispletArityError
from lisplet.interpreter import Interpreter
from lisplet.repl import repl, run_file, read_form, print_result
from lisplet.types.symbol import Symbol

FACT_PROGRAM = """
(defun fact (n)
  (if (<= n 1)
      1
      (* n (fact (- n 1)))))
(fact 5)
(format t "fact 10 is ~a~%" (fact 10))
(sin (/ pi 2))
"""


def feed(lines):
    """input() stand-in returning the given lines, then EOF."""
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_run_file(tmp_path):
    path = tmp_path / "fact.lisp"
    path.write_text(FACT_PROGRAM)
    out = io.StringIO()
    run_file(path, Interpreter(), out)
    assert out.getvalue() == "Defined function: FACT\n120\nfact 10 is 3628800\n1.0\n"


def test_run_file_stops_at_first_error(tmp_path):
    path = tmp_path / "bad.lisp"
    path.write_text("(defun add (a b) (+ a b))\n(add 1)\n(add 1 2)\n")
    out = io.StringIO()
    with pytest.raises(LispletArityError):
        run_file(path, Interpreter(), out)
    assert out.getvalue() == "Defined function: ADD\n"


def test_print_result_skips_functions():
    interp = Interpreter()
    interp.eval("(defun f () 1)")
    out = io.StringIO()
    print_result(interp.env.find(Symbol("f")), out)
    print_result(3, out)
    assert out.getvalue() == "3\n"


def test_read_form_joins_lines_until_balanced():
    assert read_form(feed(["(+ 1", "2)"])) == "(+ 1\n2)"
    assert read_form(feed([])) is None


def test_repl_session():
    out = io.StringIO()
    lines = [
        "(defun add (a b)",
        "  (+ a b))",
        "(add 1)",
        "(add 20 22)",
        "",
        "undefined",
        "(+ 1 2))",
        "quit",
        "(add 1 1)",
    ]
    repl(Interpreter(), feed(lines), out)
    assert out.getvalue().splitlines() == [
        "Defined function: ADD",
        "error: add expects 2 argument(s), got 1",
        "42",
        "error: Unbound symbol: undefined",
        "error: Unexpected ')'",
    ]


def test_repl_exits_on_eof():
    out = io.StringIO()
    repl(Interpreter(), feed(["(* 6 7)"]), out)
    assert out.getvalue() == "42\n\n"


def test_main_runs_files(tmp_path, capsys):
    path = tmp_path / "prog.lisp"
    path.write_text("(defun sq (x) (* x x)) (sq 9)")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Defined function: SQ\n81\n"


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "prog.lisp"
    path.write_text("(+ 1 2")
    assert main([str(path)]) == 1
    assert "error" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.lisp")]) == 1
    assert "missing.lisp" in capsys.readouterr().err


def test_main_lexical_flag(tmp_path, capsys):
    path = tmp_path / "prog.lisp"
    path.write_text("(defun get-y () y) (defun with-y (y) (get-y)) (with-y 1)")
    assert main(["--lexical", str(path)]) == 1
    assert "Unbound symbol: y" in capsys.readouterr().err
    assert main([str(path)]) == 0


def test_parser_options():
    args = build_parser().parse_args(["-i", "-v", "--recursion-limit", "5000", "a.lisp"])
    assert args.interactive and args.verbose
    assert args.recursion_limit == 5000
    assert args.files == ["a.lisp"]
