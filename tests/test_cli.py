import io
import logging

import pytest

from lispy import cli
from lispy.interpreter import Interpreter


def test_run_files_prints_each_result(tmp_path, capsys):
    first = tmp_path / "a.lspy"
    first.write_text("(def {x} 4)\n(+ x 1)\n", encoding="utf-8")
    second = tmp_path / "b.lspy"
    second.write_text("{x} (* x x)", encoding="utf-8")

    status = cli.main([str(first), str(second)])

    assert status == 0
    assert capsys.readouterr().out == "()\n5\n{x}\n16\n"


def test_run_files_reports_failures_and_continues(tmp_path):
    bad = tmp_path / "bad.lspy"
    bad.write_text("(+ 1", encoding="utf-8")
    good = tmp_path / "good.lspy"
    good.write_text("(/ 6 0)", encoding="utf-8")
    out, err = io.StringIO(), io.StringIO()

    status = cli.run_files(
        Interpreter(), [str(tmp_path / "missing.lspy"), str(bad), str(good)], out=out, err=err
    )

    assert status == 1
    assert out.getvalue() == "Error: division by zero\n"
    messages = err.getvalue().splitlines()
    assert messages[0].startswith("Could not load")
    assert "unclosed" in messages[1]


def test_ast_flag_prints_tree(tmp_path):
    src = tmp_path / "t.lspy"
    src.write_text("(head {1})", encoding="utf-8")
    out = io.StringIO()
    cli.run_files(Interpreter(), [str(src)], show_ast=True, out=out)
    text = out.getvalue()
    assert "expr|qexpr|>" in text
    assert text.endswith("{1}\n")


def feed_lines(monkeypatch, tmp_path, lines):
    """Make input() return `lines` in order, then signal end of input."""
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "history"))
    pending = iter(lines)

    def fake_input(prompt):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_repl_session(monkeypatch, capsys, tmp_path):
    feed_lines(monkeypatch, tmp_path, ["(def {x} 2)", "", "+ x 3", "(+ 1", "(head {})"])
    status = cli.repl(Interpreter(), color=False)

    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out[0] == "Lispy version 0.0.1"
    # One () from def, one from the empty line
    assert out.count("()") == 2
    assert "5" in out
    assert any(line.startswith("<stdin>: unclosed") for line in out)
    assert "Error: function 'head' passed {}" in out


def test_repl_exits_on_interrupt(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "history"))

    def interrupt(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    assert cli.repl(Interpreter(), color=False) == 0


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["--version"])
    assert info.value.code == 0
    assert "Lispy 0.0.1" in capsys.readouterr().out


def test_config_from_environment(monkeypatch, tmp_path):
    from lispy import config

    monkeypatch.setenv("LISPY_PROMPT", ">> ")
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "h"))
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    monkeypatch.setenv("LISPY_COLOR", "0")
    assert config.get_prompt() == ">> "
    assert config.get_history_file() == tmp_path / "h"
    assert config.get_log_level() == logging.DEBUG
    assert not config.color_enabled()

    monkeypatch.setenv("LISPY_LOG_LEVEL", "nonsense")
    assert config.get_log_level() == logging.WARNING


def test_repl_survives_deep_nesting(monkeypatch, capsys, tmp_path):
    deep = "(" * 600 + "1" + ")" * 600
    feed_lines(monkeypatch, tmp_path, [deep, "(+ 1 2)"])
    assert cli.repl(Interpreter(), color=False) == 0

    out = capsys.readouterr().out.splitlines()
    assert "<stdin>: expression nested too deeply at line 1, column 129" in out
    assert "3" in out


def test_repl_survives_recursion_error(monkeypatch, capsys, tmp_path):
    interp = Interpreter()
    real_eval = interp.eval

    def eval_or_overflow(code):
        if code == "boom":
            raise RecursionError("maximum recursion depth exceeded")
        return real_eval(code)

    monkeypatch.setattr(interp, "eval", eval_or_overflow)
    feed_lines(monkeypatch, tmp_path, ["boom", "(* 2 4)"])
    assert cli.repl(interp, color=False) == 0

    out = capsys.readouterr().out.splitlines()
    assert "<stdin>: expression nested too deeply" in out
    assert "8" in out


def test_run_files_survives_deep_runtime_values(tmp_path):
    # Each def wraps x in one more list, building a value deeper than the
    # host stack can copy
    deep = tmp_path / "deep.lspy"
    deep.write_text("(def {x} {})\n" + "(def {x} (list x))\n" * 1500, encoding="utf-8")
    after = tmp_path / "after.lspy"
    after.write_text("(+ 1 2)", encoding="utf-8")
    out, err = io.StringIO(), io.StringIO()

    status = cli.run_files(Interpreter(), [str(deep), str(after)], out=out, err=err)

    assert status == 1
    assert "expression nested too deeply" in err.getvalue()
    assert out.getvalue().endswith("3\n")


def test_completer_offers_bound_names():
    interp = Interpreter()
    interp.eval("(def {hello} 1)")
    complete = cli.make_completer(interp)
    assert complete("he", 0) == "head"
    assert complete("he", 1) == "hello"
    assert complete("he", 2) is None
    assert complete("zz", 0) is None
