"""
Tests for the easy command line driver
"""
import easy


def write_script(tmp_path, source: str):
    script = tmp_path / "prog.es"
    script.write_text(source, encoding="utf-8")
    return script


def test_runs_script(tmp_path, capsys):
    script = write_script(tmp_path, 'var who = "world";\nprint("hello " + who);\n')
    assert easy.main([str(script)]) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_reports_runtime_error(tmp_path, capsys):
    script = write_script(tmp_path, "print(1);\nprint(missing);\n")
    assert easy.main([str(script)]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1"
    assert out[1].startswith("UndefinedVariableError: Undefined variable 'missing' on line 2")
    assert str(script) in out[1]


def test_reports_parse_error_without_running(tmp_path, capsys):
    script = write_script(tmp_path, "print(1);\nvar;\n")
    assert easy.main([str(script)]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [out[0]]
    assert out[0].startswith("ParseError: Expected identifier")


def test_missing_file(tmp_path, capsys):
    assert easy.main([str(tmp_path / "nope.es")]) == 1
    assert capsys.readouterr().out.startswith("FileNotFoundError")


def test_debug_dumps_tokens_and_ast(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("EASYDEBUG", raising=False)
    script = write_script(tmp_path, "print(7);")
    assert easy.main(["--debug", str(script)]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out
    assert out.rstrip().endswith("7")


def test_max_depth_option(tmp_path, capsys):
    script = write_script(
        tmp_path, "function f(n) { if (n == 0) { return 0; } return f(n - 1); } f(5);"
    )
    assert easy.main(["--max-depth", "3", str(script)]) == 1
    assert capsys.readouterr().out.startswith("StackOverflowError")


def test_repl_keeps_state_and_buffers_incomplete_input(capsys, monkeypatch):
    lines = iter([
        "var x = 2;",
        "function sq(n) {",
        "  return n * n;",
        "}",
        "print(sq(x));",
        "print(nope);",
        "exit",
    ])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(lines))
    easy.run_repl()
    out = capsys.readouterr().out.splitlines()
    assert "4" in out
    assert any(line.startswith("UndefinedVariableError") for line in out)
