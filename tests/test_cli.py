import json
import sys
from pathlib import Path

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from monkey import monkey_cli

SOURCE = "let x = 5;\nreturn x;"


def test_run_monkey_string_prints_statements(
    capsys: pytest.CaptureFixture[str],
) -> None:
    errors = monkey_cli.run_monkey(SOURCE, is_string=True)
    assert errors == []
    assert capsys.readouterr().out == "let x = ;\nreturn ;\n"


def test_run_monkey_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    monkey_cli.run_monkey("a != b", is_string=True, tokens=True)
    assert capsys.readouterr().out.splitlines() == [
        "Token(Identifier, 'a')",
        "Token(NotEqual, '!=')",
        "Token(Identifier, 'b')",
    ]


def test_run_monkey_tokens_json(capsys: pytest.CaptureFixture[str]) -> None:
    monkey_cli.run_monkey("let", is_string=True, tokens=True, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data == [{"type": "LetKeyword", "literal": "let", "line": 1, "col": 1}]


def test_run_monkey_ast_json(capsys: pytest.CaptureFixture[str]) -> None:
    monkey_cli.run_monkey(SOURCE, is_string=True, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["kind"] == "Program"
    assert [s["kind"] for s in data["statements"]] == ["LetStatement", "ReturnStatement"]
    assert data["statements"][0]["name"]["value"] == "x"


def test_run_monkey_reports_errors_on_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    errors = monkey_cli.run_monkey("let = 5;", is_string=True)
    assert errors == ["expected next token to be Identifier, got Assign instead"]
    captured = capsys.readouterr()
    assert "[error] >>> expected next token to be Identifier" in captured.err


def test_run_monkey_file_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    file_path = tmp_path / "input.monkey"
    file_path.write_text(SOURCE, encoding="utf-8")
    monkey_cli.run_monkey(str(file_path))
    assert "let x = ;" in capsys.readouterr().out


def test_run_monkey_rejects_other_extensions(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Only .monkey files are supported."):
        monkey_cli.run_monkey(str(tmp_path / "input.txt"))


def test_run_monkey_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        monkey_cli.run_monkey(str(tmp_path / "missing.monkey"))


def test_run_monkey_output_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_path = tmp_path / "out.txt"
    monkey_cli.run_monkey(SOURCE, is_string=True, out=str(output_path))
    assert output_path.read_text(encoding="utf-8") == "let x = ;\nreturn ;\n"
    assert f"(wrote to {output_path})" in capsys.readouterr().out


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])  # type: ignore[misc]
@given(source=st.text(max_size=80))  # type: ignore[misc]
def test_run_monkey_never_crashes(
    source: str, capsys: pytest.CaptureFixture[str]
) -> None:
    errors = monkey_cli.run_monkey(source, is_string=True)
    assert isinstance(errors, list)
    capsys.readouterr()


def test_main_string(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["monkey", "-s", "let x = 5;"])
    monkey_cli.main()
    assert "let x = ;" in capsys.readouterr().out


def test_main_tokens(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["monkey", "-s", "-t", "x1"])
    monkey_cli.main()
    assert capsys.readouterr().out.splitlines() == [
        "Token(Identifier, 'x')",
        "Token(IntegerLiteral, '1')",
    ]


def test_main_exits_non_zero_on_diagnostics(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["monkey", "-s", "let = 5;"])
    with pytest.raises(SystemExit) as excinfo:
        monkey_cli.main()
    assert excinfo.value.code == 1


def test_main_no_args_starts_repl(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[bool, bool]] = []
    monkeypatch.setattr(sys, "argv", ["monkey"])
    monkeypatch.setattr(
        "monkey.monkey_repl.start_repl",
        lambda parse=False, verbose=False: calls.append((parse, verbose)),
    )
    monkey_cli.main()
    assert calls == [(False, False)]


def test_main_repl_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[bool, bool]] = []
    monkeypatch.setattr(sys, "argv", ["monkey", "--repl", "--parse", "--verbose"])
    monkeypatch.setattr(
        "monkey.monkey_repl.start_repl",
        lambda parse=False, verbose=False: calls.append((parse, verbose)),
    )
    monkey_cli.main()
    assert calls == [(True, True)]
