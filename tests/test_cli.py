"""Tests for the command-line front end."""

import io
import json

import pytest

from genepath.cli import EXIT_INPUT_ABSENT, main, run_menu
from genepath.dictionary import GeneDictionary
from genepath.history import MutationHistory
from genepath.session import MutationSession


def _run(argv) -> tuple:
    out = io.StringIO()
    code = main(argv, out=out)
    return code, out.getvalue()


def test_path_command(dictionary_file, tmp_path) -> None:
    history_file = tmp_path / "history.txt"
    code, text = _run(
        ["--dictionary", str(dictionary_file), "--history-file", str(history_file), "path", "cat", "dog"]
    )
    assert code == 0
    assert "CAT --(1)--> COT --(1)--> COG --(1)--> DOG" in text
    assert "Total Mutation Cost: 3" in text
    assert history_file.read_text(encoding="utf-8") == "DOG 3\n"

    code, text = _run(["--history-file", str(history_file), "history"])
    assert code == 0
    assert "Sequence: DOG | Cost: 3" in text


def test_path_command_suggests(dictionary_file, tmp_path) -> None:
    code, text = _run(["--dictionary", str(dictionary_file), "path", "CCT", "DOG", "--no-history"])
    assert code == 0
    assert "CCT is not in the dictionary; did you mean CAT (edit distance 1)?" in text


def test_missing_dictionary_exit_code(tmp_path, capsys) -> None:
    code, _ = _run(["--dictionary", str(tmp_path / "absent.txt"), "path", "A", "B"])
    assert code == EXIT_INPUT_ABSENT
    assert "error:" in capsys.readouterr().err


def test_export_command(dictionary_file, tmp_path) -> None:
    code, text = _run(["--dictionary", str(dictionary_file), "export", "--format", "json"])
    assert code == 0
    assert json.loads(text)["edges"] == [["CAT", "COT"], ["COG", "COT"], ["COG", "DOG"]]

    out_path = tmp_path / "graph.dot"
    code, text = _run(["--dictionary", str(dictionary_file), "export", "--out", str(out_path)])
    assert code == 0
    assert out_path.exists()
    assert '"components": 1' in text


def test_menu_loop(tmp_path) -> None:
    history = MutationHistory(tmp_path / "history.txt")
    session = MutationSession(GeneDictionary(["CAT", "COT", "COG", "DOG"]), history=history)
    answers = iter(["1", "cat", "dog", "9", "2", "3"])
    out = io.StringIO()
    code = run_menu(session, input_fn=lambda prompt: next(answers), out=out)
    text = out.getvalue()
    assert code == 0
    assert "Total Mutation Cost: 3" in text
    assert "Invalid option!" in text
    assert "Sequence: DOG | Cost: 3" in text
    assert text.rstrip().endswith("Goodbye!")


def test_menu_stops_on_end_of_input() -> None:
    session = MutationSession(GeneDictionary(["AAA"]))

    def closed(prompt):
        raise EOFError

    out = io.StringIO()
    assert run_menu(session, input_fn=closed, out=out) == 0
    assert "Goodbye!" in out.getvalue()


def test_undecodable_dictionary_exit_code(tmp_path, capsys) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ACGT\n\xff\xfeAC\nACGA\n")
    code, _ = _run(["--dictionary", str(path), "path", "ACGT", "ACGA", "--no-history"])
    assert code == EXIT_INPUT_ABSENT
    assert "error:" in capsys.readouterr().err


def test_non_positive_weight_exits_cleanly(dictionary_file, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["--dictionary", str(dictionary_file), "--weight", "0", "path", "CAT", "DOG", "--no-history"])
    assert excinfo.value.code == 2
    assert "EDIT_WEIGHT must be positive" in capsys.readouterr().err


def test_non_numeric_weight_from_environment_exits_cleanly(dictionary_file, monkeypatch, capsys) -> None:
    monkeypatch.setenv("GENEPATH_EDIT_WEIGHT", "heavy")
    with pytest.raises(SystemExit) as excinfo:
        _run(["--dictionary", str(dictionary_file), "path", "CAT", "DOG", "--no-history"])
    assert excinfo.value.code == 2
    assert "EDIT_WEIGHT must be an integer" in capsys.readouterr().err
