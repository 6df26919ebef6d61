import io

import pytest

from taskbench.filemenu import append_to_file, main, read_lines, write_to_file


def test_write_then_read(tmp_path):
    target = tmp_path / "data.txt"
    write_to_file(target, "hello world")
    assert read_lines(target) == ["hello world"]
    assert target.read_text(encoding="utf-8") == "hello world\n"


def test_write_overwrites_existing_content(tmp_path):
    target = tmp_path / "data.txt"
    write_to_file(target, "first")
    write_to_file(target, "second")
    assert read_lines(target) == ["second"]


def test_append_keeps_existing_content(tmp_path):
    target = tmp_path / "data.txt"
    write_to_file(target, "first")
    append_to_file(target, "second")
    append_to_file(target, "third")
    assert read_lines(target) == ["first", "second", "third"]


def test_append_creates_missing_file(tmp_path):
    target = tmp_path / "new.txt"
    append_to_file(target, "line")
    assert read_lines(target) == ["line"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.txt")


def _run(monkeypatch, argv, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    return main(argv)


def test_main_write_and_read(tmp_path, monkeypatch, capsys):
    target = tmp_path / "data.txt"
    code = _run(monkeypatch, [str(target)], "1\nhello\n2\nmore\n3\n4\n")
    out = capsys.readouterr().out
    assert code == 0
    assert read_lines(target) == ["hello", "more"]
    assert "Data written to file." in out
    assert "Data appended to file." in out
    assert f"Contents of '{target}':\nhello\nmore\n" in out
    assert out.rstrip().endswith("Exiting program.")


def test_main_invalid_option(tmp_path, monkeypatch, capsys):
    target = tmp_path / "data.txt"
    code = _run(monkeypatch, [str(target)], "9\nabc\n4\n")
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("Invalid option. Please choose 1-4.") == 2
    assert not target.exists()


def test_main_read_missing_reports_error(tmp_path, monkeypatch, capsys):
    target = tmp_path / "missing.txt"
    _run(monkeypatch, [str(target)], "3\n4\n")
    captured = capsys.readouterr()
    assert "Error: Could not open file for reading." in captured.err
    assert "Contents of" not in captured.out


def test_main_stops_at_end_of_input(tmp_path, monkeypatch, capsys):
    target = tmp_path / "data.txt"
    code = _run(monkeypatch, [str(target)], "1\nonly\n")
    capsys.readouterr()
    assert code == 0
    assert read_lines(target) == ["only"]