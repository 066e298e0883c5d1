from pathlib import Path

import pytest

from dagflow.errors import ConfigFileNotFoundError, ParserError
from dagflow.parser import Parser, load_file
from dagflow.task import DefaultTask


class LineParser(Parser):
    """Each non-empty line names one task."""

    def parse_tasks_from_str(self, content, specific_actions=None):
        return [DefaultTask(line) for line in content.splitlines() if line]


def test_load_file_returns_whole_content(tmp_path: Path):
    path = tmp_path / "tasks.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert load_file(path) == "first\nsecond\n"
    assert load_file(str(path)) == "first\nsecond\n"


def test_load_file_missing_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / "no_such_file.yaml")


def test_parser_is_abstract():
    with pytest.raises(TypeError):
        Parser()


def test_parse_tasks_reads_file_and_delegates(tmp_path: Path):
    path = tmp_path / "tasks.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    tasks = Parser.parse_tasks(LineParser(), path, None)
    assert [task.name for task in tasks] == ["alpha", "beta"]


def test_parse_tasks_matches_parse_from_str(tmp_path: Path):
    content = "one\ntwo\nthree\n"
    path = tmp_path / "tasks.txt"
    path.write_text(content, encoding="utf-8")
    parser = LineParser()
    from_file = [task.name for task in Parser.parse_tasks(parser, path, None)]
    from_str = [task.name for task in parser.parse_tasks_from_str(load_file(path))]
    assert from_file == from_str == ["one", "two", "three"]


def test_parse_tasks_missing_file_is_parser_error(tmp_path: Path):
    with pytest.raises(ConfigFileNotFoundError) as info:
        Parser.parse_tasks(LineParser(), tmp_path / "missing.txt", None)
    assert isinstance(info.value, ParserError)
    assert str(info.value).startswith("Parsing error: File not found.")


def test_parse_tasks_invalid_utf8_is_parser_error(tmp_path: Path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ParserError):
        Parser.parse_tasks(LineParser(), path, None)