import pytest

from tinyshell.files import FileManager

END = "End of reading. Returning to shell..."


@pytest.fixture
def manager():
    return FileManager(pause=lambda: True)


@pytest.fixture
def seven_lines(tmp_path):
    path = tmp_path / "seven.txt"
    path.write_text("".join(f"line{i}\n" for i in range(1, 8)), encoding="utf-8")
    return path


def test_write_appends_by_default(manager, tmp_path, capsys):
    target = tmp_path / "out.txt"
    manager.write_file(["first", str(target)])
    manager.write_file(["second", str(target)])
    assert target.read_text(encoding="utf-8") == "first\nsecond\n"
    assert f"Successfully wrote to file: {target}" in capsys.readouterr().out


def test_write_head(manager, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("x\ny\n", encoding="utf-8")
    manager.write_file(["h", str(target), "~HEAD"])
    assert target.read_text(encoding="utf-8") == "h\nx\ny\n"


def test_write_foot(manager, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("x\ny\n", encoding="utf-8")
    manager.write_file(["z", str(target), "~FOOT"])
    assert target.read_text(encoding="utf-8") == "x\ny\nz\n"


def test_write_line_inserts(manager, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("a\nc\n", encoding="utf-8")
    manager.write_file(["b", str(target), "~LINE", "2"])
    assert target.read_text(encoding="utf-8") == "a\nb\nc\n"


def test_write_line_beyond_end_appends(manager, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("a\nc\n", encoding="utf-8")
    manager.write_file(["z", str(target), "~LINE", "10"])
    assert target.read_text(encoding="utf-8") == "a\nc\nz\n"


def test_write_line_without_number(manager, tmp_path, capsys):
    target = tmp_path / "out.txt"
    target.write_text("a\n", encoding="utf-8")
    manager.write_file(["z", str(target), "~LINE"])
    assert "Usage: write_file <content> <filename> ~LINE N" in capsys.readouterr().err
    assert target.read_text(encoding="utf-8") == "a\n"


def test_write_line_bad_number_raises(manager, tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("a\n", encoding="utf-8")
    with pytest.raises(ValueError):
        manager.write_file(["z", str(target), "~LINE", "abc"])


def test_write_position_missing_file(manager, tmp_path, capsys):
    target = tmp_path / "missing.txt"
    manager.write_file(["z", str(target), "~HEAD"])
    assert f"Failed to open file: {target}" in capsys.readouterr().err
    assert not target.exists()


@pytest.mark.parametrize("args", [[], ["only"]])
def test_write_too_few_arguments(manager, args, capsys):
    manager.write_file(args)
    assert "Usage: write_file" in capsys.readouterr().err


def test_write_too_many_arguments(manager, tmp_path, capsys):
    target = tmp_path / "out.txt"
    manager.write_file(["a", str(target), "~HEAD", "1", "2"])
    assert "Invalid number of arguments." in capsys.readouterr().err
    assert not target.exists()


def test_read_whole_file_pages(seven_lines, capsys):
    calls = []
    manager = FileManager(pause=lambda: calls.append(1) or True)
    manager.read_file([str(seven_lines)])
    out = capsys.readouterr().out.splitlines()
    assert out[:5] == [f"line{i}" for i in range(1, 6)]
    assert out[5].startswith("[READ MORE]")
    assert out[6:] == ["line6", "line7", END]
    assert len(calls) == 1


def test_read_whole_file_interrupted(seven_lines, capsys):
    manager = FileManager(pause=lambda: False)
    manager.read_file([str(seven_lines)])
    out = capsys.readouterr().out
    assert "line5" in out
    assert "line6" not in out
    assert "Reading interrupted. Returning to shell..." in out


def test_read_head(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~HEAD", "2"])
    assert capsys.readouterr().out == f"line1\nline2\n{END}\n"


def test_read_foot(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~FOOT", "2"])
    assert capsys.readouterr().out == f"line6\nline7\n{END}\n"


def test_read_range(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~RANGE", "2", "4"])
    assert capsys.readouterr().out == f"line2\nline3\nline4\n{END}\n"


def test_read_invalid_range(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~RANGE", "4", "2"])
    captured = capsys.readouterr()
    assert "Invalid line range." in captured.err
    assert captured.out == ""


def test_read_line(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~LINE", "3"])
    assert capsys.readouterr().out == f"line3\n{END}\n"


def test_read_line_out_of_range(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~LINE", "99"])
    assert "Line number out of range." in capsys.readouterr().err


def test_read_bad_position(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~MIDDLE"])
    assert "Invalid position format." in capsys.readouterr().err


def test_read_head_wrong_arity(manager, seven_lines, capsys):
    manager.read_file([str(seven_lines), "~HEAD"])
    assert "Usage: read_file <filename> ~HEAD N" in capsys.readouterr().err


def test_read_missing_file(manager, tmp_path, capsys):
    target = tmp_path / "missing.txt"
    manager.read_file([str(target)])
    assert f"Could not open file: {target}" in capsys.readouterr().err


def test_show_file_size(manager, tmp_path, capsys):
    data = b"ab\ncd\n"
    target = tmp_path / "sized.txt"
    target.write_bytes(data)
    manager.show_file_size(str(target))
    out = capsys.readouterr().out
    assert f"Size of file {target}: {len(data)} bytes" in out
    assert f"Number of lines in file {target}: {data.count(b'\n')}" in out


def test_show_file_size_missing(manager, tmp_path, capsys):
    manager.show_file_size(str(tmp_path / "missing.txt"))
    assert capsys.readouterr().err.startswith("Error:")


def test_create_delete_and_check(manager, tmp_path, capsys):
    first, second = tmp_path / "a.txt", tmp_path / "b.txt"
    manager.create_file([str(first), str(second)])
    assert first.exists() and second.exists()
    assert first.stat().st_size == 0
    manager.check_file_existence([str(first)])
    assert f"File exists: {first}" in capsys.readouterr().out
    manager.delete_file([str(first), str(second)])
    assert not first.exists() and not second.exists()
    manager.delete_file([str(first)])
    assert f"Failed to delete file: {first}" in capsys.readouterr().err
    manager.check_file_existence([str(first)])
    assert f"File does not exist: {first}" in capsys.readouterr().out


def test_print_file_extensions(manager, capsys):
    manager.print_file_extensions(["report.txt", "archive.tar.gz", "noext"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Extension of file report.txt: ".txt"',
        'Extension of file archive.tar.gz: ".gz"',
        'Extension of file noext: ""',
    ]


def test_copy_file(manager, tmp_path, capsys):
    source, destination = tmp_path / "src.txt", tmp_path / "dst.txt"
    source.write_text("payload", encoding="utf-8")
    manager.copy_file([str(source), str(destination)])
    assert destination.read_text(encoding="utf-8") == "payload"
    destination.write_text("kept", encoding="utf-8")
    manager.copy_file([str(source), str(destination)])
    assert capsys.readouterr().err.startswith("Error:")
    assert destination.read_text(encoding="utf-8") == "kept"


def test_copy_file_usage(manager, capsys):
    manager.copy_file(["one"])
    assert "Usage: copy_file" in capsys.readouterr().out


def test_move_file(manager, tmp_path):
    source, destination = tmp_path / "src.txt", tmp_path / "dst.txt"
    source.write_text("payload", encoding="utf-8")
    manager.move_file([str(source), str(destination)])
    assert not source.exists()
    assert destination.read_text(encoding="utf-8") == "payload"


def test_rename_file(manager, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "old.txt").write_text("x", encoding="utf-8")
    manager.rename_file(["old.txt", "new.txt"])
    assert (tmp_path / "new.txt").read_text(encoding="utf-8") == "x"
    assert 'File renamed from "old.txt" to "new.txt"' in capsys.readouterr().out


def test_rename_missing_file(manager, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    manager.rename_file(["ghost.txt", "new.txt"])
    assert 'File does not exist: "ghost.txt"' in capsys.readouterr().out
    assert not (tmp_path / "new.txt").exists()


def test_list_files_with_extension(manager, tmp_path, capsys):
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "b.log").write_text("", encoding="utf-8")
    (tmp_path / "sub.txt").mkdir()
    manager.list_files_with_extension([str(tmp_path)])
    assert capsys.readouterr().out == '"a.txt"\n"b.log"\n'
    manager.list_files_with_extension([str(tmp_path), ".txt"])
    assert capsys.readouterr().out == '"a.txt"\n'


def test_list_files_usage(manager, capsys):
    manager.list_files_with_extension(["a", "b", "c"])
    assert "Usage: list_file <directory> <extension>" in capsys.readouterr().out


def test_open_file_usage(manager, capsys):
    manager.open_file([])
    assert "Usage: open <file_path>" in capsys.readouterr().out