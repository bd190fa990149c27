from tinyshell.help import help_text, show_help


def test_header_is_first_line():
    lines = help_text().splitlines()
    assert lines[0] == "Command             : Description"
    assert lines[1] == "-" * 40


def test_short_names_are_padded_to_twenty():
    lines = help_text().splitlines()
    assert "delete              : Delete a directory" in lines
    assert "clear_history       : Clear history" in lines


def test_long_name_is_not_truncated():
    text = help_text()
    assert "run_producer_consumer: Run producer-consumer" in text


def test_every_command_line_has_separator_at_column_twenty():
    for line in help_text().splitlines()[2:]:
        if line.startswith("-"):
            assert line == "-" * 40
        elif not line.startswith("run_producer_consumer"):
            assert line[20:22] == ": "


def test_show_help_prints_table(capsys):
    show_help([])
    assert capsys.readouterr().out == help_text()


def test_show_help_with_arguments_prints_usage(capsys):
    show_help(["extra"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Usage: help"