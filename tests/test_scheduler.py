from tinyshell.scheduler import schedule_command


def test_schedules_and_runs(capsys):
    calls = []
    thread = schedule_command(["0", "s", "echo", "a", "b"], lambda c, a: calls.append((c, a)))
    thread.join(timeout=5)
    assert calls == [("echo", ["a", "b"])]
    out = capsys.readouterr().out
    assert "Scheduled command 'echo' to run after 0 seconds." in out
    assert "The thread is completed!" in out


def test_usage_when_unit_missing(capsys):
    calls = []
    assert schedule_command(["1", "m", "pwd"], lambda c, a: calls.append(c)) is None
    assert calls == []
    assert "Usage: after <number> s <command>" in capsys.readouterr().err


def test_usage_when_too_short(capsys):
    assert schedule_command(["1", "s"], lambda c, a: None) is None
    assert "Usage: after <number> s <command>" in capsys.readouterr().err


def test_invalid_number(capsys):
    assert schedule_command(["soon", "s", "pwd"], lambda c, a: None) is None
    assert "Invalid number: soon" in capsys.readouterr().err