from unittest.mock import patch

from tinyshell.programs import child


def test_main_sleeps_then_succeeds():
    with patch("time.sleep") as sleep:
        assert child.main([]) == 0
    sleep.assert_called_once_with(child.SLEEP_SECONDS)
    assert child.SLEEP_SECONDS == 10


def test_main_without_arguments():
    with patch("time.sleep") as sleep:
        assert child.main() == 0
    assert sleep.call_count == 1