"""Tests for the command line entry point and logging setup."""

import logging
from unittest.mock import patch

import pytest

from giga import __main__ as cli
from giga import logconfig
from giga.keyboard import KeyEvent, KeyType
from giga.model import Direction


@pytest.fixture(autouse=True)
def no_log_env(monkeypatch):
    monkeypatch.delenv("GIGA_LOG_LEVEL", raising=False)


def test_version_flag(capsys):
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("giga ")


def test_unknown_argument(capsys):
    assert cli.main(["--bogus"]) == 2
    assert "unknown argument" in capsys.readouterr().err


def test_no_arguments_runs_editor():
    with patch('giga.__main__.Editor') as editor_cls:
        editor_cls.return_value.run.return_value = 0
        assert cli.main([]) == 0
    editor_cls.return_value.run.assert_called_once_with()


def test_keytest_flag_dispatches():
    with patch('giga.__main__.run_keyboard_test', return_value=0) as keytest:
        assert cli.main(["--keytest"]) == 0
    keytest.assert_called_once_with()


@pytest.mark.parametrize("event, line", [
    (KeyEvent(KeyType.PRINTABLE, ord('a'), b"a"), "Read: 97 ('a')"),
    (KeyEvent(KeyType.CONTROL, 17, b"\x11"), "Read: 17"),
    (KeyEvent(KeyType.ARROW, Direction.UP, b"\x1b[A"), "Read: 27 91 65 (arrow up)"),
    (KeyEvent(KeyType.PAGE_DOWN, None, b"\x1b[6~"), "Read: 27 91 54 126 (page_down)"),
    (KeyEvent(KeyType.ESCAPE, None, b"\x1b"), "Read: 27 (escape)"),
    (KeyEvent(KeyType.EOF), "Read: end of input"),
])
def test_describe_event(event, line):
    assert cli.describe_event(event) == line


def test_keyboard_test_echoes_until_q(make_terminal):
    terminal = make_terminal(b"a\x1b[Dqz")
    with patch('giga.__main__.RawModeController') as controller_cls:
        assert cli.run_keyboard_test(terminal) == 0
    controller_cls.return_value.enable.assert_called_once_with()
    controller_cls.return_value.disable.assert_called_once_with()
    output = terminal.output
    assert b"Read: 97 ('a')\r\n" in output
    assert b"Read: 27 91 68 (arrow left)\r\n" in output
    assert output.endswith(b"Read: 113 ('q')\r\n")
    assert terminal.remaining == b"z"


def test_keyboard_test_stops_at_end_of_input(make_terminal):
    terminal = make_terminal(b"x")
    with patch('giga.__main__.RawModeController'):
        assert cli.run_keyboard_test(terminal) == 0
    assert terminal.output.endswith(b"Read: end of input\r\n")


class TestConfigureLogging:
    """Opt-in file logging."""

    def teardown_method(self):
        logger = logging.getLogger("giga")
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)

    def test_disabled_by_default(self):
        assert logconfig.configure_logging({}) is None

    def test_writes_to_user_log_dir(self, tmp_path):
        with patch('giga.logconfig.platformdirs.user_log_dir', return_value=str(tmp_path / "logs")):
            path = logconfig.configure_logging({"GIGA_LOG_LEVEL": "debug"})
        assert path == tmp_path / "logs" / "giga.log"
        logging.getLogger("giga.test").debug("hello log")
        for handler in logging.getLogger("giga").handlers:
            handler.flush()
        assert "hello log" in path.read_text(encoding="utf-8")
        assert logging.getLogger("giga").level == logging.DEBUG

    def test_unknown_level_is_ignored(self, capsys):
        assert logconfig.configure_logging({"GIGA_LOG_LEVEL": "chatty"}) is None
        assert "unknown log level" in capsys.readouterr().err

    def test_unwritable_directory(self, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with patch('giga.logconfig.platformdirs.user_log_dir', return_value=str(blocker / "logs")):
            assert logconfig.configure_logging({"GIGA_LOG_LEVEL": "INFO"}) is None
        assert "logging disabled" in capsys.readouterr().err
