import logging
import logging.handlers

from logs_agent.logging_setup import setup_logging


def test_setup_logging_writes_to_file(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    setup_logging(str(log_dir), level=logging.DEBUG, console_output=False)

    logging.getLogger("logs_agent.test").info("hello from the agent")
    for handler in logging.getLogger("logs_agent").handlers:
        handler.flush()

    assert "hello from the agent" in (log_dir / "logs_agent.log").read_text()
    handlers = logging.getLogger("logs_agent").handlers
    assert [type(h) for h in handlers] == [logging.handlers.RotatingFileHandler]


def test_setup_logging_unusable_directory_falls_back_to_console(tmp_path, restore_logging, capsys):
    not_a_dir = tmp_path / "agent"
    not_a_dir.write_text("")

    setup_logging(str(not_a_dir / "logs"), console_output=False)

    handlers = logging.getLogger("logs_agent").handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
    assert "using console only" in capsys.readouterr().out
