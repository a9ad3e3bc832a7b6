import logging
import pytest
import yaml


@pytest.fixture
def conf_dir(tmp_path):
    d = tmp_path / "conf.d"
    d.mkdir()
    return d


@pytest.fixture
def write_integration(conf_dir):
    """Write `{"logs": sources}` to conf.d/<name>.yaml."""
    def _write(name, sources):
        path = conf_dir / f"{name}.yaml"
        path.write_text(yaml.dump({"logs": sources}))
        return path
    return _write


@pytest.fixture
def restore_logging():
    """Undo the dictConfig changes made by setup_logging."""
    root = logging.getLogger()
    agent_logger = logging.getLogger("logs_agent")
    saved_root = (root.handlers[:], root.level)
    saved_agent = (agent_logger.handlers[:], agent_logger.level, agent_logger.propagate)
    yield
    for logger in (root, agent_logger):
        for handler in logger.handlers:
            if handler not in saved_root[0] and handler not in saved_agent[0]:
                handler.close()
    root.handlers[:] = saved_root[0]
    root.setLevel(saved_root[1])
    agent_logger.handlers[:] = saved_agent[0]
    agent_logger.setLevel(saved_agent[1])
    agent_logger.propagate = saved_agent[2]
