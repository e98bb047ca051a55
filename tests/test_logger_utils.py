# tests/test_logger_utils.py
import logging

import pytest
from rich.logging import RichHandler

from markov_textgen.utils.logger_utils import PACKAGE_LOGGER, configure_logging, time_block


@pytest.fixture
def pkg_logger():
    log = logging.getLogger(PACKAGE_LOGGER)
    before = list(log.handlers)
    level = log.level
    yield log
    for h in list(log.handlers):
        if h not in before:
            log.removeHandler(h)
            h.close()
    log.setLevel(level)


def _owned(log):
    return [h for h in log.handlers if getattr(h, "_markov_textgen_owned", False)]


def test_second_call_replaces_handlers(pkg_logger, tmp_path):
    configure_logging("INFO", str(tmp_path / "a.log"))
    assert len(_owned(pkg_logger)) == 2
    configure_logging("DEBUG")
    owned = _owned(pkg_logger)
    assert len(owned) == 1
    assert isinstance(owned[0], RichHandler)
    assert pkg_logger.level == logging.DEBUG


def test_lowercase_level_accepted(pkg_logger):
    configure_logging("warning")
    assert pkg_logger.level == logging.WARNING


def test_log_file_gets_formatted_lines(pkg_logger, tmp_path):
    path = tmp_path / "logs" / "run.log"
    configure_logging("INFO", str(path))
    logging.getLogger("markov_textgen.core.model").info("saved model")
    for h in _owned(pkg_logger):
        h.flush()
    line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert line.startswith("[")
    assert "] INFO    | markov_textgen.core.model | saved model" in line


def test_time_block_logs_duration(caplog):
    caplog.set_level(logging.INFO, logger=PACKAGE_LOGGER)
    with time_block("build") as timer:
        pass
    assert timer.elapsed >= 0
    assert f"build done: {timer.elapsed}s" in caplog.text


def test_time_block_does_not_swallow_errors(caplog):
    caplog.set_level(logging.INFO, logger=PACKAGE_LOGGER)
    with pytest.raises(RuntimeError):
        with time_block("fail"):
            raise RuntimeError("boom")
    assert "fail done:" in caplog.text
