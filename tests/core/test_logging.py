import logging

import pytest
from rich.logging import RichHandler

from complexity_cli.core.logging import (
    analysis_context,
    configure_logging,
    log_debug,
    log_info,
    timed_command,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging()


def console_level(logger):
    (handler,) = [h for h in logger.handlers if isinstance(h, RichHandler)]
    return handler.level


def test_console_level_follows_flags():
    assert console_level(configure_logging(debug=True)) == logging.DEBUG
    assert console_level(configure_logging(verbose=True)) == logging.INFO
    assert console_level(configure_logging()) == logging.WARNING


def test_reconfiguring_replaces_handlers(tmp_path):
    logger = configure_logging(log_file=str(tmp_path / "first.log"))
    assert len(logger.handlers) == 2
    logger = configure_logging()
    assert len(logger.handlers) == 1


def test_log_file_prefixes_context(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(log_file=str(log_path))
    with analysis_context(language="python", source="a.py"):
        log_debug("scanning")
    log_info("estimated", complexity="O(n)")
    configure_logging()

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("[language=python, source=a.py] ")
    assert lines[0].endswith("scanning")
    assert lines[1].startswith("[complexity=O(n)] ")


def test_context_is_restored_after_block(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(log_file=str(log_path))
    with analysis_context(language="c"):
        with analysis_context(source="a.c"):
            pass
        log_debug("inner")
    log_debug("outer")
    configure_logging()

    inner, outer = log_path.read_text(encoding="utf-8").splitlines()
    assert inner.startswith("[language=c] ")
    assert not outer.startswith("[")


def test_timed_command_reraises(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(log_file=str(log_path))

    @timed_command("broken_command")
    def broken(options):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        broken(None)
    configure_logging()
    assert "broken_command failed" in log_path.read_text(encoding="utf-8")
