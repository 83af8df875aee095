from __future__ import annotations

import logging

import pytest

from registry_api.app.core.logging_config import setup_logging


@pytest.fixture()
def scratch_logger(request):
    logger = logging.getLogger(f"registry_api.tests.{request.node.name}")
    logger.propagate = False
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def test_setup_logging_configures_once(scratch_logger, tmp_path):
    logfile = tmp_path / "registry.log"
    setup_logging("debug", str(logfile), logger=scratch_logger)
    assert scratch_logger.level == logging.DEBUG
    assert [type(h) for h in scratch_logger.handlers] == [logging.StreamHandler, logging.FileHandler]

    setup_logging("error", logger=scratch_logger)
    assert scratch_logger.level == logging.DEBUG
    assert len(scratch_logger.handlers) == 2

    scratch_logger.info("hello")
    for handler in scratch_logger.handlers:
        handler.flush()
    assert f"[INFO] {scratch_logger.name}: hello" in logfile.read_text(encoding="utf-8")


def test_foreign_handlers_do_not_block_setup(scratch_logger):
    scratch_logger.addHandler(logging.NullHandler())
    scratch_logger.setLevel(logging.ERROR)

    setup_logging("warning", logger=scratch_logger)

    assert scratch_logger.level == logging.WARNING
    assert len(scratch_logger.handlers) == 2


def test_unknown_level_falls_back_to_info(scratch_logger):
    scratch_logger.setLevel(logging.ERROR)
    setup_logging("chatty", logger=scratch_logger)
    assert scratch_logger.level == logging.INFO
    assert [type(h) for h in scratch_logger.handlers] == [logging.StreamHandler]
