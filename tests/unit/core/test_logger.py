"""
Unit tests for the loguru setup.
"""

import json
import logging

import pytest
from loguru import logger

from app.core.logger import InterceptHandler, setup_logger


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs" / "nova.log"
    yield path
    logger.remove()


class TestSetupLogger:

    def test_file_sink_created(self, log_file):
        setup_logger(level="INFO", log_file=str(log_file))
        logger.info("readiness computed")
        assert "readiness computed" in log_file.read_text()

    def test_level_filters(self, log_file):
        setup_logger(level="WARNING", log_file=str(log_file))
        logger.info("quiet")
        logger.warning("loud")
        text = log_file.read_text()
        assert "loud" in text
        assert "quiet" not in text

    def test_server_logs_routed_to_loguru(self, log_file):
        setup_logger(level="INFO", log_file=str(log_file))
        logging.getLogger("uvicorn.error").warning("server started")
        assert "server started" in log_file.read_text()
        assert isinstance(logging.getLogger("uvicorn").handlers[0], InterceptHandler)
        assert logging.getLogger("uvicorn").propagate is False

    def test_json_console(self, capsys, log_file):
        setup_logger(level="INFO", json_logs=True)
        logger.info("json line")
        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        assert json.loads(lines[-1])["record"]["message"] == "json line"
