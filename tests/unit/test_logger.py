"""Unit tests for loguru setup and provenance."""

import pytest
from loguru import logger

from quiver.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def reset_loguru():
    yield
    logger.remove()


@pytest.mark.unit
def test_setup_logger_writes_provenance_to_file(tmp_path):
    log_file = setup_logger(
        "verify", tmp_path / "verify_run", extra_provenance={"Resume record": "jane.yaml"}
    )
    logger.debug("debug line reaches the file sink")
    logger.complete()

    assert log_file == tmp_path / "verify_run" / "verify.log"
    content = log_file.read_text(encoding="utf-8")
    assert "Started:" in content
    assert "Working directory:" in content
    assert "Resume record: jane.yaml" in content
    assert "debug line reaches the file sink" in content
