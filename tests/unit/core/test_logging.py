import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from src.core.config.logging_config import LoggingConfig
from src.core.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    yield
    configure_logging(LoggingConfig())


def test_level_applied_to_root_logger() -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    assert logging.getLogger().level == logging.WARNING


def test_file_handler_receives_structlog_events(tmp_path: Path) -> None:
    log_file = tmp_path / "banque.log"
    configure_logging(LoggingConfig(level="DEBUG", format="%(levelname)s %(message)s", file_path=str(log_file)))

    structlog.get_logger("tests.logging").info("cors_policy_registered", max_age=1800)
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "INFO" in content
    assert "event='cors_policy_registered'" in content
    assert "max_age=1800" in content
