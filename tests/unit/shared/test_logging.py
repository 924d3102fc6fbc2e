from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from src.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "predictor.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("structured log test", prediction_id=1)


def test_configure_logging_quiets_http_client() -> None:
    configure_logging(level="DEBUG", environment="development")

    assert logging.getLogger("httpx").level == logging.WARNING


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_production_layout_comes_from_json_renderer(tmp_path) -> None:
    log_file = tmp_path / "predictor.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    get_logger("tests.logging.json").info("poller.started", interval_seconds=30.0)
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_file.read_text().splitlines()
    records = [json.loads(line) for line in lines]
    assert records[-1]["event"] == "poller.started"
    assert records[-1]["interval_seconds"] == 30.0
    assert records[-1]["level"] == "info"
