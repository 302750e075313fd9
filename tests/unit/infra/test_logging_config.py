"""Tests for infrastructure.observability.logging_config."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from infrastructure.observability.logging_config import (
    SERVICE_NAME,
    add_service_name,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestAddServiceName:
    def test_adds_service(self) -> None:
        event = add_service_name(None, "info", {"event": "x"})
        assert event["service"] == SERVICE_NAME

    def test_keeps_existing_service(self) -> None:
        event = add_service_name(None, "info", {"event": "x", "service": "other"})
        assert event["service"] == "other"


class TestSetupLogging:
    def test_sets_level(self, restore_root_logger: logging.Logger) -> None:
        setup_logging("DEBUG")
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logger: logging.Logger) -> None:
        setup_logging("NOPE")
        assert restore_root_logger.level == logging.INFO

    def test_single_handler_installed(self, restore_root_logger: logging.Logger) -> None:
        setup_logging()
        assert len(restore_root_logger.handlers) == 1

    def test_stdlib_records_rendered_as_json(
        self,
        restore_root_logger: logging.Logger,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        setup_logging("INFO")
        logging.getLogger("pagination.test").info("window selected")
        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "window selected"
        assert payload["service"] == SERVICE_NAME
        assert payload["level"] == "info"

    def test_console_renderer(
        self,
        restore_root_logger: logging.Logger,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        setup_logging("INFO", json_output=False)
        logging.getLogger("pagination.test").warning("console line")
        assert "console line" in capsys.readouterr().out


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        log = get_logger("pagination")
        bound = log.bind(page=3)
        assert bound is not None
