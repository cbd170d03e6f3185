"""Unit tests for logging configuration and the colored API call logger."""

import logging

import pytest

from aura_client.config import Settings
from aura_client.infrastructure.logging.colored_logger import ApiArea, ApiCallLogger
from aura_client.infrastructure.logging.log_config import setup_logging


def test_setup_logging_applies_category_levels():
    settings = Settings(
        log_level="WARNING",
        log_level_http="ERROR",
        log_level_api="DEBUG",
        log_level_services="nonsense",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("aura_client.infrastructure.api").level == logging.DEBUG
    assert logging.getLogger("aura_client.application.services").level == logging.INFO


@pytest.mark.parametrize(
    ("path", "area"),
    [
        ("/auth/login", ApiArea.AUTH),
        ("/cinema/watched/5", ApiArea.CINEMA),
        ("/food/today", ApiArea.FOOD),
        ("/languages/streak", ApiArea.LANGUAGES),
        ("/logistics/search-place?q=x", ApiArea.LOGISTICS),
        ("/health", ApiArea.OTHER),
    ],
)
def test_area_for_path(path, area):
    assert ApiArea.for_path(path) == area


def test_timed_call_logs_failure_and_reraises(caplog):
    log = ApiCallLogger("aura_client.infrastructure.api.test")

    with caplog.at_level(logging.WARNING, logger="aura_client.infrastructure.api.test"):
        with pytest.raises(RuntimeError):
            with log.timed_call(ApiArea.FOOD, "GET /food/today"):
                raise RuntimeError("boom")

    assert "GET /food/today" in caplog.text
    assert "RuntimeError: boom" in caplog.text
