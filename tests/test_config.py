import logging

import pytest
from pydantic import ValidationError

from average_color.config import PACKAGE_LOGGER, AppConfig, merge_app_config, setup_logging
from average_color.models.color_model import Side


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("AVERAGE_COLOR_IMAGES_DIR", raising=False)
    monkeypatch.delenv("AVERAGE_COLOR_LOG_LEVEL", raising=False)

    cfg = AppConfig()

    assert cfg.images_dir is None
    assert cfg.side is Side.BOTTOM
    assert cfg.darken_percentage == 40.0
    assert cfg.resample_dimension == 40
    assert cfg.gradient_height == 100
    assert cfg.log_level == "INFO"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("AVERAGE_COLOR_IMAGES_DIR", "/tmp/pictures")
    monkeypatch.setenv("AVERAGE_COLOR_LOG_LEVEL", "debug")

    cfg = AppConfig()

    assert cfg.images_dir == "/tmp/pictures"
    assert cfg.log_level == "DEBUG"


def test_merge_updates_side_and_percentage() -> None:
    cfg = AppConfig()

    updated = merge_app_config(cfg, {"side": "top", "darken_percentage": 25})

    assert updated.side is Side.TOP
    assert updated.darken_percentage == 25.0
    assert updated.row_width == cfg.row_width
    assert cfg.side is Side.BOTTOM


def test_merge_rejects_invalid_values() -> None:
    with pytest.raises(ValidationError):
        merge_app_config(AppConfig(), {"darken_percentage": 500})
    with pytest.raises(ValidationError):
        merge_app_config(AppConfig(), {"side": "middle"})


def test_setup_logging_is_idempotent() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    try:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        first = setup_logging("INFO")
        second = setup_logging("DEBUG")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        handlers, level, propagate = saved
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = propagate
