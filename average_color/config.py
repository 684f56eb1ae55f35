from __future__ import annotations

from copy import deepcopy
import logging
import os
from typing import Any, Literal

from pydantic import BaseModel, Field

from average_color.models.color_model import Side
from average_color.services.average_color_service import RESAMPLE_DIMENSION

PACKAGE_LOGGER = "average_color"


class AppConfig(BaseModel):
    images_dir: str | None = Field(
        default_factory=lambda: os.getenv("AVERAGE_COLOR_IMAGES_DIR")
    )
    side: Side = Side.BOTTOM
    darken_percentage: float = Field(default=40.0, ge=-100.0, le=100.0)
    resample_dimension: int = Field(default=RESAMPLE_DIMENSION, ge=1, le=512)
    gradient_height: int = Field(default=100, ge=0, le=2000)
    row_width: int = Field(default=640, ge=64, le=4096)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default_factory=lambda: os.getenv("AVERAGE_COLOR_LOG_LEVEL", "INFO").upper()
    )


def deep_merge(base: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_app_config(current: AppConfig, patch: dict[str, Any]) -> AppConfig:
    merged_dict = deep_merge(current.model_dump(), patch)
    return AppConfig.model_validate(merged_dict)


def setup_logging(log_level: str | int = logging.INFO) -> logging.Logger:
    """Настраивает логгер пакета: один StreamHandler, повторный вызов только меняет уровень."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
