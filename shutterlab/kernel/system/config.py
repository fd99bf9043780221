import logging
import os
from dataclasses import dataclass
from shutterlab.domain.models import SettingState


@dataclass
class AppConfig:
    log_level: int
    page_title: str
    page_layout: str


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# Global application constants
APP_CONFIG = AppConfig(
    log_level=_parse_log_level(os.getenv("SHUTTERLAB_LOG_LEVEL", "INFO")),
    page_title="Exposure Triangle Simulator",
    page_layout="centered",
)

# Seed for every new session: 1/60, f5.6, ISO 400, Shade
DEFAULT_SETTING_STATE = SettingState(
    shutter_speed_index=3,
    aperture_index=3,
    iso_index=2,
    lighting_index=2,
)
