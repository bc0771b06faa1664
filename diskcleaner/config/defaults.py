from __future__ import annotations

from diskcleaner.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
