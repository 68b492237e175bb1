import os

import yaml
from pydantic import BaseModel, Field

from .latency_config import LatencyConfig
from .log_config import LogConfig


def default_config_path() -> str:
    """src/config/base.yml рядом с этим модулем (не зависит от cwd)."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    latency: LatencyConfig = Field(default_factory=LatencyConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Загрузка YAML конфига.

        - По умолчанию src/config/base.yml
        - Отсутствующие секции берутся из defaults
        """
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        return cls(**raw)
