from .app_config import AppConfig
from .latency_config import LatencyConfig
from .log_config import LogConfig

__all__ = [
    "AppConfig",
    "LatencyConfig",
    "LogConfig",
]
