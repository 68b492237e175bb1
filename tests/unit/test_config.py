"""
Тесты для конфигурации и настройки логирования

Проверяет:
1. AppConfig.load: base.yml по умолчанию, пользовательский YAML, отсутствие файла
2. LatencyConfig → LatencyPolicy
3. configure_logging: файловый sink и уровень
"""

import re

import pytest
from loguru import logger
from pydantic import ValidationError

from src.config import AppConfig, LatencyConfig, LogConfig
from src.observability.latency import LATENCY_PENALTY_SCALE, LATENCY_THRESHOLD_SEC, LatencyPolicy
from src.utils.logger import configure_logging


class TestAppConfig:
    """Тесты AppConfig."""

    def test_load_default(self):
        config = AppConfig.load()

        assert config.latency.threshold_seconds == LATENCY_THRESHOLD_SEC
        assert config.latency.penalty_scale == LATENCY_PENALTY_SCALE
        assert config.log.level == "INFO"

    def test_load_custom(self, tmp_path):
        path = tmp_path / "custom.yml"
        path.write_text(
            "latency:\n  threshold_seconds: 0.05\n  penalty_scale: 10.0\nlog:\n  level: DEBUG\n",
            encoding="utf-8",
        )

        config = AppConfig.load(str(path))

        assert config.latency.threshold_seconds == 0.05
        assert config.latency.penalty_scale == 10.0
        assert config.log.level == "DEBUG"

    def test_load_partial_uses_defaults(self, tmp_path):
        path = tmp_path / "partial.yml"
        path.write_text("log:\n  level: WARNING\n", encoding="utf-8")

        config = AppConfig.load(str(path))

        assert config.latency == LatencyConfig()

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        assert AppConfig.load(str(path)) == AppConfig()

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load(str(tmp_path / "missing.yml"))


class TestLatencyConfig:
    """Тесты LatencyConfig."""

    def test_to_policy_default(self):
        assert LatencyConfig().to_policy() == LatencyPolicy()

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            LatencyConfig(threshold_seconds=-0.01)

    @pytest.mark.parametrize("field", ["threshold_seconds", "penalty_scale"])
    def test_nan_rejected(self, field):
        with pytest.raises(ValidationError):
            LatencyConfig(**{field: float("nan")})

    def test_zero_values_match_policy_contract(self):
        """Config и LatencyPolicy принимают одинаковый диапазон (≥ 0)."""
        config = LatencyConfig(threshold_seconds=0.0, penalty_scale=0.0)

        assert config.to_policy() == LatencyPolicy(threshold_seconds=0.0, penalty_scale=0.0)


class TestConfigureLogging:
    """Тесты configure_logging."""

    def test_file_sink_created(self, tmp_path):
        log_dir = tmp_path / "logs"

        configure_logging(LogConfig(dir=str(log_dir), level="DEBUG"), force=True)
        logger.info("objective logging test")
        logger.remove()

        files = list(log_dir.glob("*.log"))
        assert len(files) == 1
        assert "objective logging test" in files[0].read_text(encoding="utf-8")

    def test_line_format(self, tmp_path):
        """Формат строки: время | уровень | сообщение."""
        log_dir = tmp_path / "logs"

        configure_logging(LogConfig(dir=str(log_dir), level="INFO"), force=True)
        logger.info("format check")
        logger.remove()

        line = next(log_dir.glob("*.log")).read_text(encoding="utf-8").strip().splitlines()[-1]
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \| INFO \| format check", line)

    def test_level_filters_messages(self, tmp_path):
        log_dir = tmp_path / "logs"

        configure_logging(LogConfig(dir=str(log_dir), level="WARNING"), force=True)
        logger.info("hidden message")
        logger.warning("visible message")
        logger.remove()

        content = next(log_dir.glob("*.log")).read_text(encoding="utf-8")
        assert "visible message" in content
        assert "hidden message" not in content
