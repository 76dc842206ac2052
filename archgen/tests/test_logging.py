import logging

from archgen.common.logging import get_logger, setup_logging
from archgen.config import Settings


def test_get_logger_is_namespaced():
    assert get_logger("design_engine.layout").name == "archgen.design_engine.layout"


def test_setup_logging_is_idempotent():
    setup_logging("debug")
    setup_logging("debug")
    root = logging.getLogger("archgen")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    setup_logging("info")
    assert root.level == logging.INFO


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("FLOOR_PLAN_CONFIDENCE", "0.5")
    env_settings = Settings()
    assert env_settings.LOG_LEVEL == "WARNING"
    assert env_settings.FLOOR_PLAN_CONFIDENCE == 0.5
