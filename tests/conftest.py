"""Shared test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from kakao_skill.l1_entities.config import AppConfig
from kakao_skill.l4_frameworks_and_drivers.config import build_app_config


@pytest.fixture(autouse=True)
def _isolate_default_config(tmp_path: Path, monkeypatch):
    """Never read the developer's real user config during tests."""
    import kakao_skill.l3_interface_adapters.gateways.yaml_config_loader as mod

    missing = tmp_path / 'no-user-config'
    monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [missing / 'config.yaml', missing / 'config.yml'])


@pytest.fixture(autouse=True)
def _restore_kskill_logger():
    """Handlers added by setup_*_logging must not leak between tests."""
    logger = logging.getLogger('kskill')
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
decode:
  unknown_button_action: "reject"
  missing_phone_number: "sentinel"
output:
  indent: 2
logging:
  level: "DEBUG"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
