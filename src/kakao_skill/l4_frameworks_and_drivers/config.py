"""CLI configuration defaults (L4, not domain)."""

from __future__ import annotations

import copy

from kakao_skill.l1_entities.config import AppConfig
from kakao_skill.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'decode': {
        'unknown_button_action': 'text',
        'missing_phone_number': 'sentinel',
    },
    'output': {
        'indent': None,
    },
    'logging': {
        'level': 'INFO',
        'file': None,
    },
}

STRICT_DECODE_OVERRIDES: dict = {
    'decode': {
        'unknown_button_action': 'reject',
        'missing_phone_number': 'reject',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
