"""Configuration Pydantic models: decode policy plus CLI settings schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

DECODE_POLICY_CONTEXT_KEY = 'decode_policy'


class DecodePolicy(BaseModel):
    """Switches for the two lenient defaults kept for wire compatibility.

    ``unknown_button_action='text'`` decodes a button whose ``action`` is
    outside the closed set as a text button; ``'reject'`` fails instead.
    ``missing_phone_number='sentinel'`` fills an absent ``phoneNumber`` with
    ``"0"``; ``'reject'`` fails instead.
    """

    unknown_button_action: Literal['text', 'reject'] = 'text'
    missing_phone_number: Literal['sentinel', 'reject'] = 'sentinel'

    @classmethod
    def strict(cls) -> DecodePolicy:
        return cls(unknown_button_action='reject', missing_phone_number='reject')

    def as_context(self) -> dict[str, Any]:
        """Validation context carrying this policy into nested validators."""
        return {DECODE_POLICY_CONTEXT_KEY: self}


def policy_from_context(context: Any) -> DecodePolicy | None:
    """Return the policy of a decode call, or None for direct construction."""
    if isinstance(context, dict):
        policy = context.get(DECODE_POLICY_CONTEXT_KEY)
        if isinstance(policy, DecodePolicy):
            return policy
    return None


class OutputConfig(BaseModel):
    indent: int | None = Field(description='JSON indent; None emits compact JSON')


class LoggingConfig(BaseModel):
    level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR']
    file: str | None = None


class AppConfig(BaseModel):
    decode: DecodePolicy
    output: OutputConfig
    logging: LoggingConfig
