"""Button variant codec: four shapes keyed by the wire ``action`` string.

The ``action`` value is fixed by the variant class; decoding reads it back
to pick the class. Unknown actions and missing phone numbers follow the
active ``DecodePolicy`` (lenient by default, matching the platform's
historical behaviour).
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal, Self, Union

from pydantic import (
    BeforeValidator,
    Discriminator,
    Tag,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    model_validator,
)
from pydantic_core import PydanticCustomError

from kakao_skill.l1_entities.base import SkillModel
from kakao_skill.l1_entities.config import DecodePolicy, policy_from_context
from kakao_skill.l1_entities.errors import SchemaViolationError

log = logging.getLogger('kskill.codec')

PHONE_NUMBER_SENTINEL = '0'
UNKNOWN_ACTION_TAG = 'unknownAction'


class _ButtonBase(SkillModel):
    label: str

    def with_label(self, label: str) -> Self:
        return self.model_copy(update={'label': label})

    def with_message(self, text: str) -> Self:
        """Set the utterance sent when tapped (the platform falls back to the label)."""
        return self.model_copy(update={'message_text': text})


class CallButton(_ButtonBase):
    action: Literal['phone'] = 'phone'
    phone_number: str = PHONE_NUMBER_SENTINEL
    message_text: str | None = None

    def with_number(self, number: str) -> CallButton:
        return self.model_copy(update={'phone_number': number})

    @model_validator(mode='before')
    @classmethod
    def _default_phone_number(cls, data: Any, info: ValidationInfo) -> Any:
        policy = policy_from_context(info.context)
        if policy is None or not isinstance(data, dict):
            return data
        if 'phoneNumber' in data:
            return data
        if policy.missing_phone_number == 'reject':
            raise PydanticCustomError('missing_phone_number', "call button is missing 'phoneNumber'")
        log.warning('call button %r has no phoneNumber, using %r', data.get('label'), PHONE_NUMBER_SENTINEL)
        return data


class LinkButton(_ButtonBase):
    action: Literal['webLink'] = 'webLink'
    web_link_url: str
    message_text: str | None = None

    def with_url(self, url: str) -> LinkButton:
        return self.model_copy(update={'web_link_url': url})


class ShareButton(_ButtonBase):
    action: Literal['share'] = 'share'
    message_text: str | None = None


class TextButton(_ButtonBase):
    action: Literal['message'] = 'message'
    message_text: str | None = None


BUTTON_TYPES = (CallButton, LinkButton, ShareButton, TextButton)
_ACTION_TAGS = frozenset({'phone', 'webLink', 'share', 'message'})


def _button_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        if 'action' not in value:
            return None
        action = value['action']
    elif isinstance(value, BUTTON_TYPES):
        action = value.action
    else:
        return None
    if isinstance(action, str) and action in _ACTION_TAGS:
        return action
    return UNKNOWN_ACTION_TAG


def _fallback_to_text(value: Any, info: ValidationInfo) -> Any:
    if not isinstance(value, dict):
        return value
    action = value.get('action')
    policy = policy_from_context(info.context)
    if policy is not None and policy.unknown_button_action == 'reject':
        raise PydanticCustomError(
            'unknown_button_action',
            "unknown button action '{action}'",
            {'action': action},
        )
    if policy is not None:
        log.warning('button %r has unknown action %r, decoding as a text button', value.get('label'), action)
    return {**value, 'action': 'message'}


def _require_object(value: Any) -> Any:
    if isinstance(value, (dict, *BUTTON_TYPES)):
        return value
    raise PydanticCustomError('button_type', 'button must be an object')


Button = Annotated[
    Union[
        Annotated[CallButton, Tag('phone')],
        Annotated[LinkButton, Tag('webLink')],
        Annotated[ShareButton, Tag('share')],
        Annotated[TextButton, Tag('message')],
        Annotated[TextButton, BeforeValidator(_fallback_to_text), Tag(UNKNOWN_ACTION_TAG)],
    ],
    Discriminator(
        _button_tag,
        custom_error_type='missing_action',
        custom_error_message="button has no 'action'",
    ),
    BeforeValidator(_require_object),
]

_BUTTON_ADAPTER: TypeAdapter[Button] = TypeAdapter(Button)


def encode_button(button: Button) -> dict[str, Any]:
    return _BUTTON_ADAPTER.dump_python(button, by_alias=True, mode='json')


def decode_button(data: Any, policy: DecodePolicy | None = None) -> Button:
    """Decode one wire button object, raising SchemaViolationError on mismatch."""
    policy = policy or DecodePolicy()
    try:
        return _BUTTON_ADAPTER.validate_python(data, context=policy.as_context(), by_alias=True, by_name=False)
    except ValidationError as exc:
        raise SchemaViolationError.from_validation_error(exc) from exc
