"""Template envelope ``{"template": {...}, "version": "2.0"}``."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Literal

from pydantic import ConfigDict, Field, ValidationError

from kakao_skill.l1_entities.base import SkillModel
from kakao_skill.l1_entities.basics import QuickReply
from kakao_skill.l1_entities.config import DecodePolicy
from kakao_skill.l1_entities.errors import SchemaViolationError
from kakao_skill.l1_entities.outputs import OUTPUT_CONTENT_TYPES, OUTPUT_TYPES, Output

log = logging.getLogger('kskill.codec')

TEMPLATE_VERSION = '2.0'


class TemplateBody(SkillModel):
    model_config = ConfigDict(frozen=False)
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({'quick_replies'})

    outputs: list[Output]
    quick_replies: list[QuickReply] = Field(default_factory=list)


class Template(SkillModel):
    """Root of a skill response.

    Outputs and quick replies keep their insertion order on the wire.
    ``quickReplies`` is omitted when none were added.
    """

    model_config = ConfigDict(frozen=False)

    template: TemplateBody
    version: Literal['2.0']

    def __init__(self, **data: Any) -> None:
        # Both keys are required on the wire; a bare Template() starts empty.
        if not data:
            data = {'template': TemplateBody(outputs=[]), 'version': TEMPLATE_VERSION}
        super().__init__(**data)

    @property
    def outputs(self) -> list[Output]:
        return self.template.outputs

    @property
    def quick_replies(self) -> list[QuickReply]:
        return self.template.quick_replies

    def add_output(self, output: Any) -> None:
        """Append an output; bare card/text/carousel content is promoted with ``build()``."""
        if isinstance(output, OUTPUT_CONTENT_TYPES):
            output = output.build()
        if not isinstance(output, OUTPUT_TYPES):
            raise TypeError(f'not a skill output: {type(output).__name__}')
        self.template.outputs.append(output)

    def add_quick_reply(self, quick_reply: QuickReply) -> None:
        if not isinstance(quick_reply, QuickReply):
            raise TypeError(f'not a quick reply: {type(quick_reply).__name__}')
        self.template.quick_replies.append(quick_reply)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode='json')

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes, policy: DecodePolicy | None = None) -> Template:
        """Decode a response body, raising SchemaViolationError on any mismatch."""
        policy = policy or DecodePolicy()
        try:
            result = cls.model_validate_json(text, context=policy.as_context(), by_alias=True, by_name=False)
        except ValidationError as exc:
            raise SchemaViolationError.from_validation_error(exc) from exc
        log.debug('decoded template: %d outputs, %d quick replies', len(result.outputs), len(result.quick_replies))
        return result

    @classmethod
    def from_dict(cls, data: Any, policy: DecodePolicy | None = None) -> Template:
        policy = policy or DecodePolicy()
        try:
            result = cls.model_validate(data, context=policy.as_context(), by_alias=True, by_name=False)
        except ValidationError as exc:
            raise SchemaViolationError.from_validation_error(exc) from exc
        log.debug('decoded template: %d outputs, %d quick replies', len(result.outputs), len(result.quick_replies))
        return result
