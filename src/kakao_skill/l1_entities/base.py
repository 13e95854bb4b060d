"""Base model shared by every wire entity, with field naming and presence rules."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class SkillModel(BaseModel):
    """Frozen, camelCase-on-the-wire model that never emits ``null``.

    Fields listed in ``omit_when_empty`` are also dropped when they hold an
    empty list. Every other field is always emitted.

    Python field names are accepted when constructing models in code. Decoding
    entry points validate with ``by_name=False`` so only wire keys are known.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        extra='forbid',
        frozen=True,
    )

    omit_when_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode='wrap')
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        empty_keys = set(self.omit_when_empty)
        empty_keys.update(fields[name].alias or name for name in self.omit_when_empty)
        return {
            key: value
            for key, value in data.items()
            if value is not None and not (value == [] and key in empty_keys)
        }
