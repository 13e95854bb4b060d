"""Tests for domain error types."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from kakao_skill.l1_entities.errors import SchemaIssue, SchemaViolationError


class _Inner(BaseModel):
    value: int


class _Outer(BaseModel):
    rows: list[_Inner]


class TestSchemaIssue:
    def test_str_with_path(self):
        assert str(SchemaIssue('a.0.b', 'Field required', 'missing')) == 'a.0.b: Field required'

    def test_str_at_root(self):
        assert str(SchemaIssue('', 'Invalid JSON', 'json_invalid')) == '<root>: Invalid JSON'


class TestSchemaViolationError:
    def test_from_validation_error_builds_dotted_paths(self):
        with pytest.raises(ValidationError) as exc_info:
            _Outer.model_validate({'rows': [{'value': 1}, {}]})
        err = SchemaViolationError.from_validation_error(exc_info.value)
        assert err.issues == [SchemaIssue('rows.1.value', 'Field required', 'missing')]
        assert 'rows.1.value' in str(err)

    def test_is_value_error(self):
        assert isinstance(SchemaViolationError([]), ValueError)
        assert str(SchemaViolationError([])) == 'schema violation'
