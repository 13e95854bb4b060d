"""Tests for ValidateTemplateUseCase."""

from __future__ import annotations

import logging

from kakao_skill.l1_entities.config import DecodePolicy
from kakao_skill.l2_use_cases.reference_templates import build_reference
from kakao_skill.l2_use_cases.validate_template_use_case import ValidateTemplateUseCase, ValidationReport

BOGUS_ACTION_BODY = (
    '{"template":{"outputs":[{"basicCard":{"thumbnail":{"imageUrl":"u"},'
    '"buttons":[{"label":"x","action":"bogus"}]}}]},"version":"2.0"}'
)


class TestValidateTemplateUseCase:
    def test_accepts_valid_body(self):
        body = build_reference('multiple').to_json()
        report = ValidateTemplateUseCase().execute(body)
        assert report.ok
        assert report.issues == []
        assert report.output_kinds == ['carousel', 'simpleText']
        assert report.template.to_json() == body

    def test_accepts_bytes(self):
        body = build_reference('listcard').to_json().encode('utf-8')
        assert ValidateTemplateUseCase().execute(body).ok

    def test_collects_issues_instead_of_raising(self):
        report = ValidateTemplateUseCase().execute('{"template":{"outputs":[{"nope":{}}]},"version":"2.0"}')
        assert not report.ok
        assert report.template is None
        assert report.output_kinds == []
        assert report.issues[0].kind == 'output_shape'
        assert report.issues[0].path == 'template.outputs.0'

    def test_default_policy_is_lenient(self):
        report = ValidateTemplateUseCase().execute(BOGUS_ACTION_BODY)
        assert report.ok
        assert '"action":"message"' in report.template.to_json()

    def test_strict_policy_rejects(self):
        report = ValidateTemplateUseCase(DecodePolicy.strict()).execute(BOGUS_ACTION_BODY)
        assert not report.ok
        assert report.issues[0].kind == 'unknown_button_action'

    def test_logs_outcome(self, caplog):
        with caplog.at_level(logging.INFO, logger='kskill.validate'):
            ValidateTemplateUseCase().execute('{}')
        assert 'rejected' in caplog.text


class TestValidationReport:
    def test_empty_report_is_not_ok(self):
        assert not ValidationReport().ok
