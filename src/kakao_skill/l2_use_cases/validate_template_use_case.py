"""Use case: validate a skill response body and re-emit it canonically."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kakao_skill.l1_entities.config import DecodePolicy
from kakao_skill.l1_entities.errors import SchemaIssue, SchemaViolationError
from kakao_skill.l1_entities.template import Template

log = logging.getLogger('kskill.validate')


@dataclass
class ValidationReport:
    """Outcome of validating one response body."""

    template: Template | None = None
    issues: list[SchemaIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.template is not None

    @property
    def output_kinds(self) -> list[str]:
        if self.template is None:
            return []
        return [output.tag for output in self.template.outputs]


class ValidateTemplateUseCase:
    """Decodes a response body under a decode policy, collecting issues instead of raising."""

    def __init__(self, policy: DecodePolicy | None = None) -> None:
        self._policy = policy or DecodePolicy()

    def execute(self, body: str | bytes) -> ValidationReport:
        try:
            template = Template.from_json(body, policy=self._policy)
        except SchemaViolationError as exc:
            log.info('response rejected with %d issue(s)', len(exc.issues))
            for issue in exc.issues:
                log.debug('  %s', issue)
            return ValidationReport(issues=exc.issues)
        report = ValidationReport(template=template)
        log.info('response accepted: outputs=%s quick_replies=%d', report.output_kinds, len(template.quick_replies))
        return report
