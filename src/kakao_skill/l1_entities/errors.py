"""Domain error types."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError


@dataclass(frozen=True)
class SchemaIssue:
    """One decode failure: dotted wire path, message, and pydantic error type."""

    path: str
    message: str
    kind: str

    def __str__(self) -> str:
        return f'{self.path or "<root>"}: {self.message}'


class SchemaViolationError(ValueError):
    """Raised when input JSON does not match the skill response schema."""

    def __init__(self, issues: list[SchemaIssue]) -> None:
        self.issues = issues
        super().__init__('; '.join(str(issue) for issue in issues) or 'schema violation')

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> SchemaViolationError:
        issues = [
            SchemaIssue(
                path='.'.join(str(part) for part in err['loc']),
                message=err['msg'],
                kind=err['type'],
            )
            for err in exc.errors(include_url=False)
        ]
        return cls(issues)


class CarouselKindMismatchError(ValueError):
    """Raised when a card is added to a carousel declared for another card kind."""
