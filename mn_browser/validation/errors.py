from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class ValidationError(Exception):
    """One or more issues found while vetting raw input for the Model."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]
