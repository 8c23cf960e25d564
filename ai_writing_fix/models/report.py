from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Issue(BaseModel):
    """Single finding reported for the target file.

    Attributes:
        line: Line of the start of the finding (1-based).
        column: Column of the start of the finding (1-based).
        rule: textlint rule ID (e.g., "@textlint-ja/ai-writing/no-ai-hype-expressions").
        message: Human-readable message from the rule.
        before: Excerpt of the offending text.
        after: Suggested replacement, or None when the rule offers no fix.
    """

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    rule: str
    message: str
    before: str
    after: str | None


class Report(BaseModel):
    file: Path
    issues: list[Issue]

    @property
    def has_issues(self) -> bool:
        return len(self.issues) > 0
