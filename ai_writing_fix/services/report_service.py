import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ai_writing_fix.clients.base import ILintEngine
from ai_writing_fix.exceptions import EngineResultMissingError
from ai_writing_fix.models.report import Report
from ai_writing_fix.services.issue_extractor import build_issues

logger = logging.getLogger(__name__)


class ReportService(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: Path
    engine: ILintEngine

    def run(self) -> Report:
        """Lint the target file and build a report from the lint pass.

        A fix pass also runs, but its messages are not reported: textlint
        drops messages of rules without an automatic fix from fix results.
        """
        content: str = self.target.read_text(encoding="utf-8", errors="replace")

        lint_results = self.engine.lint_files([self.target])
        if not lint_results:
            raise EngineResultMissingError("No result from textlint")
        lint_result = lint_results[0]

        fix_results = self.engine.fix_files([self.target])
        if not fix_results:
            raise EngineResultMissingError("No result from textlint fix")
        logger.debug(
            "Fix pass: %d applicable, %d remaining",
            len(fix_results[0].applying_messages),
            len(fix_results[0].remaining_messages),
        )

        return Report(
            file=self.target,
            issues=build_issues(content, lint_result.messages),
        )
