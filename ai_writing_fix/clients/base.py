from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel

from ai_writing_fix.models.textlint_report import TextlintFixResult, TextlintResult


class ILintEngine(ABC, BaseModel):
    config_path: Path

    @abstractmethod
    def lint_files(self, files: list[Path]) -> list[TextlintResult]:
        pass

    @abstractmethod
    def fix_files(self, files: list[Path]) -> list[TextlintFixResult]:
        pass
