from __future__ import annotations

from typing import TextIO

from ai_writing_fix.models.report import Report


class TextReportLoader:
    """Write a human-readable report."""

    def __init__(self, stream: TextIO, using_default_config: bool = False) -> None:
        self.stream: TextIO = stream
        self.using_default_config: bool = using_default_config

    def _line(self, text: str = "") -> None:
        self.stream.write(f"{text}\n")

    def load(self, report: Report) -> None:
        if self.using_default_config:
            self._line(
                "ℹ️  Using default AI-writing detection rules (no .textlintrc found)"
            )
            self._line()

        if not report.has_issues:
            self._line(f"✅ No AI-like issues found in: {report.file}")
            if self.using_default_config:
                self._line(
                    "   (Using default detection rules - create .textlintrc for more options)"
                )
            return

        self._line(f"Found {len(report.issues)} issue(s) in {report.file}:")
        self._line()
        for i, issue in enumerate(report.issues, start=1):
            self._line(f"{i}. Line {issue.line}: {issue.message}")
            self._line(f"   Rule: {issue.rule}")
            self._line()
        self._line(
            "Note: These rules detect AI-like patterns but do not provide automatic fixes."
        )
        self._line(
            "Use --json flag for structured JSON output compatible with AI tools."
        )
        if self.using_default_config:
            self._line()
            self._line(
                "Tip: Create a .textlintrc file to customize rules or add more checks."
            )
