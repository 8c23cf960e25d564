from __future__ import annotations

import logging
from typing import TextIO

from ai_writing_fix.models.report import Report

logger = logging.getLogger(__name__)


class JsonReportLoader:
    """Write a report as a single JSON document.

    Schema:
    {
      "file": "/abs/path/draft.md",
      "issues": [
        {"line": 3, "column": 1, "rule": "...", "message": "...",
         "before": "...", "after": null}
      ]
    }
    """

    def __init__(self, stream: TextIO, indent: int = 2) -> None:
        """Create a JSON report loader.

        Args:
            stream: Text stream to write the document to.
            indent: Indentation level for pretty-printing JSON.
        """
        self.stream: TextIO = stream
        self.indent: int = indent

    def load(self, report: Report) -> None:
        try:
            self.stream.write(report.model_dump_json(indent=self.indent))
            self.stream.write("\n")
        except OSError:
            logger.exception("Failed to write JSON report for %s", report.file)
            raise
