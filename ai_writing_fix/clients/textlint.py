from __future__ import annotations

import json
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ai_writing_fix.clients.base import ILintEngine
from ai_writing_fix.consts import DEFAULT_TEXTLINT_COMMAND, TEXTLINT_COMMAND_ENV
from ai_writing_fix.exceptions import TextlintError
from ai_writing_fix.models.textlint_report import TextlintFixResult, TextlintResult

logger = logging.getLogger(__name__)


class TextlintConfig(BaseModel):
    command: str = Field(
        default_factory=lambda: os.getenv(
            TEXTLINT_COMMAND_ENV, DEFAULT_TEXTLINT_COMMAND
        )
    )


class TextlintClient(ILintEngine):
    """Run textlint as a subprocess and parse its JSON output.

    Lint runs ``textlint --config <path> --format json <files>``. Fix runs the
    same with ``--fix --dry-run`` so the fixed output is only reported, never
    written back to disk.
    """

    settings: TextlintConfig = Field(default_factory=TextlintConfig)

    def lint_files(self, files: list[Path]) -> list[TextlintResult]:
        rows = self._run([str(f) for f in files])
        return [TextlintResult.model_validate(row) for row in rows]

    def fix_files(self, files: list[Path]) -> list[TextlintFixResult]:
        rows = self._run(["--fix", "--dry-run", *(str(f) for f in files)])
        return [TextlintFixResult.model_validate(row) for row in rows]

    def _run(self, args: list[str]) -> list[dict[str, Any]]:
        cmd: list[str] = [
            *shlex.split(self.settings.command),
            "--config",
            str(self.config_path),
            "--format",
            "json",
            *args,
        ]
        logger.debug("Running %s", shlex.join(cmd))

        # textlint exits with 1 when it reports messages, so the exit status
        # alone does not tell a failed run apart from a successful one.
        try:
            result = subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as e:
            raise TextlintError(f"textlint executable not found: {cmd[0]}") from e

        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            detail = result.stderr.strip() or result.stdout.strip() or "no output"
            raise TextlintError(
                f"textlint exited with code {result.returncode}: {detail}"
            ) from e

        if not isinstance(payload, list):
            raise TextlintError("Unexpected textlint output: expected a JSON array")
        logger.debug("textlint returned %d result(s)", len(payload))
        return payload
