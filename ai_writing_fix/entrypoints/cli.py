from __future__ import annotations

import logging
import os
import sys
import traceback
from pathlib import Path
from typing import Annotated, Final

import typer

from ai_writing_fix.clients.base import ILintEngine
from ai_writing_fix.clients.textlint import TextlintClient
from ai_writing_fix.consts import DEBUG_ENV
from ai_writing_fix.exceptions import TargetNotFoundError
from ai_writing_fix.loaders.json_report import JsonReportLoader
from ai_writing_fix.loaders.text_report import TextReportLoader
from ai_writing_fix.models.config import ActiveConfig
from ai_writing_fix.services.config_resolver import activate_config, discover_config
from ai_writing_fix.services.report_service import ReportService

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ai-fix",
    add_completion=False,
    no_args_is_help=False,
    help="Detect AI-like expressions in Japanese text.",
)

USAGE: Final[str] = """\
AI-Writing Fix CLI - Detect AI-like expressions in Japanese text

Usage: ai-fix <file> [--json]

Options:
  --json     Output structured JSON report for AI tools
  --demo     Show quick demo and usage examples

Examples:
  ai-fix document.md              # Show issues found
  ai-fix document.md --json       # JSON output for AI tools

Works great with AI coding assistants! 🤖"""

DEMO: Final[str] = """\
🚀 AI-Writing Fix CLI Demo

This tool detects AI-like expressions in Japanese text:
- 🎯 Hyperbolic expressions (革命的、世界初)
- 🚀 Mechanical emoji lists
- ⚡ Formulaic emphasis patterns

Try with your own file:
  ai-fix your-file.md --json

For AI assistant integration:
  ai-fix draft.md --json > report.json"""


def _debug_enabled() -> bool:
    return bool(os.getenv(DEBUG_ENV))


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if _debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_engine(config: ActiveConfig) -> ILintEngine:
    return TextlintClient(config_path=config.descriptor_path)


def _resolve_target(file: str) -> Path:
    file_path: Path = Path(file).resolve()
    if not file_path.exists() or not os.access(file_path, os.R_OK):
        raise TargetNotFoundError(f"File not found: {file_path}")
    return file_path


def generate_report(file: str, *, json_output: bool) -> int:
    """Lint ``file`` and print the report.

    Args:
        file: Path of the document to check.
        json_output: Print a JSON report instead of the text report.

    Returns:
        Process exit code: 1 when issues were found or the run failed, else 0.
    """
    try:
        file_path = _resolve_target(file)
        with activate_config(discover_config(Path.cwd())) as config:
            service = ReportService(target=file_path, engine=_build_engine(config))
            report = service.run()
            logger.debug("%d issue(s) in %s", len(report.issues), file_path)

            if json_output:
                JsonReportLoader(sys.stdout).load(report)
            else:
                TextReportLoader(
                    sys.stdout, using_default_config=config.is_default
                ).load(report)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        if _debug_enabled():
            typer.echo(traceback.format_exc(), err=True)
        return 1

    return 1 if report.has_issues else 0


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def run(
    file: Annotated[
        str | None,
        typer.Argument(help="Document to check.", show_default=False),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output structured JSON report for AI tools."),
    ] = False,
    demo: Annotated[
        bool,
        typer.Option("--demo", help="Show quick demo and usage examples."),
    ] = False,
) -> None:
    """Check a Japanese document for AI-like expressions."""
    _configure_logging()

    if demo:
        typer.echo(DEMO)
        raise typer.Exit(code=0)

    if file is None:
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=1)

    raise typer.Exit(code=generate_report(file, json_output=json_output))


def main() -> None:
    """Entry point for executing the Typer application."""
    app()


if __name__ == "__main__":
    main()
