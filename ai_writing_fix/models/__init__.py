from .config import (
    ActiveConfig,
    ConfigSource,
    DefaultConfig,
    LocalConfig,
    RuleConfigDescriptor,
)
from .report import Issue, Report
from .textlint_report import (
    Location,
    Position,
    TextlintFix,
    TextlintFixResult,
    TextlintMessage,
    TextlintResult,
)

__all__ = [
    "ActiveConfig",
    "ConfigSource",
    "DefaultConfig",
    "Issue",
    "LocalConfig",
    "Location",
    "Position",
    "Report",
    "RuleConfigDescriptor",
    "TextlintFix",
    "TextlintFixResult",
    "TextlintMessage",
    "TextlintResult",
]
