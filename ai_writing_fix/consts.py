from typing import Any, Final

LOCAL_CONFIG_NAMES: Final[tuple[str, ...]] = (
    ".textlintrc",
    ".textlintrc.json",
    ".textlintrc.yml",
    ".textlintrc.yaml",
)

YAML_CONFIG_SUFFIXES: Final[tuple[str, ...]] = (".yml", ".yaml")

DEFAULT_TEXTLINT_CONFIG: Final[dict[str, Any]] = {
    "rules": {
        "@textlint-ja/preset-ai-writing": True,
    },
}

TEMP_CONFIG_PREFIX: Final[str] = "textlintrc-"

TEXTLINT_COMMAND_ENV: Final[str] = "AI_FIX_TEXTLINT"
DEFAULT_TEXTLINT_COMMAND: Final[str] = "npx textlint"

DEBUG_ENV: Final[str] = "DEBUG"
