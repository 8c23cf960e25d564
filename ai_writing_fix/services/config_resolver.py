from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import json5
import yaml
from pydantic import ValidationError

from ai_writing_fix.consts import (
    DEFAULT_TEXTLINT_CONFIG,
    LOCAL_CONFIG_NAMES,
    TEMP_CONFIG_PREFIX,
    YAML_CONFIG_SUFFIXES,
)
from ai_writing_fix.exceptions import ConfigError
from ai_writing_fix.models.config import (
    ActiveConfig,
    DefaultConfig,
    LocalConfig,
    RuleConfigDescriptor,
)

logger = logging.getLogger(__name__)


def discover_config(cwd: Path) -> LocalConfig | DefaultConfig:
    """Pick the config source for a run.

    Args:
        cwd: Directory searched for a local textlint config.

    Returns:
        LocalConfig for the first existing file in LOCAL_CONFIG_NAMES,
        otherwise DefaultConfig with the embedded rule set.
    """
    for name in LOCAL_CONFIG_NAMES:
        candidate = cwd / name
        if candidate.is_file():
            logger.debug("Using local textlint config %s", candidate)
            return LocalConfig(path=candidate.resolve())

    logger.debug("No local textlint config in %s, using defaults", cwd)
    return DefaultConfig(payload=DEFAULT_TEXTLINT_CONFIG)


def _parse_config_text(path: Path, text: str) -> Any:
    if path.suffix in YAML_CONFIG_SUFFIXES:
        return yaml.safe_load(text)
    if not text.strip():
        return None
    try:
        return json5.loads(text)
    except ValueError:
        if path.suffix == ".json":
            raise
        # an extensionless .textlintrc may also be YAML
        return yaml.safe_load(text)


def load_descriptor(path: Path) -> RuleConfigDescriptor:
    """Parse a textlint config file.

    JSON configs are read as JSON5, like textlint does, so comments, tabs and
    trailing commas are accepted. `.yml`/`.yaml` files and an extensionless
    `.textlintrc` that is not JSON5 are read as YAML.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    try:
        raw = _parse_config_text(path, path.read_text(encoding="utf-8"))
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load textlint config {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"textlint config must be a mapping: {path}")

    try:
        return RuleConfigDescriptor.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid textlint config {path}: {e}") from e


def _write_temp_config(config: DefaultConfig) -> Path:
    fd, name = tempfile.mkstemp(
        prefix=f"{TEMP_CONFIG_PREFIX}{int(time.time() * 1000)}-",
        suffix=".json",
    )
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        json.dump(config.payload, f, ensure_ascii=False, indent=2)
    return Path(name)


@contextmanager
def activate_config(
    source: LocalConfig | DefaultConfig,
) -> Generator[ActiveConfig, None, None]:
    """Make a config source loadable by textlint for the duration of a run.

    A DefaultConfig is written to a temporary file which is removed on exit,
    whether the block finishes normally or raises.
    """
    if isinstance(source, LocalConfig):
        yield ActiveConfig(
            source=source,
            descriptor_path=source.path,
            descriptor=load_descriptor(source.path),
        )
        return

    temp_path: Path | None = None
    try:
        temp_path = _write_temp_config(source)
        logger.debug("Wrote default textlint config to %s", temp_path)
        yield ActiveConfig(
            source=source,
            descriptor_path=temp_path,
            descriptor=load_descriptor(temp_path),
        )
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink()
            except OSError:
                logger.debug("Could not remove %s", temp_path, exc_info=True)
