from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class RuleConfigDescriptor(BaseModel):
    """Parsed textlint configuration (.textlintrc)."""

    model_config = ConfigDict(extra="allow")

    rules: dict[str, Any] = Field(default_factory=dict)
    filters: dict[str, Any] = Field(default_factory=dict)
    plugins: dict[str, Any] | list[str] = Field(default_factory=dict)


class LocalConfig(BaseModel):
    kind: Literal["local"] = "local"
    path: Path


class DefaultConfig(BaseModel):
    kind: Literal["default"] = "default"
    payload: dict[str, Any]


ConfigSource = Annotated[LocalConfig | DefaultConfig, Field(discriminator="kind")]


class ActiveConfig(BaseModel):
    """Config source in use for a run, with the file textlint should load."""

    source: ConfigSource
    descriptor_path: Path
    descriptor: RuleConfigDescriptor

    @property
    def is_default(self) -> bool:
        return isinstance(self.source, DefaultConfig)
