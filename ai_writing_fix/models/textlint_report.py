from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Position(BaseModel):
    line: int
    column: int


class Location(BaseModel):
    start: Position
    end: Position


class TextlintFix(BaseModel):
    range: tuple[int, int]
    text: str


class TextlintMessage(BaseModel):
    """Single message from textlint's JSON formatter.

    ``line`` and ``column`` are 1-based; ``column`` counts UTF-16 code units.
    """

    model_config = ConfigDict(populate_by_name=True)

    rule_id: str = Field(alias="ruleId")
    message: str
    line: int
    column: int
    loc: Location
    fix: TextlintFix | None = None

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_loc(cls, data: Any) -> Any:
        # textlint < 12.2 reports only the start position
        if isinstance(data, dict) and data.get("loc") is None:
            start = {"line": data.get("line"), "column": data.get("column")}
            data = {**data, "loc": {"start": start, "end": start}}
        return data


class TextlintResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath")
    messages: list[TextlintMessage] = Field(default_factory=list)


class TextlintFixResult(TextlintResult):
    output: str = ""
    applying_messages: list[TextlintMessage] = Field(
        default_factory=list, alias="applyingMessages"
    )
    remaining_messages: list[TextlintMessage] = Field(
        default_factory=list, alias="remainingMessages"
    )
