from ai_writing_fix.models.report import Issue
from ai_writing_fix.models.textlint_report import Location, TextlintMessage


def _utf16_slice(text: str, start: int, end: int | None = None) -> str:
    """Slice ``text`` by UTF-16 code unit offsets.

    textlint columns count UTF-16 code units, so astral characters such as
    emoji take two columns. Offsets are clamped to the line and a reversed
    range is swapped.
    """
    units: bytes = text.encode("utf-16-le")
    length: int = len(units) // 2
    if end is None:
        end = length
    start, end = (max(0, min(offset, length)) for offset in (start, end))
    if start > end:
        start, end = end, start
    return units[start * 2 : end * 2].decode("utf-16-le", errors="replace")


def extract_excerpt(lines: list[str], loc: Location) -> str:
    """Return the text covered by ``loc``.

    Args:
        lines: File content split on newlines.
        loc: 1-based location; the end column is exclusive.

    Returns:
        The covered text, with newlines between lines when the location
        spans more than one line.
    """
    start_line: int = loc.start.line - 1
    end_line: int = loc.end.line - 1

    def line_at(index: int) -> str:
        return lines[index] if 0 <= index < len(lines) else ""

    if start_line == end_line:
        return _utf16_slice(
            line_at(start_line), loc.start.column - 1, loc.end.column - 1
        )

    parts: list[str] = [_utf16_slice(line_at(start_line), loc.start.column - 1)]
    parts.extend(line_at(i) for i in range(start_line + 1, end_line))
    parts.append(_utf16_slice(line_at(end_line), 0, loc.end.column - 1))
    return "\n".join(parts)


def build_issues(content: str, messages: list[TextlintMessage]) -> list[Issue]:
    lines: list[str] = content.split("\n")
    return [
        Issue(
            line=message.loc.start.line,
            column=message.loc.start.column,
            rule=message.rule_id,
            message=message.message,
            before=extract_excerpt(lines, message.loc),
            after=message.fix.text if message.fix is not None else None,
        )
        for message in messages
    ]
