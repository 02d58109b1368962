import json
from enum import Enum
from typing import List, Optional, Sequence

from wcwidth import wcwidth

from betterls.utils.entry import FSEntry
from betterls.utils.style import TableStyle, colorize

HEADERS = ['Name', 'Type', 'Size', 'Modified']
JSON_ERROR = 'Cannot parse JSON'


class OutputMode(Enum):
    TABLE = 'table'
    JSON = 'json'


def render(
    entries: Sequence[FSEntry],
    mode: OutputMode = OutputMode.TABLE,
    style: Optional[TableStyle] = None
) -> str:
    """Render entries in the given output mode.

    Parameters
    ----------
    entries : Sequence[FSEntry]
        Directory entries.
    mode : OutputMode, default=OutputMode.TABLE
        Output mode.
    style : TableStyle, optional
        Table color scheme, ignored in JSON mode.

    Returns
    -------
    str
        Rendered text without trailing newline.
    """
    if mode is OutputMode.JSON:
        return render_json(entries)
    elif mode is OutputMode.TABLE:
        return render_table(entries, style)
    else:
        raise ValueError(f"invalid output mode: '{mode}'")


def render_json(entries: Sequence[FSEntry]) -> str:
    try:
        return json.dumps([entry.to_dict() for entry in entries], separators=(',', ':'), ensure_ascii=False)
    except (TypeError, ValueError):
        return JSON_ERROR


def render_table(entries: Sequence[FSEntry], style: Optional[TableStyle] = None) -> str:
    """Render entries as a table with rounded borders."""
    if style is None:
        style = TableStyle()
    rows = [[entry.name, str(entry.type), str(entry.size), entry.modified] for entry in entries]
    widths = [display_width(header) for header in HEADERS]
    for row in rows:
        widths = [max(width, display_width(cell)) for width, cell in zip(widths, row)]
    column_colors = [style.name, None, style.size, style.modified]

    lines = [_border('╭', '┬', '╮', widths)]
    lines.append(_row(HEADERS, widths, [style.header] * len(HEADERS), style.color))
    lines.append(_border('├', '┼', '┤', widths))
    for row in rows:
        lines.append(_row(row, widths, column_colors, style.color))
    lines.append(_border('╰', '┴', '╯', widths))
    return '\n'.join(lines)


def _border(left: str, middle: str, right: str, widths: List[int]) -> str:
    return left + middle.join('─' * (width + 2) for width in widths) + right


def _row(cells: List[str], widths: List[int], colors: List[Optional[str]], enabled: bool) -> str:
    parts = []
    for cell, width, color in zip(cells, widths, colors):
        text = cell + ' ' * (width - display_width(cell))
        if color is not None:
            text = colorize(text, color, enabled)
        parts.append(f' {text} ')
    return '│' + '│'.join(parts) + '│'


def display_width(text: str) -> int:
    """Number of terminal columns text occupies; wide characters count as two."""
    # non-printable characters report -1
    return sum(max(wcwidth(char), 0) for char in text)
