from __future__ import annotations
import json
from typing import List, Sequence

from listener_inspector_mcp.core.classify import retrieve_listener_type
from listener_inspector_mcp.core.errors import RenderError
from listener_inspector_mcp.core.models import Listener

SUMMARY_HEADER = ("ADDRESS", "PORT", "TYPE")

# Same layout as a tabwriter with min width 0 and padding 5, space padded.
TABLE_PADDING = 5


def format_table(rows: Sequence[Sequence[str]], padding: int = TABLE_PADDING) -> str:
    """
    Align tab separated cells into columns.

    Every cell except the last of a row is padded to the widest cell of its
    column plus padding. The last cell is written as is, so rows carry no
    trailing blanks.
    """
    widths: List[int] = []
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            if i == len(widths):
                widths.append(0)
            widths[i] = max(widths[i], len(cell))

    lines = []
    for row in rows:
        cells = [cell.ljust(widths[i] + padding) for i, cell in enumerate(row[:-1])]
        if row:
            cells.append(row[-1])
        lines.append("".join(cells))
    return "".join(line + "\n" for line in lines)


def summary_rows(listeners: Sequence[Listener]) -> List[List[str]]:
    rows = [list(SUMMARY_HEADER)]
    for listener in listeners:
        rows.append(
            [
                listener.bound_address(),
                str(listener.bound_port()),
                retrieve_listener_type(listener),
            ]
        )
    return rows


def render_listener_summary(listeners: Sequence[Listener]) -> str:
    """
    ADDRESS PORT TYPE table, one row per listener in the order given.
    """
    return format_table(summary_rows(listeners))


def render_listener_dump(listeners: Sequence[Listener]) -> str:
    """
    Full fidelity JSON array of the listeners, 4 space indent, trailing newline.
    """
    try:
        out = json.dumps([listener.raw for listener in listeners], indent=4, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise RenderError(f"failed to marshal listeners: {e}") from e
    return out + "\n"
