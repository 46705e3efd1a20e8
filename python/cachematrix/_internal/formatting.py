from __future__ import annotations

from typing import Any

import numpy as np


_EDGE_ITEMS: int = 4


def configure(*, edge_items: int = 4) -> None:
    global _EDGE_ITEMS
    edge_items = int(edge_items)
    if edge_items < 1:
        raise ValueError("edge_items must be a positive integer")
    _EDGE_ITEMS = edge_items


def edge_items() -> int:
    return _EDGE_ITEMS


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_row(
    row: Any,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(row[col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(row[col]) for col in col_tail)
    return " ".join(entries)


def matrix_lines(matrix: Any) -> list[str]:
    """Render a 2D matrix-like as bracketed rows, eliding the middle of large axes."""
    try:
        array = np.asarray(matrix)
    except ValueError:
        return [repr(matrix)]
    if array.ndim != 2:
        return [repr(matrix)]

    rows, cols = array.shape
    if rows == 0 or cols == 0:
        return ["[]"]

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = ["["]
    for row_index in row_head:
        lines.append(f" [{_format_row(array[row_index], col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_format_row(array[row_index], col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return lines


def cached_matrix_str(container: Any) -> str:
    info = [f"shape={container.shape}", f"epoch={container.epoch}"]
    info.append("inverse=cached" if container.has_inverse else "inverse=empty")
    header = f"{container.__class__.__name__}({', '.join(info)})"
    return "\n".join([header, *matrix_lines(container.current_matrix())])
