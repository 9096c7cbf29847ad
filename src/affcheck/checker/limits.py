"""Timing-group nesting bounds, applied before a document is checked."""

from __future__ import annotations

from affcheck.models.chart import ChartDocument, TimingGroup


class ChartSafetyError(Exception):
    """Raised when a chart nests timing groups deeper than allowed.

    Distinct from diagnostics: the document is refused before any check runs.
    """


def group_depth(document: ChartDocument) -> int:
    """Deepest timing-group nesting in the document; 0 when there are no groups."""
    deepest = 0
    stack = [(item, 0) for item in document.items]
    while stack:
        item, depth = stack.pop()
        if isinstance(item.value, TimingGroup):
            depth += 1
            deepest = max(deepest, depth)
            stack.extend((child, depth) for child in item.value.items.value)
    return deepest


def check_group_depth(document: ChartDocument, limit: int) -> None:
    """Raise ``ChartSafetyError`` if timing groups nest beyond ``limit``.

    The configured bound is ``Settings.max_group_depth``.
    """
    depth = group_depth(document)
    if depth > limit:
        raise ChartSafetyError(
            f"Timing groups nest {depth} levels deep (limit is {limit})"
        )
