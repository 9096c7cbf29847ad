"""Shared test fixtures and chart builders for affcheck.

Builders return the JSON-compatible shape a parser hands over, so documents in
tests go through ``ChartDocument.model_validate`` like real parser output.
Each field gets its own column so diagnostics can be traced to the field.
"""

from __future__ import annotations

from typing import Any

import pytest

from affcheck.checker.runner import CheckRunner
from affcheck.checker.semantic import SemanticChecker
from affcheck.models.chart import ChartDocument
from affcheck.settings import Settings

ITEM_COLUMN = 1
ARCTAPS_COLUMN = 70

FIELD_COLUMNS = {
    "time": 8,
    "bpm": 14,
    "measure": 22,
    "start": 5,
    "end": 11,
    "xStart": 17,
    "xEnd": 23,
    "arcKind": 29,
    "yStart": 33,
    "yEnd": 39,
    "colorId": 45,
    "effect": 49,
    "isLine": 60,
    "duration": 30,
    "items": 14,
}


def located(value: Any, line: int = 1, column: int = 1) -> dict[str, Any]:
    return {"value": value, "location": {"line": line, "column": column}}


def _fields(line: int, **values: Any) -> dict[str, Any]:
    return {name: located(v, line, FIELD_COLUMNS[name]) for name, v in values.items()}


def timing(time: int, bpm: float, measure: int, line: int = 1) -> dict[str, Any]:
    return located(
        {"kind": "timing", **_fields(line, time=time, bpm=bpm, measure=measure)},
        line,
        ITEM_COLUMN,
    )


def tap(time: int, line: int = 1) -> dict[str, Any]:
    return located({"kind": "tap", **_fields(line, time=time)}, line, ITEM_COLUMN)


def hold(start: int, end: int, line: int = 1) -> dict[str, Any]:
    return located({"kind": "hold", **_fields(line, start=start, end=end)}, line, ITEM_COLUMN)


def arctap(time: int, line: int = 1, column: int = ARCTAPS_COLUMN) -> dict[str, Any]:
    return located({"kind": "arctap", **_fields(line, time=time)}, line, column)


def arc(
    start: int = 0,
    end: int = 1000,
    x_start: float = 0.0,
    x_end: float = 1.0,
    y_start: float = 0.0,
    y_end: float = 1.0,
    arc_kind: str = "s",
    effect: str = "none",
    is_line: bool = True,
    color_id: int = 0,
    arctaps: list[int] | None = None,
    line: int = 1,
) -> dict[str, Any]:
    data = {
        "kind": "arc",
        **_fields(
            line,
            start=start,
            end=end,
            xStart=x_start,
            xEnd=x_end,
            arcKind=arc_kind,
            yStart=y_start,
            yEnd=y_end,
            colorId=color_id,
            effect=effect,
            isLine=is_line,
        ),
    }
    if arctaps is not None:
        data["arctaps"] = located(
            [arctap(t, line, ARCTAPS_COLUMN + 10 * (i + 1)) for i, t in enumerate(arctaps)],
            line,
            ARCTAPS_COLUMN,
        )
    return located(data, line, ITEM_COLUMN)


def camera(duration: int, line: int = 1) -> dict[str, Any]:
    return located({"kind": "camera", **_fields(line, duration=duration)}, line, ITEM_COLUMN)


def timing_group(*items: dict[str, Any], line: int = 1) -> dict[str, Any]:
    return located(
        {"kind": "timinggroup", "items": located(list(items), line, FIELD_COLUMNS["items"])},
        line,
        ITEM_COLUMN,
    )


def document(*items: dict[str, Any]) -> ChartDocument:
    return ChartDocument.model_validate({"items": list(items)})


@pytest.fixture
def checker() -> SemanticChecker:
    return SemanticChecker()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def runner(settings: Settings) -> CheckRunner:
    return CheckRunner(settings=settings)
