"""Chart item types: timing, tap, hold, arc, camera and timing group events."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from affcheck.models.location import Located


class Timing(BaseModel):
    """A tempo change. ``measure`` is the beats-per-segment divisor."""

    kind: Literal["timing"] = "timing"
    time: Located[int]
    bpm: Located[float]
    measure: Located[int]

    model_config = {"frozen": True}


class Tap(BaseModel):
    """A single-lane floor note."""

    kind: Literal["tap"] = "tap"
    time: Located[int]

    model_config = {"frozen": True}


class Hold(BaseModel):
    """A single-lane note held from ``start`` to ``end``."""

    kind: Literal["hold"] = "hold"
    start: Located[int]
    end: Located[int]

    model_config = {"frozen": True}


class Arctap(BaseModel):
    """A tap placed on an arc's timeline. Never a top-level item."""

    kind: Literal["arctap"] = "arctap"
    time: Located[int]

    model_config = {"frozen": True}


class Arc(BaseModel):
    """A continuous gesture note between two points.

    ``is_line`` marks a thin trace arc; ``False`` means a solid, touchable arc.
    ``arctaps`` is ``None`` when the source carries no arctap block at all,
    which is distinct from an empty block.
    """

    kind: Literal["arc"] = "arc"
    start: Located[int]
    end: Located[int]
    x_start: Located[float] = Field(alias="xStart")
    x_end: Located[float] = Field(alias="xEnd")
    y_start: Located[float] = Field(alias="yStart")
    y_end: Located[float] = Field(alias="yEnd")
    arc_kind: Located[str] = Field(alias="arcKind")
    effect: Located[str]
    is_line: Located[bool] = Field(alias="isLine")
    color_id: Located[int] = Field(alias="colorId")
    arctaps: Located[list[Located[Arctap]]] | None = None

    model_config = {"frozen": True, "populate_by_name": True}


class Camera(BaseModel):
    """A viewpoint motion lasting ``duration`` milliseconds."""

    kind: Literal["camera"] = "camera"
    duration: Located[int]

    model_config = {"frozen": True}


class TimingGroup(BaseModel):
    """A nestable container of items sharing a scoped timing context."""

    kind: Literal["timinggroup"] = "timinggroup"
    items: Located[list[Located[ChartItem]]]

    model_config = {"frozen": True}


ChartItem = Timing | Tap | Hold | Arc | Camera | TimingGroup

TimingGroup.model_rebuild()


class ChartDocument(BaseModel):
    """A parsed chart: the ordered top-level items of one song difficulty."""

    items: list[Located[ChartItem]] = []

    model_config = {"frozen": True}
