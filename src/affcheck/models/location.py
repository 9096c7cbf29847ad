"""Source positions attached to parsed chart values."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Location(BaseModel):
    """Points to a span in the chart source for diagnostic attribution."""

    file: str = "<chart>"
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class Located(BaseModel, Generic[T]):
    """A parsed value paired with the span that produced it."""

    value: T
    location: Location

    model_config = {"frozen": True}
