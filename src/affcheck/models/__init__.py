"""Pydantic domain models for affcheck."""

from affcheck.models.chart import (
    Arc,
    Arctap,
    Camera,
    ChartDocument,
    ChartItem,
    Hold,
    Tap,
    Timing,
    TimingGroup,
)
from affcheck.models.errors import CheckResult, Diagnostic, DiagnosticCode, Severity
from affcheck.models.location import Located, Location

__all__ = [
    "Arc",
    "Arctap",
    "Camera",
    "ChartDocument",
    "ChartItem",
    "CheckResult",
    "Diagnostic",
    "DiagnosticCode",
    "Hold",
    "Located",
    "Location",
    "Severity",
    "Tap",
    "Timing",
    "TimingGroup",
]
