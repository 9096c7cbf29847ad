"""Structured diagnostic models with chart source position tracking."""

from __future__ import annotations

from collections import Counter
from enum import StrEnum

from pydantic import BaseModel

from affcheck.models.location import Location


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticCode(StrEnum):
    """Stable identifiers a reporter maps to localized text."""

    TIMESTAMP_NON_NEGATIVE = "TimestampNonNegative"
    NON_ZERO_BPM_NON_ZERO_BEATS = "NonZeroBPMNonZeroBeats"
    ZERO_BPM_ZERO_BEATS = "ZeroBPMZeroBeats"
    HOLD_POSITIVE_DURATION = "HoldPositiveDuration"
    ARC_NON_NEGATIVE_DURATION = "ArcNonNegativeDuration"
    ARC_ZERO_DURATION_DIFFERENT_POINTS = "ArcZeroDurationDifferentPoints"
    ARC_ZERO_DURATION_S_TYPE = "ArcZeroDurationSType"
    ARC_ZERO_DURATION_NO_ARCTAP = "ArcZeroDurationNoArctap"
    ARC_EFFECT_UNKNOWN = "ArcEffectUnknown"
    ARC_ARCTAP_NOT_SOLID = "ArcArctapNotSolid"
    ARC_SOLID_COLOR_3 = "ArcSolidColor3"
    ARC_ARCTAP_IN_TIME_RANGE = "ArcArctapInTimeRange"
    CAMERA_NON_NEGATIVE_DURATION = "CameraNonNegativeDuration"


class Diagnostic(BaseModel):
    """A single finding about a chart event."""

    message: str
    code: DiagnosticCode
    severity: Severity
    location: Location

    model_config = {"frozen": True}


class CheckResult(BaseModel):
    """Diagnostics collected from one run over a chart, in emission order."""

    diagnostics: list[Diagnostic] = []

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def infos(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.INFO]

    @property
    def valid(self) -> bool:
        """True when no error-level diagnostic was produced."""
        return not self.errors

    def passed(self, fail_on_warning: bool = False) -> bool:
        if fail_on_warning and self.warnings:
            return False
        return self.valid

    def by_code(self) -> dict[DiagnosticCode, int]:
        return dict(Counter(d.code for d in self.diagnostics))
