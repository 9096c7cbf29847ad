"""Semantic checks: timestamps, durations, tempo markers, arc shape and arctaps."""

from __future__ import annotations

import logging
from typing import assert_never

from affcheck.models.chart import (
    Arc,
    Camera,
    ChartDocument,
    ChartItem,
    Hold,
    Tap,
    Timing,
    TimingGroup,
)
from affcheck.models.errors import Diagnostic, DiagnosticCode, Severity
from affcheck.models.location import Located, Location

logger = logging.getLogger("affcheck.checker")

_NO_EFFECT = "none"
_SOUND_EFFECT_SUFFIX = "_wav"
_TRACE_ONLY_COLOR = 3


def check_timestamp(timestamp: Located[int], out: list[Diagnostic]) -> None:
    """Report a negative timestamp at the field that holds it."""
    if timestamp.value < 0:
        out.append(
            Diagnostic(
                message="Timestamp should not be negative",
                code=DiagnosticCode.TIMESTAMP_NON_NEGATIVE,
                severity=Severity.ERROR,
                location=timestamp.location,
            )
        )


class SemanticChecker:
    """Reports events that parse fine but make no sense in play.

    Every item is checked on its own; nothing is carried between siblings.
    Diagnostics are appended to the caller's list in depth-first item order.
    """

    def check(self, document: ChartDocument, out: list[Diagnostic]) -> None:
        before = len(out)
        for item in document.items:
            self._check_item(item, out)
        logger.debug(
            "semantic check: %d top-level items, %d diagnostics",
            len(document.items),
            len(out) - before,
        )

    def _check_item(self, item: Located[ChartItem], out: list[Diagnostic]) -> None:
        data = item.value
        match data:
            case Timing():
                self._check_timing(data, out)
            case Tap():
                check_timestamp(data.time, out)
            case Hold():
                self._check_hold(data, item.location, out)
            case Arc():
                self._check_arc(data, item.location, out)
            case Camera():
                self._check_camera(data, out)
            case TimingGroup():
                for child in data.items.value:
                    self._check_item(child, out)
            case _:
                assert_never(data)

    def _check_timing(self, timing: Timing, out: list[Diagnostic]) -> None:
        check_timestamp(timing.time, out)
        bpm = timing.bpm.value
        measure = timing.measure.value
        if bpm != 0 and measure == 0:
            out.append(
                Diagnostic(
                    message="Timing event with non-zero bpm should not have zero beats per segment",
                    code=DiagnosticCode.NON_ZERO_BPM_NON_ZERO_BEATS,
                    severity=Severity.ERROR,
                    location=timing.measure.location,
                )
            )
        if bpm == 0 and measure != 0:
            out.append(
                Diagnostic(
                    message="Timing event with zero bpm should have zero beats per segment",
                    code=DiagnosticCode.ZERO_BPM_ZERO_BEATS,
                    severity=Severity.INFO,
                    location=timing.measure.location,
                )
            )

    def _check_hold(self, hold: Hold, location: Location, out: list[Diagnostic]) -> None:
        check_timestamp(hold.start, out)
        check_timestamp(hold.end, out)
        if hold.start.value >= hold.end.value:
            out.append(
                Diagnostic(
                    message="Hold event should have a positive time length",
                    code=DiagnosticCode.HOLD_POSITIVE_DURATION,
                    severity=Severity.ERROR,
                    location=location,
                )
            )

    def _check_arc(self, arc: Arc, location: Location, out: list[Diagnostic]) -> None:
        check_timestamp(arc.start, out)
        check_timestamp(arc.end, out)
        start = arc.start.value
        end = arc.end.value

        if start > end:
            out.append(
                Diagnostic(
                    message="Arc event should have a non-negative time length",
                    code=DiagnosticCode.ARC_NON_NEGATIVE_DURATION,
                    severity=Severity.ERROR,
                    location=location,
                )
            )

        # Zero-length arcs: each rule fires on its own.
        if start == end:
            if (
                arc.x_start.value == arc.x_end.value
                and arc.y_start.value == arc.y_end.value
            ):
                out.append(
                    Diagnostic(
                        message=(
                            "Arc event with zero time length should have "
                            "different start point and end point"
                        ),
                        code=DiagnosticCode.ARC_ZERO_DURATION_DIFFERENT_POINTS,
                        severity=Severity.ERROR,
                        location=location,
                    )
                )
            if arc.arc_kind.value != "s":
                out.append(
                    Diagnostic(
                        message='Arc event with zero time length should be "s" type',
                        code=DiagnosticCode.ARC_ZERO_DURATION_S_TYPE,
                        severity=Severity.INFO,
                        location=arc.arc_kind.location,
                    )
                )
            if arc.arctaps is not None:
                out.append(
                    Diagnostic(
                        message=(
                            "Arc event with zero time length should not have "
                            "arctap events on it"
                        ),
                        code=DiagnosticCode.ARC_ZERO_DURATION_NO_ARCTAP,
                        severity=Severity.ERROR,
                        location=arc.arctaps.location,
                    )
                )

        effect = arc.effect.value
        if effect != _NO_EFFECT and not effect.endswith(_SOUND_EFFECT_SUFFIX):
            out.append(
                Diagnostic(
                    message=f'Arc event with effect "{effect}"  is not known by us',
                    code=DiagnosticCode.ARC_EFFECT_UNKNOWN,
                    severity=Severity.WARNING,
                    location=arc.effect.location,
                )
            )

        if not arc.is_line.value and arc.arctaps is not None:
            out.append(
                Diagnostic(
                    message=(
                        "Arc event with arctap events on it will be treated as "
                        "not solid even it is specified as solid"
                    ),
                    code=DiagnosticCode.ARC_ARCTAP_NOT_SOLID,
                    severity=Severity.WARNING,
                    location=arc.is_line.location,
                )
            )
        if (
            not arc.is_line.value
            and arc.arctaps is None
            and arc.color_id.value == _TRACE_ONLY_COLOR
        ):
            out.append(
                Diagnostic(
                    message="Solid arc event should not use the color 3",
                    code=DiagnosticCode.ARC_SOLID_COLOR_3,
                    severity=Severity.ERROR,
                    location=arc.color_id.location,
                )
            )

        if arc.arctaps is not None:
            for arctap in arc.arctaps.value:
                time = arctap.value.time.value
                if time < start or time > end:
                    out.append(
                        Diagnostic(
                            message=(
                                "Arctap event should happens in the time range "
                                "of parent arc event"
                            ),
                            code=DiagnosticCode.ARC_ARCTAP_IN_TIME_RANGE,
                            severity=Severity.ERROR,
                            location=arctap.location,
                        )
                    )

    def _check_camera(self, camera: Camera, out: list[Diagnostic]) -> None:
        if camera.duration.value < 0:
            out.append(
                Diagnostic(
                    message="Camera event should have non negative duration",
                    code=DiagnosticCode.CAMERA_NON_NEGATIVE_DURATION,
                    severity=Severity.ERROR,
                    location=camera.duration.location,
                )
            )
