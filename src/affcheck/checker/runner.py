"""Runs a sequence of chart checkers over one document: guard → checkers → result."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from affcheck.checker.limits import ChartSafetyError, check_group_depth
from affcheck.checker.semantic import SemanticChecker
from affcheck.models.chart import ChartDocument
from affcheck.models.errors import CheckResult, Diagnostic
from affcheck.settings import Settings

logger = logging.getLogger("affcheck.runner")


@runtime_checkable
class Checker(Protocol):
    """Anything that appends diagnostics for a chart to ``out``."""

    def check(self, document: ChartDocument, out: list[Diagnostic]) -> None: ...


class CheckRunner:
    """Runs checkers in order into a single diagnostic list."""

    def __init__(
        self,
        checkers: Sequence[Checker] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._checkers = list(checkers) if checkers is not None else [SemanticChecker()]
        self._settings = settings if settings is not None else Settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def run(self, document: ChartDocument) -> CheckResult:
        """Check ``document`` with every checker.

        Raises ``ChartSafetyError`` before any checker runs if timing groups
        nest deeper than ``settings.max_group_depth``.
        """
        try:
            check_group_depth(document, self._settings.max_group_depth)
        except ChartSafetyError as exc:
            logger.warning("chart refused: %s", exc)
            raise

        diagnostics: list[Diagnostic] = []
        for checker in self._checkers:
            checker.check(document, diagnostics)

        result = CheckResult(diagnostics=diagnostics)
        logger.info(
            "checked %d items: %d errors, %d warnings, %d infos",
            len(document.items),
            len(result.errors),
            len(result.warnings),
            len(result.infos),
        )
        return result

    def passed(self, result: CheckResult) -> bool:
        return result.passed(fail_on_warning=self._settings.fail_on_warning)
