"""Chart checkers for affcheck."""

from affcheck.checker.limits import ChartSafetyError, check_group_depth, group_depth
from affcheck.checker.runner import Checker, CheckRunner
from affcheck.checker.semantic import SemanticChecker, check_timestamp

__all__ = [
    "ChartSafetyError",
    "CheckRunner",
    "Checker",
    "SemanticChecker",
    "check_group_depth",
    "check_timestamp",
    "group_depth",
]
