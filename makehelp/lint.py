"""Lint checks over a help model: warnings, fixes and their aggregation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .model import HelpModel


class Severity(str, Enum):
    """Severity level of a lint warning."""

    WARNING = "warning"


@dataclass
class LintWarning:
    """A single lint issue found during analysis."""

    file: str = ""
    line: int = 0
    severity: Severity = Severity.WARNING
    check_name: str = ""
    message: str = ""
    context: str = ""
    fixable: bool = False


@dataclass(frozen=True)
class TargetLocation:
    """Source file and line number where a target is defined."""

    file: str = ""
    line: int = 0


@dataclass
class CheckContext:
    """All data that lint checks examine."""

    help_model: HelpModel = field(default_factory=HelpModel)
    makefile_path: str = ""
    phony_targets: dict[str, bool] = field(default_factory=dict)
    dependencies: dict[str, list[str]] = field(default_factory=dict)
    has_recipe: dict[str, bool] = field(default_factory=dict)
    documented_targets: set[str] = field(default_factory=set)
    aliases: set[str] = field(default_factory=set)
    generated_help_targets: set[str] = field(default_factory=set)
    target_locations: dict[str, TargetLocation] = field(default_factory=dict)
    not_alias_targets: set[str] = field(default_factory=set)


class FixOperation(Enum):
    """Kind of change a fix makes to a line."""

    REPLACE = "replace"
    DELETE = "delete"


@dataclass(frozen=True)
class Fix:
    """A single line modification that resolves a lint warning."""

    file: str
    line: int
    operation: FixOperation
    old_content: str = ""
    new_content: str = ""


CheckFunc = Callable[[CheckContext], list[LintWarning]]
FixFunc = Callable[[LintWarning], Optional[Fix]]


@dataclass(frozen=True)
class Check:
    """A named lint check, optionally able to produce fixes."""

    name: str
    check_func: CheckFunc
    fix_func: Optional[FixFunc] = None


@dataclass
class LintResult:
    """Warnings from all checks, sorted by file, line and check name."""

    warnings: list[LintWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


def lint(ctx: CheckContext, checks: Iterable[Check]) -> LintResult:
    """Run every check on the context and return the combined, sorted warnings."""
    collected: list[LintWarning] = []
    for check in checks:
        fixable = check.fix_func is not None
        collected.extend(
            replace(warning, fixable=fixable) for warning in check.check_func(ctx)
        )
    collected.sort(key=lambda w: (w.file, w.line, w.check_name))
    return LintResult(warnings=collected)


def collect_fixes(checks: Iterable[Check], warnings: Iterable[LintWarning]) -> list[Fix]:
    """Produce fixes for every fixable warning whose check can fix it."""
    by_name = {check.name: check for check in checks}
    fixes: list[Fix] = []
    for warning in warnings:
        if not warning.fixable:
            continue
        check = by_name.get(warning.check_name)
        if check is None or check.fix_func is None:
            continue
        fix = check.fix_func(warning)
        if fix is not None:
            fixes.append(fix)
    return fixes


def format_warning(w: LintWarning) -> str:
    """Format a warning compiler-style as ``file:line: severity: message``."""
    severity = w.severity.value if isinstance(w.severity, Severity) else str(w.severity)
    if w.line > 0:
        msg = f"{w.file}:{w.line}: {severity}: {w.message}"
    else:
        msg = f"{w.file}: {severity}: {w.message}"
    if w.context:
        msg += f"\n  | {w.context}"
    return msg