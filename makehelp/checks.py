"""The built-in lint checks and the fixes some of them can produce."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Optional

from .lint import (
    Check,
    CheckContext,
    Fix,
    FixOperation,
    LintWarning,
    Severity,
    TargetLocation,
)
from .model import Target

MAX_SUMMARY_LENGTH = 80
_SUMMARY_PUNCTUATION = ".!?"
_EMPTY_DOC_LINE = "##"

# Lowercase letters and digits separated by single hyphens, starting with a letter.
_KEBAB_CASE = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


def _targets(ctx: CheckContext) -> Iterator[Target]:
    for category in ctx.help_model.categories:
        yield from category.targets


def check_undocumented_phony(ctx: CheckContext) -> list[LintWarning]:
    """Warn about phony targets that are neither documented, aliases nor generated."""
    undocumented = sorted(
        name
        for name, is_phony in ctx.phony_targets.items()
        if is_phony
        and name not in ctx.documented_targets
        and name not in ctx.aliases
        and name not in ctx.generated_help_targets
    )
    warnings = []
    for name in undocumented:
        loc = ctx.target_locations.get(name)
        file, line = (loc.file, loc.line) if loc else (ctx.makefile_path, 0)
        warnings.append(
            LintWarning(
                file=file,
                line=line,
                severity=Severity.WARNING,
                check_name="undocumented-phony",
                message=f"undocumented phony target '{name}'",
            )
        )
    return warnings


def check_summary_punctuation(ctx: CheckContext) -> list[LintWarning]:
    """Warn about first documentation lines not ending in '.', '!' or '?'."""
    warnings = []
    for target in _targets(ctx):
        if not target.documentation:
            continue
        first = target.documentation[0].strip()
        if not first or first[-1] in _SUMMARY_PUNCTUATION:
            continue
        warnings.append(
            LintWarning(
                file=target.source_file,
                line=target.line_number - len(target.documentation),
                severity=Severity.WARNING,
                check_name="summary-punctuation",
                message=f"summary for '{target.name}' does not end with punctuation",
                context="## " + first,
            )
        )
    return warnings


def fix_summary_punctuation(w: LintWarning) -> Optional[Fix]:
    """Append a period to the summary line, or return None without context."""
    if not w.context:
        return None
    return Fix(
        file=w.file,
        line=w.line,
        operation=FixOperation.REPLACE,
        old_content=w.context,
        new_content=w.context + ".",
    )


def check_orphan_aliases(ctx: CheckContext) -> list[LintWarning]:
    """Warn about aliases that name no known target."""
    known = set(ctx.documented_targets) | set(ctx.phony_targets) | set(ctx.has_recipe)
    warnings = [
        LintWarning(
            file=target.source_file,
            line=target.line_number,
            severity=Severity.WARNING,
            check_name="orphan-alias",
            message=(
                f"alias '{alias}' points to non-existent target "
                f"(referenced by '{target.name}')"
            ),
            context=f"!alias {alias}",
        )
        for target in _targets(ctx)
        for alias in target.aliases
        if alias not in known
    ]
    warnings.sort(key=lambda w: w.message)
    return warnings


def check_long_summaries(ctx: CheckContext) -> list[LintWarning]:
    """Warn about summaries longer than 80 characters."""
    warnings = []
    for target in _targets(ctx):
        summary = target.summary.strip()
        if len(summary) > MAX_SUMMARY_LENGTH:
            warnings.append(
                LintWarning(
                    file=target.source_file,
                    line=target.line_number,
                    severity=Severity.WARNING,
                    check_name="long-summary",
                    message=(
                        f"summary for '{target.name}' is too long "
                        f"({len(summary)} characters, max {MAX_SUMMARY_LENGTH})"
                    ),
                    context=summary,
                )
            )
    return warnings


def check_empty_documentation(ctx: CheckContext) -> list[LintWarning]:
    """Warn about blank documentation lines at the start or end of a target's docs."""
    warnings = []
    for target in _targets(ctx):
        docs = target.documentation
        if not docs:
            continue
        if not docs[0].strip():
            warnings.append(
                LintWarning(
                    file=target.source_file,
                    line=target.line_number - len(docs),
                    severity=Severity.WARNING,
                    check_name="empty-doc",
                    message=(
                        f"target '{target.name}' has empty documentation line "
                        "at the beginning"
                    ),
                    context=_EMPTY_DOC_LINE,
                )
            )
        if len(docs) > 1 and not docs[-1].strip():
            warnings.append(
                LintWarning(
                    file=target.source_file,
                    line=target.line_number - 1,
                    severity=Severity.WARNING,
                    check_name="empty-doc",
                    message=(
                        f"target '{target.name}' has empty documentation line at the end"
                    ),
                    context=_EMPTY_DOC_LINE,
                )
            )
    return warnings


def fix_empty_documentation(w: LintWarning) -> Fix:
    """Delete the empty documentation line."""
    return Fix(
        file=w.file,
        line=w.line,
        operation=FixOperation.DELETE,
        old_content=_EMPTY_DOC_LINE,
    )


def check_missing_var_descriptions(ctx: CheckContext) -> list[LintWarning]:
    """Warn about documented variables with no description."""
    return [
        LintWarning(
            file=target.source_file,
            line=target.line_number,
            severity=Severity.WARNING,
            check_name="missing-var-desc",
            message=(
                f"variable '{variable.name}' in target '{target.name}' "
                "is missing a description"
            ),
        )
        for target in _targets(ctx)
        for variable in target.variables
        if not variable.description.strip()
    ]


def check_inconsistent_naming(ctx: CheckContext) -> list[LintWarning]:
    """Warn about target names that are not kebab-case."""
    return [
        LintWarning(
            file=target.source_file,
            line=target.line_number,
            severity=Severity.WARNING,
            check_name="naming",
            message=(
                f"target '{target.name}' does not follow kebab-case naming convention"
            ),
            context=target.name,
        )
        for target in _targets(ctx)
        if not _KEBAB_CASE.match(target.name)
    ]


def check_circular_dependencies(ctx: CheckContext) -> list[LintWarning]:
    """Warn about each distinct cycle in the dependency graph."""
    visited: set[str] = set()
    in_path: set[str] = set()
    path: list[str] = []
    cycles: dict[str, list[str]] = {}

    def visit(node: str) -> None:
        if node in in_path:
            start = path.index(node)
            cycle = path[start:] + [node]
            cycles.setdefault(min(cycle), cycle)
            return
        if node in visited:
            return
        visited.add(node)
        in_path.add(node)
        path.append(node)
        for dep in ctx.dependencies.get(node, []):
            visit(dep)
        path.pop()
        in_path.discard(node)

    for name in ctx.dependencies:
        if name not in visited:
            visit(name)

    return [
        LintWarning(
            file=ctx.makefile_path,
            line=0,
            severity=Severity.WARNING,
            check_name="circular-dependency",
            message=(
                "circular dependency chain detected: " + " → ".join(cycles[key])
            ),
        )
        for key in sorted(cycles)
    ]


def _redundant_notalias_reason(ctx: CheckContext, name: str) -> Optional[str]:
    if name in ctx.documented_targets:
        return "documented targets are never implicit aliases"
    if ctx.has_recipe.get(name, False):
        return "targets with recipes are never implicit aliases"
    if not ctx.phony_targets.get(name, False):
        return "non-phony targets are never implicit aliases"
    deps = ctx.dependencies.get(name, [])
    if len(deps) != 1:
        return "only targets with exactly one dependency can be implicit aliases"
    if not ctx.phony_targets.get(deps[0], False):
        return (
            f"its dependency '{deps[0]}' is not phony, "
            "so it can't be an implicit alias"
        )
    return None


def check_redundant_directives(ctx: CheckContext) -> list[LintWarning]:
    """Warn about !notalias directives with no effect and self-referencing aliases."""
    warnings = []
    for name in sorted(ctx.not_alias_targets):
        reason = _redundant_notalias_reason(ctx, name)
        if reason is None:
            continue
        loc = ctx.target_locations.get(name, TargetLocation())
        warnings.append(
            LintWarning(
                file=loc.file,
                line=loc.line,
                severity=Severity.WARNING,
                check_name="redundant-notalias",
                message=f"!notalias on '{name}' is redundant: {reason}",
                fixable=True,
            )
        )

    for target in _targets(ctx):
        for alias in target.aliases:
            if alias != target.name:
                continue
            loc = ctx.target_locations.get(target.name, TargetLocation())
            warnings.append(
                LintWarning(
                    file=loc.file,
                    line=loc.line,
                    severity=Severity.WARNING,
                    check_name="redundant-alias",
                    message=f"target '{target.name}' has itself as an alias",
                    fixable=True,
                )
            )
    return warnings


def all_checks() -> list[Check]:
    """Return every available lint check."""
    return [
        Check("undocumented-phony", check_undocumented_phony),
        Check("summary-punctuation", check_summary_punctuation, fix_summary_punctuation),
        Check("orphan-alias", check_orphan_aliases),
        Check("long-summary", check_long_summaries),
        Check("empty-doc", check_empty_documentation, fix_empty_documentation),
        Check("missing-var-desc", check_missing_var_descriptions),
        Check("naming", check_inconsistent_naming),
        Check("circular-dependency", check_circular_dependencies),
        Check("redundant-notalias", check_redundant_directives),
    ]