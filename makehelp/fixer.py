"""Application of lint fixes to source files."""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass, field

from .lint import Fix, FixOperation


@dataclass
class FixResult:
    """Number of fixes applied, in total and per file."""

    total_fixed: int = 0
    files_modified: dict[str, int] = field(default_factory=dict)


def validate_fix(fix: Fix, lines: list[str]) -> str:
    """Return the line a fix targets; raise ValueError if the fix no longer applies."""
    if fix.line < 1 or fix.line > len(lines):
        raise ValueError(
            f"line {fix.line} out of range (file has {len(lines)} lines)"
        )
    actual = lines[fix.line - 1]
    expected = fix.old_content.strip()
    if expected and actual.strip() != expected:
        raise ValueError(
            f"line content mismatch at line {fix.line}: "
            f"expected {expected!r}, got {actual.strip()!r}"
        )
    return actual


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _write_atomic(path: str, lines: list[str]) -> None:
    mode = stat.S_IMODE(os.stat(path).st_mode)
    fd, tmp_path = tempfile.mkstemp(
        prefix=".fix-", suffix=".tmp", dir=os.path.dirname(path)
    )
    try:
        with open(
            fd, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            handle.writelines(line + "\n" for line in lines)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise


@dataclass
class Fixer:
    """Applies fixes to files; with ``dry_run`` only counts them."""

    dry_run: bool = False

    def apply_fixes(self, fixes: Iterable[Fix]) -> FixResult:
        """Apply fixes file by file, each file rewritten atomically.

        Fixes whose line is out of range or whose content no longer matches
        are skipped. Raises OSError if a file cannot be read or written.
        """
        by_file: dict[str, list[Fix]] = {}
        for fix in fixes:
            by_file.setdefault(fix.file, []).append(fix)

        result = FixResult()
        for file, file_fixes in by_file.items():
            try:
                count = self._apply_file_fixes(file, file_fixes)
            except OSError as exc:
                raise OSError(f"failed to fix {file}: {exc}") from exc
            result.files_modified[file] = count
            result.total_fixed += count
        return result

    def _apply_file_fixes(self, file: str, fixes: list[Fix]) -> int:
        path = os.path.abspath(file)
        lines = _read_lines(path)

        deleted: set[int] = set()
        applied = 0
        for fix in sorted(fixes, key=lambda f: f.line, reverse=True):
            try:
                validate_fix(fix, lines)
            except ValueError:
                continue
            if fix.operation is FixOperation.REPLACE:
                lines[fix.line - 1] = fix.new_content
            else:
                deleted.add(fix.line - 1)
            applied += 1

        if applied == 0:
            return 0
        if self.dry_run:
            return applied

        kept = [line for index, line in enumerate(lines) if index not in deleted]
        _write_atomic(path, kept)
        return applied