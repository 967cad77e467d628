"""Rendering of help models as terminal text or Makefile echo lines."""

from __future__ import annotations

from collections.abc import Iterator

from .colors import ColorScheme, new_color_scheme
from .model import UNCATEGORIZED_CATEGORY_NAME, Category, HelpModel, Target

USAGE_LINE = "Usage: make [<target>...] [<ENV_VAR>=<value>...]"

_MAKEFILE_ESCAPES = {
    "$": "$$",
    '"': '\\"',
    "\\": "\\\\",
    "`": "\\`",
    "\x1b": "\\033",
}


def escape_for_makefile_echo(s: str) -> str:
    """Escape text for a double-quoted printf argument inside a Makefile recipe."""
    return "".join(_MAKEFILE_ESCAPES.get(ch, ch) for ch in s)


class Renderer:
    """Formats help models and targets, optionally with ANSI colours."""

    def __init__(self, use_color: bool) -> None:
        self.colors: ColorScheme = new_color_scheme(use_color)

    # Summary help

    def _summary_lines(self, help_model: HelpModel) -> Iterator[str]:
        yield USAGE_LINE

        entry = next(
            (
                doc
                for doc in help_model.file_docs
                if doc.is_entry_point and doc.documentation
            ),
            None,
        )
        if entry is not None:
            yield ""
            yield from entry.documentation

        included = [
            doc
            for doc in help_model.file_docs
            if not doc.is_entry_point and doc.documentation
        ]
        if included:
            yield ""
            yield "Included Files:"
            for doc in included:
                yield "  " + doc.source_file
                for line in doc.documentation:
                    yield "    " + line if line else ""
                yield ""

        if help_model.categories:
            yield ""
            yield "Targets:"
            for category in help_model.categories:
                yield from self._category_lines(category)

    def _category_lines(self, category: Category) -> Iterator[str]:
        c = self.colors
        if category.name != UNCATEGORIZED_CATEGORY_NAME:
            yield ""
            yield c.category_name + category.name + ":" + c.reset
        for target in category.targets:
            yield from self._target_lines(target)

    def _target_lines(self, target: Target) -> Iterator[str]:
        c = self.colors
        line = "  - " + c.target_name + target.name + c.reset
        if target.aliases:
            line += " " + c.alias + ", ".join(target.aliases) + c.reset
        if target.summary:
            line += ": " + c.documentation + target.summary + c.reset
        yield line
        if target.variables:
            names = ", ".join(v.name for v in target.variables)
            yield "    Vars: " + c.variable + names + c.reset

    def render(self, help_model: HelpModel) -> str:
        """Render the complete help text for a model."""
        return "".join(line + "\n" for line in self._summary_lines(help_model))

    def render_for_makefile(self, help_model: HelpModel) -> list[str]:
        """Render the help text as escaped lines for Makefile printf statements."""
        return [escape_for_makefile_echo(line) for line in self._summary_lines(help_model)]

    # Detailed help

    def _variable_line(self, target: Target, index: int) -> str:
        c = self.colors
        variable = target.variables[index]
        line = "  - " + c.variable + variable.name + c.reset
        if variable.description:
            line += ": " + c.documentation + variable.description + c.reset
        return line

    def render_detailed_target(self, target: Target) -> str:
        """Render the full documentation of a single target."""
        c = self.colors
        parts = [c.target_name, "Target: ", target.name, c.reset, "\n"]

        if target.aliases:
            parts += [c.alias, "Aliases: ", ", ".join(target.aliases), c.reset, "\n"]

        if target.variables:
            parts += [c.variable, "Variables:\n", c.reset]
            parts += [
                self._variable_line(target, i) + "\n"
                for i in range(len(target.variables))
            ]

        if target.documentation:
            if target.variables:
                parts.append("\n")
            parts += [
                c.documentation + line + c.reset + "\n"
                for line in target.documentation
            ]

        if target.source_file:
            parts.append(f"\nSource: {target.source_file}:{target.line_number}\n")

        return "".join(parts)

    def render_basic_target(self, name: str, source_file: str, line_number: int) -> str:
        """Render minimal help for a target that has no documentation."""
        c = self.colors
        parts = [
            c.target_name,
            "Target: ",
            name,
            c.reset,
            "\n",
            "\n",
            c.documentation,
            "No documentation available.\n",
            c.reset,
        ]
        if source_file:
            parts.append(f"\nSource: {source_file}:{line_number}\n")
        return "".join(parts)

    def render_detailed_for_makefile(self, target: Target) -> list[str]:
        """Render a target's detailed help as escaped Makefile printf lines."""
        c = self.colors
        lines = [c.target_name + "Target: " + target.name + c.reset]

        if target.aliases:
            lines.append(c.alias + "Aliases: " + ", ".join(target.aliases) + c.reset)

        if target.variables:
            lines.append(c.variable + "Variables:" + c.reset)
            lines += [
                self._variable_line(target, i) for i in range(len(target.variables))
            ]

        if target.documentation:
            if target.variables:
                lines.append("")
            lines += [c.documentation + line + c.reset for line in target.documentation]

        if target.source_file:
            lines.append("")
            lines.append(f"Source: {target.source_file}:{target.line_number}")

        return [escape_for_makefile_echo(line) for line in lines]