"""Data model describing documented Makefile targets for help output."""

from __future__ import annotations

from dataclasses import dataclass, field

UNCATEGORIZED_CATEGORY_NAME = ""
"""Name used for the category holding targets that have no category."""


@dataclass
class Variable:
    """An environment variable documented for a target."""

    name: str
    description: str = ""


@dataclass
class Target:
    """A documented Makefile target."""

    name: str
    aliases: list[str] = field(default_factory=list)
    documentation: list[str] = field(default_factory=list)
    summary: str = ""
    variables: list[Variable] = field(default_factory=list)
    source_file: str = ""
    line_number: int = 0


@dataclass
class Category:
    """A named group of targets."""

    name: str = UNCATEGORIZED_CATEGORY_NAME
    targets: list[Target] = field(default_factory=list)


@dataclass
class FileDoc:
    """File-level documentation taken from a Makefile or an included file."""

    source_file: str
    documentation: list[str] = field(default_factory=list)
    discovery_order: int = 0
    is_entry_point: bool = False


@dataclass
class HelpModel:
    """Everything needed to render help output."""

    file_docs: list[FileDoc] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    has_categories: bool = False