"""ANSI colour schemes for help output.

The default scheme uses bold cyan for category names, bold green for
target names, yellow for aliases, magenta for variable names and white
for documentation text. With colours disabled every code is empty.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
BOLD_CYAN = "\033[1;36m"
BOLD_GREEN = "\033[1;32m"
YELLOW = "\033[0;33m"
MAGENTA = "\033[0;35m"
WHITE = "\033[0;37m"


@dataclass(frozen=True)
class ColorScheme:
    """ANSI codes for each element of the help output."""

    category_name: str = ""
    target_name: str = ""
    alias: str = ""
    variable: str = ""
    documentation: str = ""
    reset: str = ""


def new_color_scheme(use_color: bool) -> ColorScheme:
    """Return the coloured scheme, or an all-empty one when colours are off."""
    if not use_color:
        return ColorScheme()
    return ColorScheme(
        category_name=BOLD_CYAN,
        target_name=BOLD_GREEN,
        alias=YELLOW,
        variable=MAGENTA,
        documentation=WHITE,
        reset=RESET,
    )