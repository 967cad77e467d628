# makehelp

`makehelp` turns a model of documented Makefile targets into readable help
text, and lints that documentation. It can fix some of the problems it finds.

## Installation

```
pip install makehelp
```

The package needs no other libraries. To run the test suite, install the
`test` extra and run pytest:

```
pip install "makehelp[test]"
pytest
```

## What it does not do

`makehelp` is a library. It has no command-line program, and it does not read
Makefiles itself: it does not parse `##` comments or directives, does not
discover `.PHONY` targets, recipes or dependencies, and does not write a
`help.mk` file. You build the `HelpModel` and the lint `CheckContext`
yourself, from whatever source you have, and `makehelp` renders and checks
them.

## The help model

`makehelp.model` holds the data that gets rendered, as dataclasses:

- `HelpModel`: `file_docs` (a list of `FileDoc`), `categories` (a list of
  `Category`) and `has_categories`.
- `FileDoc`: `source_file`, `documentation` lines, `discovery_order` and
  `is_entry_point`.
- `Category`: a `name` and its `targets`. A category whose name is
  `UNCATEGORIZED_CATEGORY_NAME` (the empty string) is shown without a header.
- `Target`: `name`, `aliases`, `documentation` lines, `summary`, `variables`
  (a list of `Variable`, each with `name` and `description`), `source_file`
  and `line_number`.

## Rendering help

```python
from makehelp.model import Category, FileDoc, HelpModel, Target, Variable
from makehelp.renderer import Renderer

model = HelpModel(
    file_docs=[FileDoc(source_file="Makefile",
                       documentation=["Example project Makefile"],
                       is_entry_point=True)],
    categories=[Category(name="Build", targets=[
        Target(name="build", aliases=["b"],
               documentation=["Build the project."],
               summary="Build the project.",
               variables=[Variable(name="GOOS", description="Target OS")]),
    ])],
)

print(Renderer(use_color=False).render(model), end="")
```

The output:

```
Usage: make [<target>...] [<ENV_VAR>=<value>...]

Example project Makefile

Targets:

Build:
  - build b: Build the project.
    Vars: GOOS
```

The documentation of the first entry-point `FileDoc` comes after the usage
line; documented files that are not entry points are listed under an
`Included Files:` heading, each path followed by its indented documentation.

Other `Renderer` methods:

- `render_detailed_target(target)`: the full view of one target, with its
  aliases, variables and their descriptions, all documentation lines, and
  `Source: file:line` when the target has a source file.
- `render_basic_target(name, source_file, line_number)`: a short view of a
  target that has no documentation.
- `render_for_makefile(help_model)` and `render_detailed_for_makefile(target)`:
  the same content as a list of lines, each escaped for a double-quoted
  argument in a Makefile recipe.

`escape_for_makefile_echo(s)` does that escaping: `$` becomes `$$`, `"`, `\`
and `` ` `` get a backslash in front, and the ANSI escape character becomes a
literal `\033`.

With `use_color=True` the output uses ANSI colours: bold cyan for category
names, bold green for target names, yellow for aliases, magenta for variables
and white for documentation. `makehelp.colors.new_color_scheme(use_color)`
returns the `ColorScheme`; with colours off every code in it is empty.

## Linting

A check takes a `makehelp.lint.CheckContext` and returns a list of
`LintWarning`. The context holds the `help_model`, the `makefile_path`,
`phony_targets` and `has_recipe` (dicts of name to bool), `dependencies`
(name to list of prerequisites), the sets `documented_targets`, `aliases`,
`generated_help_targets` and `not_alias_targets`, and `target_locations`
(name to `TargetLocation`).

`makehelp.checks.all_checks()` returns every check:

| Check | Finds | Auto-fix |
|-------|-------|----------|
| `undocumented-phony` | phony targets that are not documented, not aliases and not generated help targets | no |
| `summary-punctuation` | first documentation lines that do not end in `.`, `!` or `?` | appends `.` |
| `orphan-alias` | aliases naming no documented, phony or recipe target | no |
| `long-summary` | summaries longer than 80 characters | no |
| `empty-doc` | blank documentation lines at the start or end | deletes the line |
| `missing-var-desc` | variables with no description | no |
| `naming` | target names that are not kebab-case | no |
| `circular-dependency` | each distinct dependency cycle | no |
| `redundant-notalias` | `!notalias` directives with no effect, and targets that list themselves as an alias (reported as `redundant-alias`) | no |

The check functions are also available one by one, for example
`check_long_summaries(ctx)`, together with the fix functions
`fix_summary_punctuation(w)` and `fix_empty_documentation(w)`.

```python
from makehelp.checks import all_checks
from makehelp.fixer import Fixer
from makehelp.lint import CheckContext, collect_fixes, format_warning, lint

ctx = CheckContext(help_model=model, makefile_path="Makefile",
                   phony_targets={"build": True},
                   documented_targets={"build"})
checks = all_checks()
result = lint(ctx, checks)
if result.has_warnings:
    for warning in result.warnings:
        print(format_warning(warning))

fixes = collect_fixes(checks, result.warnings)
outcome = Fixer(dry_run=False).apply_fixes(fixes)
print(outcome.total_fixed, outcome.files_modified)
```

`lint(ctx, checks)` runs every check, marks a warning `fixable` when its check
has a fix function, and sorts the warnings by file, line and check name.
`format_warning(w)` prints a warning compiler-style as
`file:line: warning: message` (without `:line` when the line is 0), followed
by `  | context` when the warning has context.

`collect_fixes(checks, warnings)` turns fixable warnings into `Fix` objects,
each with a `file`, a 1-based `line`, an `operation` (`FixOperation.REPLACE`
or `FixOperation.DELETE`), the `old_content` it expects and the
`new_content` to write.

`Fixer.apply_fixes(fixes)` returns a `FixResult` with `total_fixed` and
`files_modified` (path to count). Before applying a fix it calls
`validate_fix(fix, lines)`, which raises `ValueError` when the line is out of
range or no longer holds the expected content; such fixes are skipped. Each
changed file is written through a temporary file and an atomic replace, keeps
its permissions and ends with a newline. With `dry_run=True` the fixes are
counted and the files left unchanged. If a file cannot be read or written,
`apply_fixes` raises `OSError`.