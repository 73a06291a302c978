"""Interactive project name and class selection.

Classes that descend from the marker interface are offered pre-checked;
the marker class itself is never offered.  The session is blocking and
reads from the controlling terminal through ``rich.prompt``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from .errors import EmptySelectionError
from .schema import SchemaView
from .utils import console as default_console

NAME_QUESTION = "What would you like your new project to be called?"
CLASSES_QUESTION = (
    "The following classes were found in the provided schema. "
    "Which should be used as DataHarmonizer templates?"
)

_RANGE_RE = re.compile(r"^(\d+)-(\d+)$")


class ClassChoice(BaseModel):
    """One selectable class."""

    name: str
    checked: bool = False


class SelectionAnswers(BaseModel):
    """What the user chose at the prompt."""

    project_name: str = Field(..., min_length=1)
    classes: list[str] = Field(default_factory=list)

    @field_validator("project_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be blank")
        return value


def build_choices(view: SchemaView, marker: str) -> list[ClassChoice]:
    """List every class except *marker*, checking the ones derived from it."""
    return [
        ClassChoice(name=name, checked=marker in view.class_ancestors(name))
        for name in view.class_names()
        if name != marker
    ]


def parse_selection(raw: str, choices: list[ClassChoice]) -> list[str]:
    """Turn a typed selection into class names.

    Tokens are separated by commas or whitespace.  Each token is a 1-based
    index, an inclusive range such as ``2-4``, a class name, ``all`` or
    ``none``.  The result keeps the order in which choices are listed.

    Raises:
        ValueError: If a token matches no choice.
    """
    names = [c.name for c in choices]
    picked: set[str] = set()

    for token in re.split(r"[,\s]+", raw.strip()):
        if not token:
            continue
        if token in names:
            picked.add(token)
            continue
        lowered = token.lower()
        if lowered == "all":
            picked.update(names)
            continue
        if lowered == "none":
            picked.clear()
            continue
        if token.isdigit():
            picked.add(_choice_at(names, int(token)))
            continue
        match = _RANGE_RE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                raise ValueError(f"Invalid range: {token}")
            picked.update(_choice_at(names, i) for i in range(start, end + 1))
            continue
        raise ValueError(f"Unknown class: {token}")

    return [name for name in names if name in picked]


def _choice_at(names: list[str], index: int) -> str:
    if index < 1 or index > len(names):
        raise ValueError(f"No class numbered {index}")
    return names[index - 1]


def _choices_table(choices: list[ClassChoice]) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("", no_wrap=True)
    table.add_column("Class")
    for index, choice in enumerate(choices, start=1):
        mark = "[green]◉[/green]" if choice.checked else "◯"
        table.add_row(str(index), mark, choice.name)
    return table


def prompt_selection(
    view: SchemaView,
    marker: str,
    console: Console | None = None,
) -> SelectionAnswers:
    """Ask for a project name and the classes to publish.

    Blank project names are asked again, as are selections containing
    unknown entries.  Pressing enter at the class prompt accepts the
    pre-checked classes.

    Raises:
        EmptySelectionError: If no class is selected.
    """
    console = console or default_console

    project_name = ""
    while not project_name:
        project_name = Prompt.ask(NAME_QUESTION, console=console).strip()

    choices = build_choices(view, marker)
    default = ",".join(
        str(index) for index, choice in enumerate(choices, start=1) if choice.checked
    )

    console.print()
    console.print(CLASSES_QUESTION)
    console.print(_choices_table(choices))
    console.print(
        "[dim]Enter numbers, ranges (2-4) or class names separated by commas; "
        "'all' or 'none'.[/dim]"
    )

    while True:
        raw = Prompt.ask(
            "Classes",
            console=console,
            default=default,
            show_default=bool(default),
        )
        try:
            classes = parse_selection(raw, choices)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            continue
        break

    if not classes:
        raise EmptySelectionError()

    return SelectionAnswers(project_name=project_name, classes=classes)
