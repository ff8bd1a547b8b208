"""Data models for parsed todo files."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Section(str, Enum):
    """Todo categories, in heading-match priority order."""

    TASKS = "tasks"
    MEETINGS = "meetings"
    REMINDERS = "reminders"
    BLOCKERS = "blockers"
    NOTES = "notes"
    DEADLINE = "deadline"


# Heading keyword per section; the first contained keyword wins.
SECTION_KEYWORDS: tuple[tuple[str, Section], ...] = (
    ("task", Section.TASKS),
    ("meeting", Section.MEETINGS),
    ("reminder", Section.REMINDERS),
    ("blocker", Section.BLOCKERS),
    ("note", Section.NOTES),
    ("deadline", Section.DEADLINE),
)


@dataclass
class ParsedTodos:
    """Categorized items from one or more todo files."""

    title: str = ""
    tasks: list[str] = field(default_factory=list)
    meetings: list[str] = field(default_factory=list)
    reminders: list[str] = field(default_factory=list)
    blockers: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    deadline: list[str] = field(default_factory=list)

    def items(self, section: Section) -> list[str]:
        """Get the item list backing a section."""
        items: list[str] = getattr(self, section.value)
        return items


@dataclass
class TodoFileSet:
    """Today's non-empty todo files for one project."""

    files: list[str] = field(default_factory=list)  # Filenames, sorted
    contents: list[str] = field(default_factory=list)  # Raw text, parallel to files


def merge_todos(parsed: Iterable[ParsedTodos]) -> ParsedTodos:
    """Merge parsed files of one project in file order.

    Title and deadline keep the first non-empty value seen; every other
    section is concatenated.
    """
    merged = ParsedTodos()
    for todos in parsed:
        if not merged.title and todos.title:
            merged.title = todos.title
        for section in Section:
            if section is Section.DEADLINE:
                continue
            merged.items(section).extend(todos.items(section))
        if todos.deadline and not merged.deadline:
            merged.deadline = list(todos.deadline)
    return merged
