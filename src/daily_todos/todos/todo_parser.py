"""Parser for daily markdown todo files."""

import re

from daily_todos.todos.models import SECTION_KEYWORDS, ParsedTodos, Section


def classify_heading(heading: str) -> Section | None:
    """Map a `## ` heading text to its section.

    Keywords are matched by substring on the lower-cased heading, in
    SECTION_KEYWORDS order, so "Task Notes" is a tasks heading.
    """
    lowered = heading.lower()
    for keyword, section in SECTION_KEYWORDS:
        if keyword in lowered:
            return section
    return None


def parse_todo_file(content: str) -> ParsedTodos:
    """Parse markdown todo content into categorized items.

    Recognized lines (after trimming):
    - `# Title` sets the title (last one wins)
    - `## Heading` selects the current section, or none if unrecognized
    - `- item` appends to the current section, if any

    Everything else is ignored.
    """
    result = ParsedTodos()
    current: Section | None = None

    for line in content.split("\n"):
        trimmed = line.strip()

        if trimmed.startswith("# "):
            result.title = re.sub(r"^#\s*", "", trimmed)
            continue

        if trimmed.startswith("## "):
            # Unknown headings reset the section so their items are dropped
            current = classify_heading(re.sub(r"^##\s*", "", trimmed))
            continue

        if trimmed.startswith("- ") and current is not None:
            item = re.sub(r"^-\s*", "", trimmed)
            if item:
                result.items(current).append(item)

    return result
