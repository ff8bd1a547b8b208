"""Discovery of today's todo files under the projects directory."""

import logging
import re
from pathlib import Path
from typing import Protocol

from daily_todos.todos.models import TodoFileSet

logger = logging.getLogger(__name__)

SHORT_ID_PATTERN = re.compile(r"-([a-z0-9]+)\.md$")


class TodoReader(Protocol):
    """Protocol for finding todo files."""

    def find_todos_for_day(self, day: str) -> dict[str, TodoFileSet]:
        """Find non-empty todo files for a YYYY-MM-DD day, keyed by project."""
        ...


class ProjectTodoReader:
    """Reads `<projects_dir>/<project>/<day>-<id>.md` files."""

    def __init__(self, projects_dir: str | Path) -> None:
        """Initialize reader with the projects root directory."""
        self._projects_dir = Path(projects_dir)

    def find_todos_for_day(self, day: str) -> dict[str, TodoFileSet]:
        """Find today's todo files per project.

        Projects are immediate subdirectories, visited in name order. Within
        a project, files starting with the day and ending in .md are read in
        name order. Unreadable and blank files are skipped; projects left
        without content are omitted.

        Args:
            day: Date prefix in YYYY-MM-DD form

        Returns:
            Mapping of project name to its file set, in discovery order
        """
        todos: dict[str, TodoFileSet] = {}

        if not self._projects_dir.exists():
            logger.info(f"[Reader] Projects directory not found: {self._projects_dir}")
            return todos

        projects = sorted(p for p in self._projects_dir.iterdir() if p.is_dir())
        for project_dir in projects:
            file_set = self._read_project(project_dir, day)
            if file_set.files:
                todos[project_dir.name] = file_set

        return todos

    def _read_project(self, project_dir: Path, day: str) -> TodoFileSet:
        """Read matching, non-empty files of one project."""
        file_set = TodoFileSet()
        names = sorted(
            p.name
            for p in project_dir.iterdir()
            if p.is_file() and p.name.startswith(day) and p.name.endswith(".md")
        )

        for name in names:
            try:
                content = (project_dir / name).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"[Reader] Failed to read {project_dir.name}/{name}: {e}")
                continue
            if content.strip():
                file_set.files.append(name)
                file_set.contents.append(content)

        return file_set


def extract_short_id(filename: str) -> str | None:
    """Extract the trailing id from a name like 2025-12-19-e90e.md."""
    match = SHORT_ID_PATTERN.search(filename)
    return match.group(1) if match else None


def extract_short_ids(filenames: list[str]) -> list[str]:
    """Extract short ids, skipping filenames without one."""
    return [short_id for name in filenames if (short_id := extract_short_id(name))]
