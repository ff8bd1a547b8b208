"""Test fixtures for DailyTodos."""

from pathlib import Path

import pytest

from daily_todos.config import Config

SAMPLE_TODO = """# Tasks - alpha

## Tasks
- Review PR #42
- Write release notes

## Meetings
- 10:00 Standup

## Reminders
- Submit timesheet

## Blockers
- Waiting on API keys

## Notes
- Staging is slow today

## Deadline
- Friday 17:00
"""


class FakeNotifier:
    """Records sent messages and answers with scripted results."""

    def __init__(self, results: list[bool] | None = None) -> None:
        self.messages: list[str] = []
        self._results = list(results or [])

    async def send(self, text: str) -> bool:
        self.messages.append(text)
        if self._results:
            return self._results.pop(0)
        return True


@pytest.fixture
def projects_dir(tmp_path: Path) -> Path:
    """Create empty projects directory."""
    projects = tmp_path / "projects"
    projects.mkdir()
    return projects


@pytest.fixture
def sample_todo() -> str:
    """Sample todo file content covering every section."""
    return SAMPLE_TODO


@pytest.fixture
def config(projects_dir: Path) -> Config:
    """Create test config with credentials and no delay."""
    return Config(
        telegram_bot_token="123:abc",
        telegram_chat_id="-100200",
        projects_dir=projects_dir,
        send_delay_seconds=0,
    )
