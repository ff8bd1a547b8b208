"""Daily todos run: discover, parse, format and send per project."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from daily_todos.clock import DEFAULT_TIMEZONE, format_display_date, today_in_timezone
from daily_todos.config import REQUIRED_ENV, Config, MissingConfigError
from daily_todos.telegram.message_builder import build_empty_message, build_message
from daily_todos.telegram.notifier import Notifier
from daily_todos.todos.models import ParsedTodos, TodoFileSet, merge_todos
from daily_todos.todos.todo_parser import parse_todo_file
from daily_todos.todos.todo_reader import TodoReader, extract_short_ids

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Outcome of one run."""

    date: str
    sent: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    empty_notice_sent: bool | None = None  # None when todos were found


def validate_config(config: Config) -> None:
    """Check required settings, logging each one's presence.

    Raises:
        MissingConfigError: If any required setting is missing
    """
    missing = config.missing_fields()
    if not missing:
        return
    logger.error("[Runner] Missing required environment variables:")
    for env_name in REQUIRED_ENV.values():
        logger.error(f"[Runner]    {env_name}: {'✗' if env_name in missing else '✓'}")
    raise MissingConfigError(missing)


def merge_project_todos(file_set: TodoFileSet) -> ParsedTodos:
    """Parse every file of a project and merge them in file order."""
    return merge_todos(parse_todo_file(content) for content in file_set.contents)


async def run(
    config: Config,
    reader: TodoReader,
    notifier: Notifier,
    today: str | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> RunReport:
    """Send today's todos, one message per project.

    Delivery failures are recorded in the report and never stop the run.

    Args:
        config: Application settings
        reader: Todo file discovery
        notifier: Message delivery
        today: YYYY-MM-DD override (defaults to today in Asia/Ho_Chi_Minh)
        sleep: Awaitable used for the pause between project messages

    Returns:
        Per-project outcome of the run
    """
    validate_config(config)
    logger.info("[Runner] 🚀 Starting Daily Todos sender...")

    day = today or today_in_timezone(DEFAULT_TIMEZONE)
    display_date = format_display_date(day)
    report = RunReport(date=day)
    logger.info(f"[Runner] 📅 Today ({DEFAULT_TIMEZONE}): {display_date}")

    todos = reader.find_todos_for_day(day)

    if not todos:
        logger.info("[Runner] 📭 No todos found for today")
        report.empty_notice_sent = await notifier.send(build_empty_message(display_date))
        if report.empty_notice_sent:
            logger.info("[Runner] ✅ Reminder sent successfully")
        else:
            logger.warning("[Runner] ❌ Failed to send reminder")
        return report

    logger.info(f"[Runner] 📋 Found todos for {len(todos)} project(s)")

    for project, file_set in todos.items():
        logger.info(f"[Runner]   → {project} ({len(file_set.files)} file(s))")

        short_ids = extract_short_ids(file_set.files)
        merged = merge_project_todos(file_set)
        message = build_message(project, display_date, merged, short_ids)

        if await notifier.send(message):
            report.sent.append(project)
            logger.info(f"[Runner]   ✅ Sent todos for {project}")
        else:
            report.failed.append(project)
            logger.warning(f"[Runner]   ❌ Failed to send todos for {project}")

        if len(todos) > 1:
            await sleep(config.send_delay_seconds)

    logger.info("[Runner] 🎉 Done!")
    return report
