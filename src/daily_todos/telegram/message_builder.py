"""Telegram HTML message formatting for daily todos."""

from daily_todos.todos.models import ParsedTodos, Section

MAX_MESSAGE_LENGTH = 4000
TRUNCATION_MARGIN = 50
TRUNCATION_NOTICE = "\n\n<i>[Truncated - message too long]</i>"
SEPARATOR = "━" * 20

# Bulleted sections after tasks, in display order
LIST_SECTIONS: tuple[tuple[Section, str], ...] = (
    (Section.MEETINGS, "📅 <b>Meetings:</b>"),
    (Section.REMINDERS, "🔔 <b>Reminders:</b>"),
    (Section.BLOCKERS, "⚠️ <b>Blockers:</b>"),
    (Section.NOTES, "📝 <b>Notes:</b>"),
)


def escape_html(text: str) -> str:
    """Escape &, < and > for Telegram's HTML parse mode."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def build_message(
    project: str,
    display_date: str,
    todos: ParsedTodos,
    short_ids: list[str] | None = None,
) -> str:
    """Build the daily message for one project.

    Args:
        project: Project name (escaped here)
        display_date: Date already formatted as DD/MM/YYYY
        todos: Merged todos of the project
        short_ids: File ids to list in the review hint

    Returns:
        HTML message, not yet truncated
    """
    lines = [
        "📋 <b>Tasks hôm nay</b>",
        f"🏷️ Project: <b>{escape_html(project)}</b>",
        f"📅 {display_date}",
        "",
        SEPARATOR,
    ]

    if todos.tasks:
        lines.append("")
        lines.append("📌 <b>Tasks:</b>")
        lines.extend(f"{i}. {escape_html(task)}" for i, task in enumerate(todos.tasks, start=1))

    for section, heading in LIST_SECTIONS:
        items = todos.items(section)
        if items:
            lines.append("")
            lines.append(heading)
            lines.extend(f"• {escape_html(item)}" for item in items)

    lines.append("")
    lines.append(SEPARATOR)

    lines.append("")
    if todos.deadline:
        lines.append(f"⏰ {escape_html(todos.deadline[0])}")
    else:
        lines.append("💪 Good luck!")

    if short_ids:
        ids = " ".join(f"<code>#{short_id}</code>" for short_id in short_ids)
        lines.append("")
        lines.append(f"📎 Review: /check-todos {ids}")

    return "\n".join(lines)


def build_empty_message(display_date: str) -> str:
    """Build the notice sent when no project has todos today."""
    lines = [
        "📋 <b>Daily Task Report</b>",
        SEPARATOR,
        "",
        f"📅 {display_date}",
        "",
        "Không có tasks nào cho hôm nay.",
        "",
        "💡 Dùng <code>/prep-todos</code> để tạo tasks cho ngày mai.",
        "",
        SEPARATOR,
    ]
    return "\n".join(lines)


def truncate_message(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """Cut text longer than max_length and append a truncation notice.

    The cut ignores line and tag boundaries.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - TRUNCATION_MARGIN] + TRUNCATION_NOTICE
