"""Dependency injection factory."""

from daily_todos.config import Config
from daily_todos.telegram.notifier import Notifier, TelegramNotifier
from daily_todos.todos.todo_reader import ProjectTodoReader, TodoReader

# Global config instance for dependency injection
_config: Config | None = None


def get_config() -> Config:
    """Get or create Config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_todo_reader(config: Config) -> TodoReader:
    """Create todo reader rooted at the configured projects directory."""
    return ProjectTodoReader(config.projects_dir)


def get_notifier(config: Config) -> Notifier:
    """Create Telegram notifier from config."""
    return TelegramNotifier(
        bot_token=config.telegram_bot_token,
        chat_id=config.telegram_chat_id,
        api_url=config.telegram_api_url,
    )
