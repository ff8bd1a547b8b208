"""DailyTodos main application."""

import asyncio
import logging
import sys

from daily_todos.config import MissingConfigError
from daily_todos.factory import get_config, get_notifier, get_todo_reader
from daily_todos.runner import run, validate_config

logger = logging.getLogger(__name__)


async def _run() -> None:
    config = get_config()
    validate_config(config)
    await run(config, get_todo_reader(config), get_notifier(config))


def main() -> int:
    """Run the daily todos sender."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        asyncio.run(_run())
    except MissingConfigError as e:
        logger.error(f"[Main] ❌ {e}")
        return 1
    except Exception:
        logger.exception("[Main] ❌ Fatal error")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
