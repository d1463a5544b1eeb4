# add_to_project/utils.py - logging helpers
import logging
import os

from .actions import ActionsFormatter


def running_in_actions() -> bool:
    return os.getenv("GITHUB_ACTIONS", "").lower() == "true"


def setup_logger(name: str = "add_to_project") -> logging.Logger:
    """Set up a logger with a single stream handler."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if os.getenv("RUNNER_DEBUG") == "1" else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler()
        if running_in_actions():
            formatter = ActionsFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
