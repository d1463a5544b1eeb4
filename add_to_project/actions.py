# add_to_project/actions.py - GitHub Actions runner I/O
"""Helpers for talking to the GitHub Actions runner.

The runner reads step outputs from the file named by ``GITHUB_OUTPUT`` and
turns ``::debug::`` / ``::warning::`` / ``::error::`` lines on stdout into
annotations.
"""
import logging
import os
import uuid
from typing import Optional


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFormatter(logging.Formatter):
    """Render log records as workflow commands."""

    COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{_escape_data(message)}"


def set_output(name: str, value: str, output_path: Optional[str] = None) -> None:
    """Expose ``value`` as the step output ``name``."""
    output_path = output_path or os.getenv("GITHUB_OUTPUT")
    value = str(value)

    if not output_path:
        # Older runners without GITHUB_OUTPUT
        print(f"::set-output name={name}::{_escape_data(value)}")
        return

    with open(output_path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")
