# add_to_project/event.py - triggering event payload
import json
import os
from typing import Any, Dict, Optional

from .utils import setup_logger

logger = setup_logger(__name__)


def load_event(path: Optional[str] = None) -> Dict[str, Any]:
    """Read the webhook payload the workflow was triggered with."""
    path = path or os.getenv("GITHUB_EVENT_PATH")
    if not path or not os.path.isfile(path):
        logger.warning(f"No event payload found at {path!r}")
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Event payload at {path} must be a JSON object")
    return data


def get_subject(event: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """The issue or pull request the event is about, if any."""
    return event.get("issue") or event.get("pull_request")
