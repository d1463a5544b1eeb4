# add_to_project/main.py - action entry point

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

from .actions import set_output
from .components import build_pairs, should_add
from .config import Config
from .event import get_subject, load_event
from .github_client import GitHubClient, GraphQLError, parse_project_url
from .utils import setup_logger

logger = setup_logger("add_to_project.main")


def add_to_project(cfg: Config, client: GitHubClient, event: Dict[str, Any],
                   dry_run: bool = False) -> Optional[str]:
    """Add the event's issue/PR to the project if the filters match.

    Returns the new project item ID, or None when the issue was skipped.
    """
    subject = get_subject(event)

    # Only proceed if the workflow assignee and labels match the issue/PR.
    if not should_add(build_pairs(cfg, subject)):
        return None

    logger.debug(f"Project URL: {cfg.project_url}")
    project = parse_project_url(cfg.project_url)

    logger.debug(f"Org name: {project.owner_name}")
    logger.debug(f"Project number: {project.project_number}")
    logger.debug(f"Owner type: {project.owner_type}")

    content_id = (subject or {}).get("node_id")
    if dry_run:
        logger.info(f"Dry-run: would add {content_id} to {cfg.project_url}")
        return None

    project_id = client.get_project_id(project)
    logger.debug(f"Project node ID: {project_id}")
    logger.debug(f"Content ID: {content_id}")

    item_id = client.add_item(project_id, content_id)
    set_output("itemId", item_id, cfg.github_output)
    logger.info(f"Added issue {(subject or {}).get('number')} as project item {item_id}")
    return item_id


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Add an issue or pull request to a GitHub project")
    parser.add_argument(
        "--event-path",
        help="Path to the event payload (defaults to GITHUB_EVENT_PATH)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Evaluate the filters without calling the GitHub API"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    args = parser.parse_args(argv)

    load_dotenv()

    if args.verbose:
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("add_to_project"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    cfg = Config.from_env()

    missing = cfg.missing_required()
    if missing:
        logger.error(f"Input required and not supplied: {', '.join(missing)}")
        sys.exit(1)

    try:
        event = load_event(args.event_path or cfg.github_event_path)
        add_to_project(cfg, GitHubClient(cfg), event, dry_run=args.dry_run)
    except (ValueError, GraphQLError, requests.RequestException) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
