"""
Command line entry point for the review notifier.

Each command maps to one workflow:

  remind        scheduled reminder for all open PRs
  pr-event      notification for a pull_request event
  review-event  notification for a pull_request_review event
  assign        assign the PR author on a pull_request event
"""

import argparse
import logging
import os
from typing import List

from .actions import load_event_payload, set_failed
from .api_client import GitHubAPIClient
from .assigner import ReviewerAssigner
from .config import NotifierConfig
from .exceptions import NotifierError
from .notifier import ReviewNotifier

COMMANDS = ('remind', 'pr-event', 'review-event', 'assign')


def configure_logging() -> None:
    """Configure logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='review-notifier',
        description='Post pull request review status to Discord.'
    )
    parser.add_argument('command', choices=COMMANDS, help='Workflow to run')
    return parser


def run_command(command: str, config: NotifierConfig) -> int:
    """Run one command. Returns the number of notifications (or assignments) made."""
    if command == 'assign':
        config.require('github_token', 'repository', 'reviewer_map', 'event_path')
        pull_request = load_event_payload(config.event_path).get('pull_request')
        if not pull_request:
            logging.info("No pull request in the event payload, nothing to do")
            return 0
        assigner = ReviewerAssigner(GitHubAPIClient(config.repository, config.github_token))
        assigned = assigner.assign(pull_request['number'], pull_request['user']['login'], config.reviewer_map)
        return int(assigned)

    config.require('github_token', 'repository', 'webhook_url')
    if command == 'remind':
        return ReviewNotifier(config).run_scheduled_reminder()

    config.require('event_path')
    payload = load_event_payload(config.event_path)
    notifier = ReviewNotifier(config)
    if command == 'pr-event':
        return notifier.run_pr_event(config.event_name, payload)
    return notifier.run_review_event(payload)


def main(argv: List[str] = None) -> None:
    """Main entry point for the script."""
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        config = NotifierConfig.from_env()
        sent = run_command(args.command, config)
    except NotifierError as e:
        set_failed(f"{args.command} failed: {e}")
        return
    except Exception as e:
        logging.error(f"Unexpected error in {args.command}", exc_info=True)
        set_failed(f"{args.command} failed: {e}")
        return

    logging.info(f"{args.command} finished ({sent} notification(s))")


if __name__ == "__main__":
    main()
