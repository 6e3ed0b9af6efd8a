"""Scheduled reminder methods for ReviewNotifier."""

import logging
from datetime import datetime
from typing import Dict, List

from ..models import PullRequest


def _select_reminder_prs(self, pulls: List[Dict]) -> List[PullRequest]:
    """Drop draft PRs and order the rest by creation time, oldest first."""
    prs = [PullRequest.from_api(p) for p in pulls]
    prs = [pr for pr in prs if not pr.draft]
    return sorted(prs, key=lambda pr: pr.created_at)


def run_scheduled_reminder(self, now: datetime = None) -> int:
    """Post one reminder listing the review status of every open, non-draft PR.

    Args:
        now: Current time, for the reminder end date check

    Returns:
        Number of PR messages sent (0 when there was nothing to do)
    """
    if self.config.reminders_expired(now):
        logging.info(
            f"Reminder end date {self.config.reminder_end_date.isoformat()} has passed, nothing to do"
        )
        return 0

    prs = self._select_reminder_prs(self.api_client.list_open_pulls())
    if not prs:
        logging.info("No open non-draft PRs, nothing to do")
        return 0

    logging.info(f"Building reminders for {len(prs)} open PR(s)")
    messages = self.build_pr_messages(prs)
    if not messages:
        logging.info("No messages generated, nothing to do")
        return 0

    self.send(messages, header=self.formatter.reminder_header())
    return len(messages)
