"""Webhook event notification methods for ReviewNotifier."""

import logging
from typing import Dict

from ..models import COMMENTED, DISMISSED, PullRequest, ReviewEvent

HANDLED_PR_ACTIONS = ('opened', 'reopened', 'synchronize', 'ready_for_review')


def run_pr_event(self, event_name: str, payload: Dict) -> int:
    """Notify about a pull request lifecycle event.

    Args:
        event_name: The workflow event name (only 'pull_request' is handled)
        payload: The webhook event payload

    Returns:
        Number of PR messages sent (0 when the event is ignored)
    """
    action = payload.get('action')
    if event_name != 'pull_request' or action not in HANDLED_PR_ACTIONS or not payload.get('pull_request'):
        logging.info(f"Ignoring event '{event_name}' with action '{action}', nothing to do")
        return 0

    pr = PullRequest.from_api(payload['pull_request'])
    messages = self.build_pr_messages([pr])
    if not messages:
        logging.info("No messages generated, nothing to do")
        return 0

    self.send(messages, header=self.formatter.pr_event_header(action))
    return len(messages)


def run_review_event(self, payload: Dict) -> int:
    """Notify the channel that a review was submitted.

    Requested reviewers who have not reviewed, or whose latest review only
    commented or was dismissed, are mentioned as still pending.

    Returns:
        1 if a message was sent, 0 if the payload carried no review
    """
    pull_request = payload.get('pull_request')
    review_data = payload.get('review')
    if not pull_request or not review_data:
        logging.info("No pull request or review in the event payload, nothing to do")
        return 0

    pr = PullRequest.from_api(pull_request)
    review = ReviewEvent.from_api(review_data, pr.number)
    logging.info(f"Review by {review.reviewer} on PR #{pr.number}: {review.state}")

    states = self.aggregator.latest_states(pr, self.fetch_reviews(pr))
    pending = [
        login for login in pr.requested_reviewers
        if login not in states or states[login] in (COMMENTED, DISMISSED)
    ]
    logging.debug(f"Pending reviewers on PR #{pr.number}: {pending}")

    self.send([self.formatter.format_review_message(pr, review, pending)])
    return 1
