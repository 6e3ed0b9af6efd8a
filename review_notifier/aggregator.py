"""Review status aggregation for a single pull request."""

import logging
from typing import Dict, List, Optional

from .mention_directory import MentionDirectory
from .models import (
    APPROVED, PENDING, ApprovalPolicy, PullRequest, ReviewEvent, ReviewerStatus, ReviewSummary, humanize_state,
)


class ReviewStatusAggregator:
    """Turns review events, requested reviewers and the approval policy into a ReviewSummary."""

    def __init__(self, mentions: MentionDirectory = None):
        """Initialize the aggregator.

        Args:
            mentions: Directory used to render reviewer tags
        """
        self.mentions = mentions or MentionDirectory()

    def latest_states(self, pr: PullRequest, reviews: List[ReviewEvent]) -> Dict[str, str]:
        """Map each reviewer to the state of their most recent review.

        Unsubmitted (PENDING) drafts are skipped, as are reviews by the PR author.
        Insertion order follows each reviewer's first review.
        """
        submitted = [r for r in reviews or [] if r.state != PENDING]
        # sorted() is stable, so untimed reviews and equal timestamps keep delivery order
        submitted = sorted(submitted, key=lambda r: r.submitted_at or '')

        states: Dict[str, str] = {}
        for review in submitted:
            if review.reviewer == pr.author:
                continue
            states[review.reviewer] = review.state
        return states

    def render_status(self, login: str, state: str) -> str:
        """Render '<name>(<state>)'; only approvals are rendered without a ping."""
        label = humanize_state(state)
        if state == APPROVED:
            return f"{self.mentions.display_name(login)}({label})"
        return f"{self.mentions.mention(login)}({label})"

    def render_not_started(self, login: str) -> str:
        return f"{self.mentions.mention(login)}(X)"

    def classify(
        self,
        pr: PullRequest,
        reviews: List[ReviewEvent],
        requested_reviewers: Optional[List[str]],
        policy: ApprovalPolicy,
    ) -> ReviewSummary:
        """Classify the review status of a pull request.

        Args:
            pr: The pull request
            reviews: All review events of the PR
            requested_reviewers: Logins still requested for review (may be None)
            policy: Approval policy of the base branch

        Returns:
            ReviewSummary with per-reviewer tags and the merge decision
        """
        requested = list(requested_reviewers or [])
        policy = policy or ApprovalPolicy()

        states = self.latest_states(pr, reviews)
        logging.debug(f"PR #{pr.number} review states: {states}")
        logging.debug(f"PR #{pr.number} requested reviewers: {requested}")

        responded = [
            ReviewerStatus(login=login, state=state, tag=self.render_status(login, state))
            for login, state in states.items()
        ]
        not_started = [
            login for login in requested
            if login not in states and login != pr.author
        ]

        approved_count = sum(1 for status in responded if status.state == APPROVED)
        required = policy.required_approving_review_count or 0

        is_approval_complete = (
            not policy.has_collaborators
            or required <= 0
            or approved_count >= required
        )
        all_requested_approved = all(states.get(login) == APPROVED for login in requested)

        summary = ReviewSummary(
            reviewer_states=states,
            responded=responded,
            not_started=not_started,
            reviewer_tags=[s.tag for s in responded] + [self.render_not_started(login) for login in not_started],
            approved_count=approved_count,
            is_approval_complete=is_approval_complete,
            all_requested_approved=all_requested_approved,
            can_merge=is_approval_complete and not not_started,
            has_requested_reviewers=bool(requested),
            has_collaborators=policy.has_collaborators,
        )

        logging.debug(
            f"PR #{pr.number}: approved={approved_count}/{required}, "
            f"not_started={not_started}, can_merge={summary.can_merge}"
        )
        return summary
