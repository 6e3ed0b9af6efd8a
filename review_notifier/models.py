"""Data models for PR review status notifications."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


# Review states as reported by the GitHub reviews API
APPROVED = 'APPROVED'
CHANGES_REQUESTED = 'CHANGES_REQUESTED'
COMMENTED = 'COMMENTED'
DISMISSED = 'DISMISSED'
PENDING = 'PENDING'

STATE_LABELS = {
    APPROVED: 'Approved',
    CHANGES_REQUESTED: 'Changes Requested',
    COMMENTED: 'Commented',
}


def humanize_state(state: str) -> str:
    """Return the display label for a review state (lower-cased raw value if unknown)."""
    return STATE_LABELS.get(state, (state or '').lower())


@dataclass
class PullRequest:
    """An open pull request as far as notifications are concerned."""
    number: int
    title: str
    url: str
    author: str
    draft: bool = False
    created_at: str = ''
    requested_reviewers: List[str] = field(default_factory=list)
    base_ref: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'PullRequest':
        """Build a PullRequest from a REST API (or webhook payload) dictionary."""
        return cls(
            number=data['number'],
            title=data.get('title', ''),
            url=data.get('html_url', ''),
            author=(data.get('user') or {}).get('login', ''),
            draft=bool(data.get('draft', False)),
            created_at=data.get('created_at') or data.get('updated_at') or '',
            requested_reviewers=[r['login'] for r in data.get('requested_reviewers') or []],
            base_ref=(data.get('base') or {}).get('ref'),
        )


@dataclass
class ReviewEvent:
    """A single submitted review."""
    reviewer: str
    state: str
    body: str = ''
    pr_number: Optional[int] = None
    submitted_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict, pr_number: int = None) -> 'ReviewEvent':
        return cls(
            reviewer=(data.get('user') or {}).get('login', ''),
            state=data.get('state', ''),
            body=data.get('body') or '',
            pr_number=pr_number,
            submitted_at=data.get('submitted_at'),
        )


@dataclass
class ApprovalPolicy:
    """Approval rules of the PR's base branch."""
    required_approving_review_count: int = 0
    require_code_owner_reviews: bool = False
    has_collaborators: bool = True


@dataclass
class ReviewerStatus:
    """Latest review state of one reviewer, with its rendered tag."""
    login: str
    state: str
    tag: str


@dataclass
class ReviewSummary:
    """Result of classifying a PR's reviews."""
    reviewer_states: Dict[str, str] = field(default_factory=dict)
    responded: List[ReviewerStatus] = field(default_factory=list)
    not_started: List[str] = field(default_factory=list)
    reviewer_tags: List[str] = field(default_factory=list)
    approved_count: int = 0
    is_approval_complete: bool = False
    all_requested_approved: bool = False
    can_merge: bool = False
    has_requested_reviewers: bool = False
    has_collaborators: bool = True
