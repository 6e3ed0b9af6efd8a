"""Review notifier: fetches PR review data and posts chat notifications."""

import logging
from typing import Dict, List
from concurrent.futures import ThreadPoolExecutor

import requests

from ..aggregator import ReviewStatusAggregator
from ..api_client import GitHubAPIClient
from ..config import NotifierConfig
from ..discord_client import DiscordWebhookClient
from ..models import ApprovalPolicy, PullRequest, ReviewEvent
from ..output import MessageFormatter


class ReviewNotifier:
    """Builds review status messages for pull requests and sends them to Discord."""

    def __init__(
        self,
        config: NotifierConfig,
        api_client: GitHubAPIClient = None,
        discord_client: DiscordWebhookClient = None,
        max_workers: int = 10
    ):
        """Initialize the notifier.

        Args:
            config: Resolved configuration
            api_client: GitHub client (created from config if omitted)
            discord_client: Webhook client (created from config if omitted)
            max_workers: Upper bound on concurrent per-PR workers
        """
        self.config = config
        self.api_client = api_client or GitHubAPIClient(config.repository, config.github_token)
        self.discord_client = discord_client or DiscordWebhookClient(config.webhook_url)
        self.aggregator = ReviewStatusAggregator(config.mentions)
        self.formatter = MessageFormatter(config.mentions, config.language)
        self.max_workers = max_workers

    def has_collaborators(self) -> bool:
        """Check whether anyone besides the repository owner collaborates on the repository.

        Lookup failures assume collaborators exist, so approvals are still required.
        """
        try:
            collaborators = self.api_client.list_collaborators()
        except requests.RequestException as e:
            logging.warning(f"Could not list collaborators, assuming they exist: {e}")
            return True

        owner = self.config.owner
        return any(c['login'] != owner for c in collaborators)

    def get_approval_policy(self, branch: str, has_collaborators: bool = True) -> ApprovalPolicy:
        """Fetch the approval policy of a branch, defaulting to no required approvals on failure."""
        try:
            policy = self.api_client.get_approval_policy(branch)
        except requests.RequestException as e:
            logging.warning(f"Could not read branch protection for '{branch}', assuming no approvals required: {e}")
            policy = ApprovalPolicy()

        policy.has_collaborators = has_collaborators
        logging.info(
            f"Approval policy for '{branch}': {policy.required_approving_review_count} approval(s) required"
        )
        return policy

    def resolve_policies(self, prs: List[PullRequest]) -> Dict[str, ApprovalPolicy]:
        """Fetch one policy per distinct base branch."""
        has_collaborators = self.has_collaborators()
        policies = {}
        for pr in prs:
            branch = pr.base_ref or self.config.default_branch
            if branch not in policies:
                policies[branch] = self.get_approval_policy(branch, has_collaborators)
        return policies

    def fetch_reviews(self, pr: PullRequest) -> List[ReviewEvent]:
        return [ReviewEvent.from_api(r, pr.number) for r in self.api_client.list_reviews(pr.number)]

    def build_pr_message(self, pr: PullRequest, policy: ApprovalPolicy) -> str:
        """Fetch the reviews of one PR and render its status message."""
        logging.info(f"Processing PR #{pr.number} \"{pr.title}\"")
        reviews = self.fetch_reviews(pr)
        summary = self.aggregator.classify(pr, reviews, pr.requested_reviewers, policy)
        if summary.can_merge:
            logging.info(f"PR #{pr.number}: ready to merge")
        return self.formatter.format_pr_message(pr, summary)

    def build_pr_messages(self, prs: List[PullRequest]) -> List[str]:
        """Build messages for several PRs in parallel, keeping the input order.

        Raises:
            requests.RequestException: If fetching reviews for any PR fails
        """
        if not prs:
            return []

        policies = self.resolve_policies(prs)
        max_workers = min(self.max_workers, len(prs))

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(self.build_pr_message, pr, policies[pr.base_ref or self.config.default_branch])
                for pr in prs
            ]
            return [future.result() for future in futures]

    def send(self, messages: List[str], header: str = None) -> None:
        content = self.formatter.format_content(messages, header)
        self.discord_client.send(content)


# Import and attach methods from submodules
from .reminders import run_scheduled_reminder, _select_reminder_prs
from .events import run_pr_event, run_review_event, HANDLED_PR_ACTIONS

ReviewNotifier.run_scheduled_reminder = run_scheduled_reminder
ReviewNotifier._select_reminder_prs = _select_reminder_prs
ReviewNotifier.run_pr_event = run_pr_event
ReviewNotifier.run_review_event = run_review_event
