"""PR Review Notifier - Discord notifications about pull request review status."""

from .models import ApprovalPolicy, PullRequest, ReviewEvent, ReviewerStatus, ReviewSummary
from .mention_directory import MentionDirectory
from .config import NotifierConfig
from .aggregator import ReviewStatusAggregator
from .api_client import GitHubAPIClient
from .discord_client import DiscordWebhookClient
from .assigner import ReviewerAssigner
from .notifier import ReviewNotifier
from .output import MessageFormatter

__all__ = [
    'ApprovalPolicy',
    'PullRequest',
    'ReviewEvent',
    'ReviewerStatus',
    'ReviewSummary',
    'MentionDirectory',
    'NotifierConfig',
    'ReviewStatusAggregator',
    'GitHubAPIClient',
    'DiscordWebhookClient',
    'ReviewerAssigner',
    'ReviewNotifier',
    'MessageFormatter',
]
