"""
Configuration for the review notifier.

All settings come from the environment (the workflow passes secrets that way),
optionally seeded from a local .env file.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .mention_directory import MentionDirectory

SUPPORTED_LANGUAGES = ('english', 'korean')

# Field name -> environment variable, used for error messages
ENV_NAMES = {
    'github_token': 'GITHUB_TOKEN',
    'repository': 'GITHUB_REPOSITORY',
    'webhook_url': 'DISCORD_WEBHOOK',
    'reviewer_map': 'COLLABORATORS',
    'event_name': 'GITHUB_EVENT_NAME',
    'event_path': 'GITHUB_EVENT_PATH',
}


def safe_json_parse(raw: Optional[str], default: Any = None) -> Any:
    """Parse a JSON string, returning the default when it is absent or malformed."""
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logging.error(f"Could not parse JSON configuration value: {e}")
        return default


def parse_reviewer_map(data: Any) -> Dict[str, List[str]]:
    """Normalize the author -> reviewers table (single logins become one-element lists)."""
    if not isinstance(data, dict):
        if data:
            logging.warning("Reviewer map must be a JSON object, ignoring it")
        return {}

    reviewer_map = {}
    for author, reviewers in data.items():
        if isinstance(reviewers, str):
            reviewers = [reviewers]
        reviewer_map[author] = [r for r in reviewers or [] if r]
    return reviewer_map


def parse_end_date(raw: Optional[str]) -> Optional[datetime]:
    """Parse REMINDER_END_DATE; a bare date means the end of that day (UTC)."""
    if not raw:
        return None
    raw = raw.strip()
    try:
        if len(raw) == 10:
            end_date = datetime.fromisoformat(raw).replace(hour=23, minute=59, second=59)
        else:
            end_date = datetime.fromisoformat(raw.replace('Z', '+00:00'))
    except ValueError:
        logging.warning(f"Invalid REMINDER_END_DATE value '{raw}', ignoring")
        return None
    if end_date.tzinfo is None:
        end_date = end_date.replace(tzinfo=timezone.utc)
    return end_date


@dataclass
class NotifierConfig:
    """Everything a notifier run needs, resolved once at startup."""
    github_token: Optional[str] = None
    repository: Optional[str] = None
    webhook_url: Optional[str] = None
    mentions: MentionDirectory = field(default_factory=MentionDirectory)
    reviewer_map: Dict[str, List[str]] = field(default_factory=dict)
    event_name: Optional[str] = None
    event_path: Optional[str] = None
    default_branch: str = 'main'
    language: str = 'english'
    reminder_end_date: Optional[datetime] = None

    @classmethod
    def from_env(cls, environ: Dict[str, str] = None, use_dotenv: bool = True) -> 'NotifierConfig':
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            use_dotenv: Whether to load a .env file into os.environ first

        Returns:
            The resolved configuration (not yet validated, see require())
        """
        if use_dotenv and environ is None:
            load_dotenv()
        env = os.environ if environ is None else environ

        language = (env.get('MESSAGE_LANGUAGE') or 'english').strip().lower()
        if language not in SUPPORTED_LANGUAGES:
            logging.warning(f"Invalid MESSAGE_LANGUAGE value '{language}', using default: english")
            language = 'english'

        mentions = safe_json_parse(env.get('DISCORD_MENTION'), {})
        if not isinstance(mentions, dict):
            logging.warning("DISCORD_MENTION must be a JSON object, ignoring it")
            mentions = {}

        config = cls(
            github_token=env.get('GITHUB_TOKEN') or None,
            repository=env.get('GITHUB_REPOSITORY') or None,
            webhook_url=env.get('DISCORD_WEBHOOK') or None,
            mentions=MentionDirectory(mentions),
            reviewer_map=parse_reviewer_map(safe_json_parse(env.get('COLLABORATORS'), {})),
            event_name=env.get('GITHUB_EVENT_NAME') or None,
            event_path=env.get('GITHUB_EVENT_PATH') or None,
            default_branch=env.get('DEFAULT_BRANCH', '').strip() or 'main',
            language=language,
            reminder_end_date=parse_end_date(env.get('REMINDER_END_DATE')),
        )
        logging.debug(f"Loaded configuration for {config.repository} with {len(config.mentions)} mention(s)")
        return config

    def require(self, *names: str) -> None:
        """Fail fast if any of the named fields is unset.

        Raises:
            ConfigurationError: naming every missing environment variable
        """
        missing = [ENV_NAMES.get(name, name.upper()) for name in names if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}", missing=missing
            )

    @property
    def owner(self) -> str:
        return self.repository.split('/', 1)[0] if self.repository else ''

    def reminders_expired(self, now: datetime = None) -> bool:
        """Check whether the reminder end date has passed."""
        if self.reminder_end_date is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now > self.reminder_end_date
