"""Chat message formatting for review notifications."""

from typing import List

from ..mention_directory import MentionDirectory


class MessageFormatter:
    """Formats PR reminders and review notifications for the chat channel."""

    def __init__(self, mentions: MentionDirectory = None, language: str = 'english'):
        """Initialize the message formatter.

        Args:
            mentions: Directory used to render author and reviewer mentions
            language: Template language ('english' or 'korean')
        """
        self.mentions = mentions or MentionDirectory()
        self.language = language
        self.templates = self._get_message_templates(language)

    def format_content(self, messages: List[str], header: str = None) -> str:
        """Join per-PR messages into the webhook content, with an optional header line."""
        body = "\n\n".join(messages)
        if header:
            return f"{header}\n\n{body}"
        return body

    def reminder_header(self) -> str:
        return self.templates['reminder_header']

    def pr_event_header(self, action: str) -> str:
        return self.templates['pr_event_header'].format(action=action)


# Import and attach methods from submodules
from .message_templates import (_get_message_templates, _select_merge_phrase, format_pr_title,
                                format_pr_message, format_review_message)

MessageFormatter._get_message_templates = _get_message_templates
MessageFormatter._select_merge_phrase = _select_merge_phrase
MessageFormatter.format_pr_title = format_pr_title
MessageFormatter.format_pr_message = format_pr_message
MessageFormatter.format_review_message = format_review_message
