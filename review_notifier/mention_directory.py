"""
Mention directory for chat notifications.

Maps GitHub logins to the chat identity used in `<@id>` mentions and to the
display name shown when a user should not be pinged.
"""

import logging
from typing import Dict, Tuple, Union


class MentionDirectory:
    """Resolves GitHub logins to chat mention ids and display names."""

    def __init__(self, entries: Dict[str, Union[str, Dict[str, str]]] = None):
        """
        Initialize the MentionDirectory.

        Args:
            entries: Mapping from GitHub login to either a mention id string or
                     an object with 'id' and optional 'displayName' keys
        """
        self.users: Dict[str, Dict[str, str]] = {}
        for login, value in (entries or {}).items():
            if isinstance(value, dict):
                mention_id = str(value.get('id') or login)
                display_name = value.get('displayName') or value.get('display_name') or mention_id
            elif value:
                mention_id = str(value)
                display_name = mention_id
            else:
                logging.warning(f"Ignoring empty mention entry for '{login}'")
                continue
            self.users[login] = {'id': mention_id, 'display_name': display_name}

    def resolve(self, login: str) -> Tuple[str, str]:
        """
        Get the mention id and display name for a login.

        Args:
            login: The GitHub login

        Returns:
            Tuple of (mention_id, display_name); unknown logins resolve to themselves
        """
        entry = self.users.get(login)
        if entry is None:
            return login, login
        return entry['id'], entry['display_name']

    def mention(self, login: str) -> str:
        """Return the `<@id>` token that pings the user."""
        mention_id, _ = self.resolve(login)
        return f"<@{mention_id}>"

    def display_name(self, login: str) -> str:
        _, display_name = self.resolve(login)
        return display_name

    def __len__(self) -> int:
        return len(self.users)
