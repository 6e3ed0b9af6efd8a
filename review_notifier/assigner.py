"""Assignee auto-assignment for newly opened pull requests."""

import logging
from typing import Dict, List

import requests

from .api_client import GitHubAPIClient
from .exceptions import AssignmentError


class ReviewerAssigner:
    """Assigns PR authors listed in the reviewer table to their own PRs."""

    def __init__(self, api_client: GitHubAPIClient):
        self.api_client = api_client

    def assign(self, pr_number: int, pr_author: str, reviewer_map: Dict[str, List[str]]) -> bool:
        """Add the PR author as assignee if they have an entry in the reviewer table.

        Args:
            pr_number: The pull request number
            pr_author: Login of the PR author
            reviewer_map: Static author -> reviewers table

        Returns:
            True if the author was assigned, False if they have no entry

        Raises:
            AssignmentError: If the assignee call fails (not retried)
        """
        reviewers = reviewer_map.get(pr_author)
        if reviewers is None:
            logging.info(f"No reviewer mapping found for {pr_author}, nothing to do")
            return False

        try:
            self.api_client.add_assignees(pr_number, [pr_author])
        except requests.RequestException as e:
            logging.error(f"Error assigning {pr_author} to #{pr_number}: {e}")
            raise AssignmentError(f"Could not assign {pr_author} to #{pr_number}: {e}") from e

        logging.info(f"Mapped reviewers {', '.join(reviewers) or '-'}; assigned {pr_author} to #{pr_number}")
        return True
