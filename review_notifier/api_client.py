"""GitHub API client for the endpoints the notifier needs."""

import os
import logging
from typing import Dict, List, Optional, Callable
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import ApprovalPolicy

API_ROOT = "https://api.github.com"


class GitHubAPIClient:
    """Handles GitHub API requests with retry logic and pagination."""

    def __init__(self, repository: str, token: str = None):
        """Initialize the GitHub API client.

        Args:
            repository: Repository in 'owner/repo' form
            token: GitHub token for authentication
        """
        self.repository = repository
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.session = requests.Session()

        # One connection per concurrent PR worker plus a few spare
        adapter = HTTPAdapter(
            pool_connections=20,
            pool_maxsize=20,
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=['GET']
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': '2022-11-28'
        })
        if self.token:
            self.session.headers['Authorization'] = f'Bearer {self.token}'
            logging.info(f"Initialized GitHub API client for {repository} with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")

    def repo_url(self, path: str) -> str:
        return f"{API_ROOT}/repos/{self.repository}/{path}"

    def get_paginated(self, url: str, params: Dict = None,
                      should_continue: Optional[Callable[[List[Dict]], bool]] = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            url: The API endpoint URL
            params: Query parameters
            should_continue: Optional callback function that takes a page of results and returns
                           False to stop pagination early, True to continue

        Returns:
            List of all items from all pages

        Raises:
            requests.HTTPError: If any page request fails
        """
        results = []
        page = 1
        per_page = 100

        params = dict(params or {})
        params['per_page'] = per_page

        while True:
            params['page'] = page
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params=params)

            if response.status_code == 403:
                logging.error(f"GitHub API refused request to {url}: {response.text}")

            response.raise_for_status()
            data = response.json()

            if not data:
                break

            results.extend(data)

            # Check early termination callback
            if should_continue and not should_continue(data):
                logging.debug(f"Early termination triggered at page {page}")
                break

            # Check if there are more pages
            if len(data) < per_page:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return results

    def list_open_pulls(self) -> List[Dict]:
        """List open pull requests, oldest first."""
        return self.get_paginated(self.repo_url("pulls"), {
            'state': 'open',
            'sort': 'created',
            'direction': 'asc'
        })

    def list_reviews(self, pr_number: int) -> List[Dict]:
        """List all reviews submitted on a pull request."""
        return self.get_paginated(self.repo_url(f"pulls/{pr_number}/reviews"))

    def list_collaborators(self) -> List[Dict]:
        return self.get_paginated(self.repo_url("collaborators"))

    def get_branch_protection(self, branch: str) -> Optional[Dict]:
        """Fetch the protection rules of a branch.

        Returns:
            The protection payload, or None if the branch is not protected

        Raises:
            requests.HTTPError: For any error other than 404
        """
        response = self.session.get(self.repo_url(f"branches/{branch}/protection"))
        if response.status_code == 404:
            logging.info(f"Branch '{branch}' has no protection rules")
            return None
        response.raise_for_status()
        return response.json()

    def get_approval_policy(self, branch: str) -> ApprovalPolicy:
        """Translate branch protection into an ApprovalPolicy (collaborator flag left at default)."""
        protection = self.get_branch_protection(branch)
        reviews = (protection or {}).get('required_pull_request_reviews') or {}
        return ApprovalPolicy(
            required_approving_review_count=reviews.get('required_approving_review_count', 0),
            require_code_owner_reviews=reviews.get('require_code_owner_reviews', False)
        )

    def add_assignees(self, issue_number: int, assignees: List[str]) -> Dict:
        """Add assignees to an issue or pull request.

        Raises:
            requests.HTTPError: If the request fails
        """
        response = self.session.post(
            self.repo_url(f"issues/{issue_number}/assignees"),
            json={'assignees': assignees}
        )
        response.raise_for_status()
        logging.info(f"Assigned {', '.join(assignees)} to #{issue_number}")
        return response.json()
