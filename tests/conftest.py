"""
Shared fixtures for review notifier tests
"""

import pytest

from review_notifier.config import NotifierConfig
from review_notifier.mention_directory import MentionDirectory


@pytest.fixture
def make_pr():
    """Factory for pull request payloads as returned by the GitHub API."""
    def _make_pr(number, author='carol', requested=(), draft=False,
                 created_at='2024-01-01T00:00:00Z', base='main', title=None):
        return {
            'number': number,
            'title': title or f'PR {number}',
            'html_url': f'https://github.com/octo/repo/pull/{number}',
            'user': {'login': author},
            'draft': draft,
            'created_at': created_at,
            'updated_at': created_at,
            'requested_reviewers': [{'login': login} for login in requested],
            'base': {'ref': base},
        }
    return _make_pr


@pytest.fixture
def make_review():
    """Factory for review payloads as returned by the GitHub API."""
    def _make_review(login, state, submitted_at='2024-01-02T00:00:00Z', body=''):
        return {
            'user': {'login': login},
            'state': state,
            'body': body,
            'submitted_at': submitted_at,
        }
    return _make_review


@pytest.fixture
def mentions():
    """Mention directory with one plain id entry and one object entry."""
    return MentionDirectory({
        'alice': '111',
        'bob': {'id': '222', 'displayName': 'Bobby'},
        'carol': '333',
    })


@pytest.fixture
def config(mentions):
    """Fully populated configuration."""
    return NotifierConfig(
        github_token='test_token',
        repository='octo/repo',
        webhook_url='https://discord.example/api/webhooks/1/abc',
        mentions=mentions,
        reviewer_map={'carol': ['alice']},
    )
