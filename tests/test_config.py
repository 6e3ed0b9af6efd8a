"""
Unit tests for configuration loading and the mention directory
"""

import json
import pytest
from datetime import datetime, timezone
from unittest.mock import patch

from review_notifier.config import NotifierConfig, parse_end_date, parse_reviewer_map, safe_json_parse
from review_notifier.exceptions import ConfigurationError
from review_notifier.mention_directory import MentionDirectory


class TestSafeJsonParse:
    """Test cases for safe_json_parse."""

    def test_valid_json(self):
        assert safe_json_parse('{"a": "1"}', {}) == {'a': '1'}

    def test_missing_value_returns_default(self):
        assert safe_json_parse(None, {}) == {}
        assert safe_json_parse('', []) == []

    def test_malformed_json_returns_default(self, caplog):
        assert safe_json_parse('{not json', {}) == {}
        assert 'Could not parse JSON' in caplog.text


class TestMentionDirectory:
    """Test cases for MentionDirectory."""

    def test_plain_string_entry(self):
        directory = MentionDirectory({'alice': '111'})
        assert directory.resolve('alice') == ('111', '111')
        assert directory.mention('alice') == '<@111>'

    def test_object_entry(self):
        directory = MentionDirectory({'bob': {'id': '222', 'displayName': 'Bobby'}})
        assert directory.resolve('bob') == ('222', 'Bobby')
        assert directory.display_name('bob') == 'Bobby'

    def test_object_entry_without_display_name(self):
        directory = MentionDirectory({'bob': {'id': 222}})
        assert directory.resolve('bob') == ('222', '222')

    def test_unknown_login_resolves_to_itself(self):
        directory = MentionDirectory({})
        assert directory.resolve('zoe') == ('zoe', 'zoe')
        assert directory.mention('zoe') == '<@zoe>'

    def test_empty_entries_are_ignored(self):
        directory = MentionDirectory({'alice': '', 'bob': '222'})
        assert 'alice' not in directory.users
        assert len(directory) == 1


class TestParsers:
    """Test cases for value parsers."""

    def test_reviewer_map_normalizes_strings(self):
        assert parse_reviewer_map({'carol': 'alice', 'dave': ['alice', 'bob']}) == {
            'carol': ['alice'],
            'dave': ['alice', 'bob'],
        }

    def test_reviewer_map_rejects_non_objects(self):
        assert parse_reviewer_map(['alice']) == {}

    def test_end_date_bare_date_is_end_of_day(self):
        end_date = parse_end_date('2025-03-21')
        assert end_date == datetime(2025, 3, 21, 23, 59, 59, tzinfo=timezone.utc)

    def test_end_date_with_zulu_suffix(self):
        end_date = parse_end_date('2025-03-21T12:00:00Z')
        assert end_date == datetime(2025, 3, 21, 12, 0, 0, tzinfo=timezone.utc)

    def test_invalid_end_date_is_ignored(self):
        assert parse_end_date('next tuesday') is None


class TestNotifierConfigFromEnv:
    """Test cases for NotifierConfig.from_env."""

    @pytest.fixture
    def environ(self):
        return {
            'GITHUB_TOKEN': 'test_token',
            'GITHUB_REPOSITORY': 'octo/repo',
            'DISCORD_WEBHOOK': 'https://discord.example/api/webhooks/1/abc',
            'DISCORD_MENTION': json.dumps({'alice': '111'}),
            'COLLABORATORS': json.dumps({'carol': 'carol'}),
            'GITHUB_EVENT_NAME': 'pull_request',
            'GITHUB_EVENT_PATH': '/tmp/event.json',
            'MESSAGE_LANGUAGE': 'Korean',
            'REMINDER_END_DATE': '2025-03-21',
        }

    def test_reads_all_values(self, environ):
        config = NotifierConfig.from_env(environ)

        assert config.github_token == 'test_token'
        assert config.repository == 'octo/repo'
        assert config.owner == 'octo'
        assert config.webhook_url.startswith('https://discord.example')
        assert config.mentions.mention('alice') == '<@111>'
        assert config.reviewer_map == {'carol': ['carol']}
        assert config.event_name == 'pull_request'
        assert config.event_path == '/tmp/event.json'
        assert config.default_branch == 'main'
        assert config.language == 'korean'
        assert config.reminder_end_date.year == 2025

    def test_malformed_mentions_degrade_to_empty(self, environ):
        environ['DISCORD_MENTION'] = '{"alice": '
        config = NotifierConfig.from_env(environ)
        assert len(config.mentions) == 0

    def test_invalid_language_falls_back_to_english(self, environ):
        environ['MESSAGE_LANGUAGE'] = 'klingon'
        assert NotifierConfig.from_env(environ).language == 'english'

    def test_empty_environment(self):
        config = NotifierConfig.from_env({})
        assert config.github_token is None
        assert config.reviewer_map == {}
        assert config.reminder_end_date is None

    def test_loads_dotenv_when_reading_os_environ(self):
        with patch('review_notifier.config.load_dotenv') as mock_load:
            NotifierConfig.from_env()
        mock_load.assert_called_once()

    def test_explicit_environ_skips_dotenv(self, environ):
        with patch('review_notifier.config.load_dotenv') as mock_load:
            NotifierConfig.from_env(environ)
        mock_load.assert_not_called()


class TestRequire:
    """Test cases for required field validation."""

    def test_all_present(self, config):
        config.require('github_token', 'repository', 'webhook_url', 'reviewer_map')

    def test_missing_fields_are_listed(self):
        config = NotifierConfig(repository='octo/repo')
        with pytest.raises(ConfigurationError) as exc_info:
            config.require('github_token', 'repository', 'webhook_url')

        assert exc_info.value.missing == ['GITHUB_TOKEN', 'DISCORD_WEBHOOK']
        assert 'GITHUB_TOKEN, DISCORD_WEBHOOK' in str(exc_info.value)

    def test_empty_reviewer_map_is_missing(self):
        with pytest.raises(ConfigurationError, match='COLLABORATORS'):
            NotifierConfig().require('reviewer_map')


class TestReminderExpiry:
    """Test cases for the reminder end date."""

    def test_no_end_date_never_expires(self):
        assert NotifierConfig().reminders_expired() is False

    def test_before_and_after_end_date(self):
        config = NotifierConfig(reminder_end_date=datetime(2025, 3, 21, 23, 59, 59, tzinfo=timezone.utc))
        assert config.reminders_expired(datetime(2025, 3, 21, 12, 0, tzinfo=timezone.utc)) is False
        assert config.reminders_expired(datetime(2025, 3, 22, 0, 0, tzinfo=timezone.utc)) is True


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
