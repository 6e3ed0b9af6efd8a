"""Helpers for running inside a GitHub Actions job."""

import json
import logging
import sys
from typing import Dict

from .exceptions import ConfigurationError


def load_event_payload(event_path: str) -> Dict:
    """Read the webhook payload the runner stored at GITHUB_EVENT_PATH.

    Raises:
        ConfigurationError: If the file is missing or not valid JSON
    """
    if not event_path:
        raise ConfigurationError("Missing required configuration: GITHUB_EVENT_PATH",
                                 missing=['GITHUB_EVENT_PATH'])
    try:
        with open(event_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read event payload from {event_path}: {e}") from e


def escape_command_value(value: str) -> str:
    """Escape a workflow command message the way the runner expects."""
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def set_failed(message: str) -> None:
    """Mark the job as failed with an error annotation and exit with status 1."""
    logging.error(message)
    print(f"::error::{escape_command_value(message)}")
    sys.exit(1)
