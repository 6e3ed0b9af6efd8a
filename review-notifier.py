#!/usr/bin/env python3
"""
PR Review Notifier
Posts pull request review status reminders to a Discord channel from GitHub Actions.
"""

from review_notifier.cli import main


if __name__ == "__main__":
    main()
