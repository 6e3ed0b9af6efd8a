"""Review notifier."""

from .core import ReviewNotifier, HANDLED_PR_ACTIONS

__all__ = ['ReviewNotifier', 'HANDLED_PR_ACTIONS']
