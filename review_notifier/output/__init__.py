"""Chat message output."""

from .formatter_base import MessageFormatter

__all__ = ['MessageFormatter']
