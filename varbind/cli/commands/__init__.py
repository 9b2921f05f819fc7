"""CLI command handlers."""

from .selection import inspect_selection
from .variables import list_variables

__all__ = ['inspect_selection', 'list_variables']
