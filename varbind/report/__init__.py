"""Selection and document-wide reports."""

from .selection import (
    NO_SELECTION,
    NoSelection,
    SelectionReport,
    build_selection_report,
    flatten_bindings,
)
from .variables import GlobalVariableReporter, VariableReport, parse_variable_name

__all__ = [
    "NO_SELECTION",
    "NoSelection",
    "SelectionReport",
    "build_selection_report",
    "flatten_bindings",
    "GlobalVariableReporter",
    "VariableReport",
    "parse_variable_name",
]
