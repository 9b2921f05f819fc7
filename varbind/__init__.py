"""Design-variable binding inspector."""

from .loader import Document, DocumentLoader
from .report import GlobalVariableReporter, NO_SELECTION, build_selection_report
from .session import ReportSession
from .store import InMemoryVariableStore, VariableStore

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentLoader",
    "GlobalVariableReporter",
    "NO_SELECTION",
    "build_selection_report",
    "ReportSession",
    "InMemoryVariableStore",
    "VariableStore",
]
