"""
Report session for a host UI.

Turns selection changes into messages for a rendering surface. Each
selection change starts a new pass; a pass that has been superseded by the
time it finishes posts nothing.
"""

import logging
from typing import Any, Callable, Dict, List, Sequence

from varbind.model import Node
from varbind.report.selection import NoSelection, build_selection_report
from varbind.report.variables import GlobalVariableReporter
from varbind.store import VariableStore


logger = logging.getLogger(__name__)

Message = Dict[str, Any]


class ReportSession:
    """
    Posts binding and variable reports to a message sink.

    Messages:
    - {'type': 'no-selection'}
    - {'type': 'selected-component', 'data': {'name', 'boundVariables'}}
    - {'type': 'variables', 'variables': [...]}
    """

    def __init__(self, store: VariableStore, post_message: Callable[[Message], None]):
        self.store = store
        self.post_message = post_message
        self._generation = 0

    async def handle_selection_change(self, selection: Sequence[Node]) -> bool:
        """
        Report on a new selection.

        Args:
            selection: Nodes selected after the change

        Returns:
            True if a message was posted, False if the pass was superseded
        """
        self._generation += 1
        generation = self._generation

        report = await build_selection_report(selection, self.store)

        if generation != self._generation:
            logger.debug(f"Dropping superseded selection pass {generation}")
            return False

        if isinstance(report, NoSelection):
            self.post_message(report.to_dict())
        else:
            self.post_message({"type": "selected-component", "data": report.to_dict()})
        return True

    async def publish_variables(self) -> List[Message]:
        """Post the document-wide variable report and return its rows."""
        rows = await GlobalVariableReporter(self.store).report_all()
        variables = [row.to_dict() for row in rows]
        self.post_message({"type": "variables", "variables": variables})
        return variables
