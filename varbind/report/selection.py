"""
Per-selection binding report.

Builds the flattened report for a single selected node, or signals that
there is nothing to report.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from varbind.collect.bindings import BindingCollector, BindingMap
from varbind.collect.tree import TreeAggregator
from varbind.model import Node
from varbind.resolve.alias import AliasResolver
from varbind.store import VariableStore


logger = logging.getLogger(__name__)


class NoSelection:
    """Signal for a selection that is empty or holds several nodes."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "no-selection"}

    def __repr__(self) -> str:
        return "NO_SELECTION"


NO_SELECTION = NoSelection()


@dataclass
class SelectionReport:
    """Bindings of a selected node and its subtree, one row per entry."""
    name: str
    bound_variables: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "boundVariables": self.bound_variables}


def flatten_bindings(bindings: BindingMap) -> List[Dict[str, Any]]:
    """Flatten a property map to rows of {property, name, value[, range]}."""
    rows = []
    for prop, entries in bindings.items():
        for entry in entries:
            row: Dict[str, Any] = {"property": prop}
            row.update(entry.to_dict())
            rows.append(row)
    return rows


async def build_selection_report(
    selection: Sequence[Node],
    store: VariableStore
) -> Union[SelectionReport, NoSelection]:
    """
    Resolve the bindings of a one-node selection.

    Args:
        selection: Currently selected nodes
        store: Variable store to resolve against

    Returns:
        SelectionReport, or NO_SELECTION when the selection does not hold
        exactly one node (no lookups are made in that case)
    """
    if len(selection) != 1:
        logger.debug(f"Selection holds {len(selection)} node(s), nothing to resolve")
        return NO_SELECTION

    node = selection[0]
    aggregator = TreeAggregator(BindingCollector(AliasResolver(store)))
    bindings = await aggregator.collect_all(node)
    return SelectionReport(name=node.name, bound_variables=flatten_bindings(bindings))
