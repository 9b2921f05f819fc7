"""
Subtree binding aggregation.

Merges the bindings of a node and all of its descendants, depth-first
pre-order, without de-duplication.
"""

import asyncio
import logging
from typing import List

from varbind.model import Node
from .bindings import BindingCollector, BindingMap


logger = logging.getLogger(__name__)


class TreeAggregator:
    """Aggregates binding collections over a node subtree."""

    def __init__(self, collector: BindingCollector):
        self.collector = collector

    async def collect_all(self, node: Node) -> BindingMap:
        """
        Collect the bindings of a node and its descendants.

        Nodes are collected concurrently and merged in pre-order, so each
        property list holds the node's own entries first, then those of
        each child subtree in child order.

        Args:
            node: Subtree root

        Returns:
            Property name to merged entries
        """
        nodes = self.walk(node)
        logger.debug(f"Collecting bindings from {len(nodes)} node(s) under '{node.name}'")

        collected = await asyncio.gather(*(self.collector.collect(n) for n in nodes))

        merged: BindingMap = {}
        for bindings in collected:
            for prop, entries in bindings.items():
                merged.setdefault(prop, []).extend(entries)
        return merged

    @staticmethod
    def walk(node: Node) -> List[Node]:
        """List a subtree in depth-first pre-order without recursion."""
        ordered: List[Node] = []
        stack = [node]
        while stack:
            current = stack.pop()
            ordered.append(current)
            if current.children:
                stack.extend(reversed(current.children))
        return ordered
