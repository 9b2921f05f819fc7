"""
Per-node binding collection.

Reads the bindable properties of a single node (and the styled segments of
text nodes) and resolves each bound variable to a display entry.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from varbind.model import Node, ResolvedBinding, VariableAlias
from varbind.resolve.alias import AliasResolver, UNKNOWN


logger = logging.getLogger(__name__)

# Properties inspected on every node, in report order
BINDABLE_PROPERTIES = [
    'width',
    'height',
    'fills',
    'strokes',
    'opacity',
    'cornerRadius',
    'itemSpacing',
    'paddingLeft',
    'paddingRight',
    'paddingTop',
    'paddingBottom',
    'fontFamily',
    'fontStyle',
    'fontWeight',
    'lineHeight',
    'letterSpacing',
    'paragraphSpacing',
    'paragraphIndent',
]

BindingMap = Dict[str, List[ResolvedBinding]]


class BindingCollector:
    """Collects resolved bindings of one node."""

    def __init__(self, resolver: AliasResolver, properties: Optional[List[str]] = None):
        self.resolver = resolver
        self.properties = list(properties) if properties is not None else list(BINDABLE_PROPERTIES)

    async def collect(self, node: Node) -> BindingMap:
        """
        Collect the node's bindings.

        Args:
            node: Node to inspect

        Returns:
            Property name to resolved entries. Allow-listed properties
            come first in allow-list order, even when only a text segment
            binds them; other segment properties follow in the order they
            were met.
        """
        result: BindingMap = {}
        bound = node.bound_variables or {}

        for prop in self.properties:
            aliases = self._aliases(bound.get(prop))
            if not aliases:
                continue
            entries = await asyncio.gather(
                *(self.resolve_binding(alias, node) for alias in aliases)
            )
            result[prop] = list(entries)

        if node.is_text:
            for segment in node.text_segments:
                segment_range = (segment.start, segment.end)
                for prop, binding in (segment.bound_variables or {}).items():
                    if not isinstance(binding, VariableAlias):
                        continue
                    entry = await self.resolve_binding(binding, node, segment_range)
                    result.setdefault(prop, []).append(entry)

        return self._ordered(result)

    async def resolve_binding(
        self,
        alias: VariableAlias,
        node: Node,
        segment_range: Optional[Tuple[int, int]] = None
    ) -> ResolvedBinding:
        """
        Resolve one binding to an entry.

        A dangling variable id yields an 'Unknown'/'Unknown' entry. When
        the node's mode cannot be resolved the first-mode value is used.
        """
        variable = await self.resolver.lookup(alias.id)
        if variable is None:
            logger.warning(f"Node '{node.name}' is bound to missing variable '{alias.id}'")
            return ResolvedBinding(name=UNKNOWN, value=UNKNOWN, range=segment_range)

        value = await self.resolver.resolve(variable, node)
        return ResolvedBinding(name=variable.name, value=value, range=segment_range)

    def _ordered(self, result: BindingMap) -> BindingMap:
        """Reorder a binding map to allow-list order, extras last."""
        ordered: BindingMap = {prop: result[prop] for prop in self.properties if prop in result}
        for prop, entries in result.items():
            if prop not in ordered:
                ordered[prop] = entries
        return ordered

    @staticmethod
    def _aliases(binding: Any) -> List[VariableAlias]:
        """Normalize a single binding or a sequence of them to a list."""
        if isinstance(binding, VariableAlias):
            return [binding]
        if isinstance(binding, (list, tuple)):
            return [b for b in binding if isinstance(b, VariableAlias)]
        return []
