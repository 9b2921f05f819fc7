"""
Alias resolution.

Follows alias chains from a bound variable to a concrete value, either in the
mode a node actually uses or in each variable's first mode.
"""

import logging
from typing import Optional, Set

from varbind.exceptions import VariableLookupError
from varbind.formatting import format_value
from varbind.model import Node, Variable, VariableAlias, VariableValue
from varbind.store import VariableStore


logger = logging.getLogger(__name__)

UNKNOWN = 'Unknown'


class AliasResolver:
    """
    Resolves variables to formatted values through a variable store.

    Failures (dangling ids, missing mode keys, alias cycles) are reported
    as the UNKNOWN sentinel rather than raised.
    """

    def __init__(self, store: VariableStore):
        self.store = store

    async def resolve_for_context(self, variable: Variable, node: Node) -> str:
        """
        Resolve a variable in the mode the node evaluates it in.

        The mode id chosen for the bound variable is carried unchanged
        through every alias hop.

        Args:
            variable: Bound variable
            node: Node the binding belongs to

        Returns:
            Formatted terminal value or UNKNOWN
        """
        mode_id = self.select_mode(variable, node)
        if mode_id is None:
            return UNKNOWN

        value: Optional[VariableValue] = variable.values_by_mode.get(mode_id)
        visited: Set[str] = {variable.id}

        while isinstance(value, VariableAlias):
            alias_variable = await self._follow(value, visited)
            if alias_variable is None:
                return UNKNOWN
            value = alias_variable.values_by_mode.get(mode_id)

        if value is None:
            logger.debug(f"Mode '{mode_id}' missing along alias chain of '{variable.name}'")
            return UNKNOWN

        return format_value(variable.resolved_type, value)

    async def resolve_first_mode(self, variable: Variable) -> str:
        """
        Resolve a variable ignoring node context.

        Every hop uses the first mode of the variable being visited.

        Returns:
            Formatted terminal value or UNKNOWN
        """
        value = variable.first_mode_value()
        visited: Set[str] = {variable.id}

        while isinstance(value, VariableAlias):
            alias_variable = await self._follow(value, visited)
            if alias_variable is None:
                return UNKNOWN
            value = alias_variable.first_mode_value()

        if value is None:
            return UNKNOWN

        return format_value(variable.resolved_type, value)

    async def resolve(self, variable: Variable, node: Node) -> str:
        """Resolve in context, falling back to first modes on failure."""
        value = await self.resolve_for_context(variable, node)
        if value == UNKNOWN:
            value = await self.resolve_first_mode(variable)
            logger.debug(f"Fallback resolution of '{variable.name}' gave {value}")
        return value

    @staticmethod
    def select_mode(variable: Variable, node: Node) -> Optional[str]:
        """
        Pick the mode id to evaluate a variable in.

        The node maps collection ids to mode ids; the first of those mode
        ids that the variable defines wins. Otherwise the variable's first
        mode is used.
        """
        for mode_id in node.resolved_variable_modes.values():
            if mode_id in variable.values_by_mode:
                return mode_id
        return variable.first_mode_id()

    async def lookup(self, variable_id: str) -> Optional[Variable]:
        """Look up a variable, treating failed lookups as dangling ids."""
        try:
            return await self.store.get_variable_by_id(variable_id)
        except VariableLookupError as e:
            logger.warning(str(e))
            return None

    async def _follow(self, alias: VariableAlias, visited: Set[str]) -> Optional[Variable]:
        """Fetch the target of one alias hop, or None if the chain fails."""
        if alias.id in visited:
            logger.warning(f"Alias cycle detected at variable '{alias.id}'")
            return None
        visited.add(alias.id)

        target = await self.lookup(alias.id)
        if target is None:
            logger.warning(f"Alias points to missing variable '{alias.id}'")
        return target
