"""
Document-wide variable report.

One row per variable with its group/name split, first-mode value (one alias
hop) and the number of variables that alias it directly.
"""

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from varbind.formatting import format_value
from varbind.model import Variable, VariableAlias
from varbind.resolve.alias import AliasResolver, UNKNOWN
from varbind.store import VariableStore


logger = logging.getLogger(__name__)


@dataclass
class VariableReport:
    """Report row for one variable."""
    id: str
    group: str
    name: str
    type: str
    value: str
    is_alias: bool
    usage_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "group": self.group,
            "name": self.name,
            "type": self.type,
            "value": self.value,
            "alias": "Yes" if self.is_alias else "No",
            "usageCount": self.usage_count,
        }


def parse_variable_name(variable_name: str) -> Tuple[str, str]:
    """
    Split a 'group/.../leaf' name into (group, name).

    Names without a slash belong to the 'Unknown' group.
    """
    parts = variable_name.split('/')
    if len(parts) == 1:
        return UNKNOWN, parts[0]
    return '/'.join(parts[:-1]), parts[-1]


def count_alias_usage(variables: List[Variable]) -> Counter:
    """Count, per variable id, the other variables whose first mode aliases it."""
    usage: Counter = Counter()
    for variable in variables:
        value = variable.first_mode_value()
        if isinstance(value, VariableAlias) and value.id != variable.id:
            usage[value.id] += 1
    return usage


class GlobalVariableReporter:
    """Builds the document-wide variable report."""

    def __init__(self, store: VariableStore):
        self.store = store
        self.resolver = AliasResolver(store)

    async def report_all(self, variables: Optional[List[Variable]] = None) -> List[VariableReport]:
        """
        Report every variable, preserving input order.

        Args:
            variables: Variables to report; defaults to all variables
                in the store

        Returns:
            One VariableReport per variable
        """
        if variables is None:
            variables = await self.store.get_local_variables()

        usage = count_alias_usage(variables)
        rows = await asyncio.gather(*(self._report(v, usage) for v in variables))
        logger.debug(f"Reported {len(rows)} variable(s)")
        return list(rows)

    async def _report(self, variable: Variable, usage: Counter) -> VariableReport:
        group, name = parse_variable_name(variable.name)
        value = variable.first_mode_value()
        is_alias = isinstance(value, VariableAlias)

        if value is None:
            formatted = UNKNOWN
        elif isinstance(value, VariableAlias):
            formatted = await self._resolve_one_hop(variable, value)
        else:
            formatted = format_value(variable.resolved_type, value)

        return VariableReport(
            id=variable.id,
            group=group,
            name=name,
            type=variable.resolved_type.value,
            value=formatted,
            is_alias=is_alias,
            usage_count=usage.get(variable.id, 0),
        )

    async def _resolve_one_hop(self, variable: Variable, alias: VariableAlias) -> str:
        """Format the aliased variable's first-mode value without chasing further."""
        target = await self.resolver.lookup(alias.id)
        if target is None:
            return UNKNOWN
        target_value = target.first_mode_value()
        if target_value is None or isinstance(target_value, VariableAlias):
            return UNKNOWN
        return format_value(variable.resolved_type, target_value)
