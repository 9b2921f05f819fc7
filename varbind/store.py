"""
Variable store boundary.

The host owns the variables; the engine only looks them up by id and
enumerates them. Lookups are asynchronous.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from .model import Variable


logger = logging.getLogger(__name__)


class VariableStore(ABC):
    """Read-only, asynchronous view of a document's variables."""

    @abstractmethod
    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        """
        Look up a variable by id.

        Returns:
            The variable, or None when the id is dangling

        Raises:
            VariableLookupError: If the lookup itself fails
        """

    @abstractmethod
    async def get_local_variables(self) -> List[Variable]:
        """Enumerate every variable defined in the document, in order."""


class InMemoryVariableStore(VariableStore):
    """Variable store backed by a document snapshot."""

    def __init__(self, variables: Iterable[Variable]):
        self._variables: List[Variable] = list(variables)
        self._by_id: Dict[str, Variable] = {v.id: v for v in self._variables}
        self.lookup_count = 0

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        self.lookup_count += 1
        variable = self._by_id.get(variable_id)
        if variable is None:
            logger.debug(f"Variable not found: {variable_id}")
        return variable

    async def get_local_variables(self) -> List[Variable]:
        self.lookup_count += 1
        return list(self._variables)

    def __len__(self) -> int:
        return len(self._variables)
