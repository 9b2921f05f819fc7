"""
Data model for design documents.

Defines the read-only node tree, variables and their tagged values, and the
resolved binding entries produced by the collectors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


ALIAS_TYPE = "VARIABLE_ALIAS"
TEXT_NODE_TYPE = "TEXT"


class ResolvedType(str, Enum):
    """Type a variable resolves to, independent of mode."""
    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


@dataclass(frozen=True)
class Color:
    """
    RGBA color record with channels in [0, 1].

    Attributes:
        r, g, b: Color channels
        a: Alpha channel, None for an RGB-only record (treated as opaque)
    """
    r: float
    g: float
    b: float
    a: Optional[float] = None

    @property
    def alpha(self) -> float:
        """Alpha channel with RGB-only records treated as opaque."""
        return 1 if self.a is None else self.a


@dataclass(frozen=True)
class VariableAlias:
    """Reference to another variable by id."""
    id: str
    type: str = ALIAS_TYPE


# A value is exactly one of these shapes
VariableValue = Union[bool, int, float, str, Color, VariableAlias]

# A property binds either one variable or an ordered sequence of them
Binding = Union[VariableAlias, List[VariableAlias]]


@dataclass
class Variable:
    """
    Named, typed, mode-dependent value.

    Attributes:
        id: Stable variable identifier
        name: Display name following the 'group/subgroup/leaf' convention
        resolved_type: Type of the resolved value
        values_by_mode: Ordered mapping of mode id to value; the first
            entry is the variable's first mode
    """
    id: str
    name: str
    resolved_type: ResolvedType
    values_by_mode: Dict[str, VariableValue] = field(default_factory=dict)

    def first_mode_value(self) -> Optional[VariableValue]:
        """Value of the first declared mode, or None without modes."""
        for value in self.values_by_mode.values():
            return value
        return None

    def first_mode_id(self) -> Optional[str]:
        """Id of the first declared mode, or None without modes."""
        for mode_id in self.values_by_mode:
            return mode_id
        return None


@dataclass
class TextSegment:
    """Styled range of a text node with its own bindings."""
    start: int
    end: int
    bound_variables: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Node:
    """
    Element of a design document tree.

    Attributes:
        id: Node identifier
        name: Display name
        type: Node type tag (FRAME, TEXT, RECTANGLE, ...)
        children: Child nodes, None for leaf node types
        bound_variables: Property name to binding
        resolved_variable_modes: Collection id to the mode id in effect
        text_segments: Styled segments, TEXT nodes only
    """
    id: str
    name: str
    type: str
    children: Optional[List["Node"]] = None
    bound_variables: Optional[Dict[str, Binding]] = None
    resolved_variable_modes: Dict[str, str] = field(default_factory=dict)
    text_segments: List[TextSegment] = field(default_factory=list)

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_NODE_TYPE


@dataclass
class ResolvedBinding:
    """
    Output unit of binding collection.

    Attributes:
        name: Variable display name, or 'Unknown'
        value: Formatted value, or 'Unknown'
        range: Character range [start, end) for text segment bindings
    """
    name: str
    value: str
    range: Optional[Tuple[int, int]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, omitting the range when absent."""
        result: Dict[str, Any] = {"name": self.name, "value": self.value}
        if self.range is not None:
            result["range"] = list(self.range)
        return result
