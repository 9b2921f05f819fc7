"""Binding collection for single nodes and node subtrees."""

from .bindings import BindingCollector, BINDABLE_PROPERTIES
from .tree import TreeAggregator

__all__ = [
    "BindingCollector",
    "BINDABLE_PROPERTIES",
    "TreeAggregator",
]
