"""
Alias resolution module.
Resolves bound variables to concrete values across modes and alias chains.
"""

from .alias import AliasResolver, UNKNOWN

__all__ = ['AliasResolver', 'UNKNOWN']
