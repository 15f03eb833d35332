"""
In-memory triple store with logarithmic wildcard query and removal.

Provides the Fact value type and the three-way indexed TripleStore.
"""

from triplestore.engine import TripleStore
from triplestore.exceptions import InvalidArgumentError
from triplestore.fact import Fact, FactFactory, Ordering

__all__ = ["Fact", "FactFactory", "InvalidArgumentError", "Ordering", "TripleStore"]
