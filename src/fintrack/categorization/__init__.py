"""Transaction categorization utilities.

Deterministic, rule-based categorization of transactions from their
descriptions using the global keyword table.
"""

from .rules import categorize, find_rule

__all__ = ["categorize", "find_rule"]
