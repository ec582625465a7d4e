"""Keyword-based transaction categorization.

Categories are assigned from the user-maintained keyword table: a rule
matches when its keyword occurs anywhere in the transaction description,
ignoring case. Rules are evaluated in order and the first match wins, so an
earlier "Electric" rule shadows a later "Electricity" one. There is no
priority or specificity tie-break.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID


class KeywordRuleLike(Protocol):
    keyword: str
    category_id: UUID


def _norm(text: str | None) -> str:
    return (text or "").casefold()


def matches(keyword: str, description: str | None) -> bool:
    """True if ``keyword`` is a case-insensitive substring of ``description``."""
    needle = _norm(keyword)
    return bool(needle) and needle in _norm(description)


def find_rule(
    description: str | None, rules: Iterable[KeywordRuleLike]
) -> KeywordRuleLike | None:
    """Return the first rule matching the description, if any."""
    if not description:
        return None
    for rule in rules:
        if matches(rule.keyword, description):
            return rule
    return None


def categorize(
    description: str | None, rules: Iterable[KeywordRuleLike]
) -> UUID | None:
    """Infer a category id from the transaction description.

    Args:
        description: Free-text transaction description.
        rules: Keyword rules in evaluation order.

    Returns:
        The category id of the first matching rule, or None when the
        description is empty or nothing matches.
    """
    rule = find_rule(description, rules)
    return rule.category_id if rule is not None else None
