"""Combinator primitives: when_equal, indifferent, reverse, from_key, from_ranking."""

# Preferences under when_equal form a monoid:
#
# 1. Associativity: when_equal(when_equal(p, q), r) == when_equal(p, when_equal(q, r))
#    Priority order is all that matters, not grouping
#
# 2. Identity: when_equal(indifferent(), p) == when_equal(p, indifferent()) == p
#    The all-indifferent preference never breaks a tie nor overrides one
#
# 3. Involution: reverse(reverse(p)) == p

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from mechanisms.kernel import Preference

A = TypeVar("A")
H = TypeVar("H", bound=Hashable)


def when_equal(first: Preference[A], second: Preference[A]) -> Preference[A]:
    """Break the ties of ``first`` with ``second``.

    Semantics:
        - If ``first`` has a strict opinion on a pair, it wins
        - Otherwise ``second`` decides

    Args:
        first: Preference with absolute priority.
        second: Preference consulted only when ``first`` is indifferent.

    Returns:
        Preference[A]: The lexicographic combination of both.
    """
    def _compare(a1: A, a2: A) -> int:
        result = first.compare(a1, a2)
        if result != 0:
            return result
        return second.compare(a1, a2)

    return Preference(_compare=_compare)


def indifferent() -> Preference[Any]:
    """Return the preference that is indifferent between every pair."""
    return Preference(_compare=lambda a1, a2: 0)


def reverse(preference: Preference[A]) -> Preference[A]:
    """Turn ``preference`` upside down: best becomes worst."""
    return Preference(_compare=lambda a1, a2: preference.compare(a2, a1))


def from_key(key: Callable[[A], Any]) -> Preference[A]:
    """Prefer alternatives with a larger ``key``.

    Only ``<`` and ``>`` are used on key values, so any sortable key
    works (numbers, strings, tuples).
    """
    def _compare(a1: A, a2: A) -> int:
        k1, k2 = key(a1), key(a2)
        if k1 > k2:
            return 1
        if k1 < k2:
            return -1
        return 0

    return Preference(_compare=_compare)


def from_ranking(ranking: Sequence[H]) -> Preference[H]:
    """Build a strict preference from a best-first ranking.

    Alternatives absent from ``ranking`` are mutually indifferent and
    rank below every listed alternative, so ``from_ranking([x])``
    behaves like ``particular(x)``.

    Raises:
        ValueError: If ``ranking`` lists an alternative twice
    """
    positions: dict[H, int] = {}
    for position, alternative in enumerate(ranking):
        if alternative in positions:
            raise ValueError(f"Alternative {alternative!r} appears more than once in ranking")
        positions[alternative] = position

    unlisted = len(positions)

    def _compare(a1: H, a2: H) -> int:
        # Lower position means more preferred
        return positions.get(a2, unlisted) - positions.get(a1, unlisted)

    return Preference(_compare=_compare)
