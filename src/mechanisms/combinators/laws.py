"""Executable algebraic law checks for preferences and their combinators.

The checks are exhaustive over a finite, caller-supplied list of
alternatives. Nothing in the library calls them implicitly; they are
meant for tests of user-defined comparators and combinators.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import product
from typing import TypeVar

from mechanisms.kernel import Preference

A = TypeVar("A")

Combine = Callable[[Preference[A], Preference[A]], Preference[A]]


def is_total_preorder(preference: Preference[A], alternatives: Sequence[A]) -> bool:
    """Check reflexivity, sign anti-symmetry and transitivity."""
    for a in alternatives:
        if preference.compare(a, a) != 0:
            return False

    for a, b in product(alternatives, repeat=2):
        if preference.compare(a, b) != -preference.compare(b, a):
            return False

    for a, b, c in product(alternatives, repeat=3):
        if preference.compare(a, b) >= 0 and preference.compare(b, c) >= 0:
            if preference.compare(a, c) < 0:
                return False
    return True


def equivalent(p: Preference[A], q: Preference[A], alternatives: Sequence[A]) -> bool:
    """Check that ``p`` and ``q`` agree on every pair of alternatives."""
    return all(
        p.compare(a, b) == q.compare(a, b)
        for a, b in product(alternatives, repeat=2)
    )


def is_associative(
    combine: Combine[A],
    p: Preference[A],
    q: Preference[A],
    r: Preference[A],
    alternatives: Sequence[A],
) -> bool:
    """combine(combine(p, q), r) == combine(p, combine(q, r))"""
    left = combine(combine(p, q), r)
    right = combine(p, combine(q, r))
    return equivalent(left, right, alternatives)


def is_identity(
    combine: Combine[A],
    identity: Preference[A],
    p: Preference[A],
    alternatives: Sequence[A],
) -> bool:
    """combine(identity, p) == p == combine(p, identity)"""
    return equivalent(combine(identity, p), p, alternatives) and equivalent(
        combine(p, identity), p, alternatives
    )
