"""Preference - the core ordinal comparison abstraction."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from mechanisms.kernel.errors import EmptyAlternativesError

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
H = TypeVar("H", bound=Hashable)

Sign = Literal[-1, 0, 1]

_MISSING: Any = object()


def sign(value: int) -> Sign:
    """Collapse an arbitrary comparison result to -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass(frozen=True)
class Preference(Generic[A]):
    """An agent's preferences over alternatives of type ``A``.

    The only primitive is ``compare``; every other operation is derived
    from it, so any preference, however it was built, gets ``ordering``,
    ``most_preferred``, ``rank`` and ``weakly_prefers`` for free.

    The sign of ``compare(a1, a2)`` means:
    - negative if ``a2`` is preferred to ``a1``
    - positive if ``a1`` is preferred to ``a2``
    - zero if indifferent between ``a1`` and ``a2``

    The wrapped function must describe a total preorder (reflexive and
    transitive, with anti-symmetric signs). This is the caller's
    obligation; it is never checked here and derived operations are
    unspecified for inconsistent comparators. See
    ``mechanisms.combinators.laws`` for opt-in checks.
    """

    _compare: Callable[[A, A], int]

    @staticmethod
    def of(fn: Callable[[A, A], int]) -> Preference[A]:
        """Create a Preference from a three-valued comparison function."""
        return Preference(_compare=fn)

    def compare(self, a1: A, a2: A) -> Sign:
        """Return -1, 0 or 1 according to how ``a1`` compares to ``a2``."""
        return sign(self._compare(a1, a2))

    def __call__(self, a1: A, a2: A) -> Sign:
        return self.compare(a1, a2)

    def ordering(self) -> Callable[[A], Any]:
        """Return a sort key exposing ``compare`` as a total-order comparator.

        The key sorts ascending, least preferred first, and is accepted by
        ``sorted``, ``min``, ``max`` and friends.
        """
        return functools.cmp_to_key(self.compare)

    def sorted(self, alternatives: Iterable[A]) -> list[A]:
        """Sort alternatives from least to most preferred (stable)."""
        return sorted(alternatives, key=self.ordering())

    def most_preferred(self, alternatives: Iterable[A]) -> A:
        """Return a maximal element of ``alternatives``.

        When several alternatives are tied for best, the first of them
        encountered is returned.

        Raises:
            EmptyAlternativesError: If ``alternatives`` is empty
        """
        best = max(alternatives, key=self.ordering(), default=_MISSING)
        if best is _MISSING:
            logger.debug("most_preferred called with no alternatives")
            raise EmptyAlternativesError("most_preferred")
        return best

    def rank(self, alternatives: Iterable[H]) -> dict[H, int]:
        """Compute a dense, 0-based rank for each distinct alternative.

        Ranks grow with preference: the least preferred alternative gets
        0 and the most preferred gets ``k - 1`` where ``k`` is the number
        of equivalence classes under ``compare``.

        Alternatives that compare as indifferent collapse to a single
        entry, so not every input alternative is guaranteed a key in the
        result. Which member of an equivalence class survives is
        unspecified.
        """
        distinct: list[H] = []
        for alternative in self.sorted(alternatives):
            if distinct and self.compare(distinct[-1], alternative) == 0:
                continue
            distinct.append(alternative)
        return {alternative: index for index, alternative in enumerate(distinct)}

    def weakly_prefers(self, a1: A, a2: A) -> A:
        """Return ``a1`` if ``a1`` is weakly preferred to ``a2``; otherwise ``a2``."""
        return a1 if self.compare(a1, a2) >= 0 else a2

    def strictly_prefers(self, a1: A, a2: A) -> bool:
        return self.compare(a1, a2) > 0

    def indifferent(self, a1: A, a2: A) -> bool:
        return self.compare(a1, a2) == 0

    def contramap(self, f: Callable[[B], A]) -> Preference[B]:
        """Reuse this preference over another alternative type. See ``contramap``."""
        return contramap(self, f)


def contramap(preference: Preference[A], f: Callable[[B], A]) -> Preference[B]:
    """Derive a preference over ``B`` from a preference over ``A``.

    The derived preference compares ``b1`` and ``b2`` exactly as
    ``preference`` compares ``f(b1)`` and ``f(b2)``.

    Args:
        preference: The preference to reuse
        f: Mapping from the new alternative type into the old one

    Returns:
        Preference over ``B``
    """
    def _compare(b1: B, b2: B) -> int:
        return preference.compare(f(b1), f(b2))

    return Preference(_compare=_compare)


def particular(alternative: A) -> Preference[A]:
    """Define a preference for one particular alternative.

    ``alternative`` strictly dominates every other alternative; all the
    others are mutually indifferent. Building block for dictatorship-style
    preferences.
    """
    def _compare(a1: A, a2: A) -> int:
        if a1 != alternative and a2 == alternative:
            return -1
        if a1 == alternative and a2 != alternative:
            return 1
        return 0

    return Preference(_compare=_compare)
