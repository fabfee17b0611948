"""Social welfare functions - aggregate individual preferences into one."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from mechanisms.combinators.ops import when_equal
from mechanisms.kernel import (
    EmptyAlternativesError,
    EmptyProfileError,
    Preference,
    Trace,
)

logger = logging.getLogger(__name__)

A = TypeVar("A")
H = TypeVar("H", bound=Hashable)

Combine = Callable[[Preference[A], Preference[A]], Preference[A]]
Aggregate = Callable[[Sequence[Preference[A]], Trace | None, int | None], Preference[A]]


@dataclass(frozen=True)
class SocialWelfareFunction(Generic[A]):
    """A rule mapping a non-empty collection of preferences to one preference.

    Instances are stateless strategy objects: build once, apply many
    times, share freely.

    Attributes:
        strategy: Human-readable name of the aggregation rule.
    """

    strategy: str
    _aggregate: Aggregate[A]

    def __call__(
        self,
        preferences: Iterable[Preference[A]],
        trace: Trace | None = None,
    ) -> Preference[A]:
        """Aggregate ``preferences`` into a single collective preference.

        Args:
            preferences: Individual preferences, in priority order where
                the strategy cares about order
            trace: Optional trace receiving aggregate_begin, combine and
                aggregate_end events

        Returns:
            The collective preference

        Raises:
            EmptyProfileError: If ``preferences`` is empty
        """
        profile = list(preferences)
        if not profile:
            logger.debug("%s aggregation called with no preferences", self.strategy)
            raise EmptyProfileError(self.strategy)

        logger.debug("aggregating %d preferences with %s", len(profile), self.strategy)

        begin_id: int | None = None
        if trace is not None:
            begin_id = trace.record(
                "aggregate_begin",
                info={"strategy": self.strategy, "size": len(profile)},
            )

        result = self._aggregate(profile, trace, begin_id)

        if trace is not None:
            trace.record("aggregate_end", info={"strategy": self.strategy}, parent_id=begin_id)

        return result


def _fold(combine: Combine[A]) -> Aggregate[A]:
    """Left fold over a non-empty profile, recording each combine step."""
    def _aggregate(
        preferences: Sequence[Preference[A]],
        trace: Trace | None,
        parent_id: int | None,
    ) -> Preference[A]:
        result = preferences[0]
        for index, preference in enumerate(preferences[1:], start=1):
            result = combine(result, preference)
            if trace is not None:
                trace.record("combine", info={"index": index}, parent_id=parent_id)
        return result

    return _aggregate


def lexicographic() -> SocialWelfareFunction[A]:
    """Lexicographic aggregation.

    Earlier preferences take absolute priority; later ones only break the
    ties left by all earlier ones.
    """
    return SocialWelfareFunction(strategy="lexicographic", _aggregate=_fold(when_equal))


def reduce(combine: Combine[A], strategy: str = "reduce") -> SocialWelfareFunction[A]:
    """Define a social welfare function from an associative combinator.

    The profile is folded left to right with ``combine``. Associativity is
    the caller's obligation and is not checked; see
    ``mechanisms.combinators.laws.is_associative``.

    Args:
        combine: Binary, associative preference combinator
        strategy: Name reported in logs and traces

    Returns:
        SocialWelfareFunction folding with ``combine``
    """
    return SocialWelfareFunction(strategy=strategy, _aggregate=_fold(combine))


def dictatorship(index: int = 0) -> SocialWelfareFunction[A]:
    """Adopt the preference found at position ``index`` of the profile.

    Raises:
        ValueError: If ``index`` is negative
    """
    if index < 0:
        raise ValueError("index must be non-negative")

    def _aggregate(
        preferences: Sequence[Preference[A]],
        trace: Trace | None,
        parent_id: int | None,
    ) -> Preference[A]:
        if index >= len(preferences):
            raise IndexError(f"No dictator at position {index} in a profile of {len(preferences)}")
        return preferences[index]

    return SocialWelfareFunction(strategy="dictatorship", _aggregate=_aggregate)


def borda(alternatives: Iterable[H]) -> SocialWelfareFunction[H]:
    """Borda count over a fixed, finite set of alternatives.

    Each preference awards an alternative one point for every alternative
    of the set it strictly beats. The collective preference compares the
    summed points; alternatives outside the set score zero.

    Raises:
        EmptyAlternativesError: If ``alternatives`` is empty
    """
    candidates = list(dict.fromkeys(alternatives))
    if not candidates:
        raise EmptyAlternativesError("borda")

    def _aggregate(
        preferences: Sequence[Preference[H]],
        trace: Trace | None,
        parent_id: int | None,
    ) -> Preference[H]:
        scores = dict.fromkeys(candidates, 0)
        for index, preference in enumerate(preferences):
            for a in candidates:
                scores[a] += sum(1 for b in candidates if preference.compare(a, b) > 0)
            if trace is not None:
                trace.record("score", info={"index": index}, parent_id=parent_id)

        def _compare(a1: H, a2: H) -> int:
            return scores.get(a1, 0) - scores.get(a2, 0)

        return Preference(_compare=_compare)

    return SocialWelfareFunction(strategy="borda", _aggregate=_aggregate)
