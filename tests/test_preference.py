"""Tests for the Preference kernel abstraction."""

from dataclasses import FrozenInstanceError

import pytest

from fakes import Bundle, by_length, by_parity, by_value, raw
from mechanisms import EmptyAlternativesError, Preference, contramap, particular
from mechanisms.kernel import PreconditionError, sign


class TestCompare:
    """Tests for the compare primitive."""

    def test_compare_normalises_sign(self):
        """Any magnitude is collapsed to -1, 0 or 1."""
        p = raw(lambda a1, a2: a1 - a2)
        assert p.compare(10, 3) == 1
        assert p.compare(3, 10) == -1
        assert p.compare(4, 4) == 0

    def test_call_is_compare(self):
        p = by_value()
        assert p(2, 1) == p.compare(2, 1) == 1

    def test_sign(self):
        assert sign(42) == 1
        assert sign(-7) == -1
        assert sign(0) == 0

    def test_preference_is_immutable(self):
        """Preferences cannot be mutated after creation."""
        p = by_value()
        with pytest.raises(FrozenInstanceError):
            p._compare = lambda a1, a2: 0  # type: ignore[misc]


class TestOrdering:
    """Tests for the ordering adapter and sorting."""

    def test_ordering_sorts_ascending(self):
        """Least preferred first."""
        assert sorted([3, 1, 2], key=by_value().ordering()) == [1, 2, 3]

    def test_sorted_is_stable(self):
        """Indifferent alternatives keep their input order."""
        assert by_parity().sorted([2, 1, 4, 3]) == [1, 3, 2, 4]


class TestMostPreferred:
    """Tests for most_preferred."""

    def test_returns_maximal_element(self):
        xs = [4, 9, 1, 7]
        best = by_value().most_preferred(xs)
        assert best == 9
        assert all(by_value().compare(best, x) >= 0 for x in xs)

    def test_accepts_iterators(self):
        assert by_length().most_preferred(iter(["aa", "a", "aaa"])) == "aaa"

    def test_first_of_tied_best(self):
        assert by_parity().most_preferred([1, 4, 2, 3]) == 4

    def test_empty_raises(self):
        """Selecting from nothing is a precondition violation."""
        with pytest.raises(EmptyAlternativesError) as info:
            by_value().most_preferred([])
        assert info.value.operation == "most_preferred"
        assert isinstance(info.value, PreconditionError)
        assert isinstance(info.value, ValueError)


class TestRank:
    """Tests for dense ranking."""

    def test_dense_ranks_for_distinct(self):
        assert by_value().rank([30, 10, 20]) == {10: 0, 20: 1, 30: 2}

    def test_ranks_are_consecutive_and_increasing(self):
        p = by_value()
        ranks = p.rank([5, 3, 5, 8, 3, 1])
        assert sorted(ranks.values()) == list(range(len(ranks)))
        ordered = sorted(ranks, key=ranks.__getitem__)
        for lower, higher in zip(ordered, ordered[1:]):
            assert p.compare(lower, higher) < 0

    def test_indifferent_alternatives_collapse(self):
        """Only one representative per equivalence class survives."""
        ranks = by_parity().rank([1, 2, 3, 4])
        assert len(ranks) == 2
        assert sorted(ranks.values()) == [0, 1]
        (odd,) = [x for x in ranks if x % 2 == 1]
        (even,) = [x for x in ranks if x % 2 == 0]
        assert ranks[odd] == 0
        assert ranks[even] == 1

    def test_empty_rank(self):
        assert by_value().rank([]) == {}


class TestWeaklyPrefers:
    """Tests for weakly_prefers."""

    def test_returns_better(self):
        p = by_value()
        assert p.weakly_prefers(3, 5) == 5
        assert p.weakly_prefers(5, 3) == 5

    def test_tie_returns_first(self):
        assert by_parity().weakly_prefers(1, 3) == 1
        assert by_parity().weakly_prefers(3, 1) == 3

    def test_same_alternative(self):
        assert by_value().weakly_prefers(7, 7) == 7

    def test_strict_and_indifferent_helpers(self):
        p = by_parity()
        assert p.strictly_prefers(2, 1)
        assert not p.strictly_prefers(1, 3)
        assert p.indifferent(1, 3)


class TestContramap:
    """Tests for contravariant remapping."""

    def test_remap_law(self):
        p = by_value()
        q = contramap(p, len)
        words = ["", "a", "bb", "ccc"]
        for w1 in words:
            for w2 in words:
                assert q.compare(w1, w2) == p.compare(len(w1), len(w2))

    def test_method_matches_function(self):
        p = by_value()
        q = p.contramap(lambda b: b.apples)
        small = Bundle("small", apples=1, pears=9)
        big = Bundle("big", apples=5, pears=0)
        assert q.most_preferred([small, big]) is big
        assert q.rank([big, small]) == {small: 0, big: 1}


class TestParticular:
    """Tests for the singleton preference constructor."""

    def test_distinguished_dominates(self):
        p = particular("x")
        assert p.compare("x", "y") == 1
        assert p.compare("y", "x") == -1

    def test_others_indifferent(self):
        p = particular("x")
        assert p.compare("y", "z") == 0
        assert p.compare("x", "x") == 0

    def test_most_preferred_is_distinguished(self):
        assert particular("c").most_preferred(["a", "b", "c", "d"]) == "c"

    def test_type(self):
        assert isinstance(particular(1), Preference)
