"""Tests for pydantic ballot and profile models."""

import pytest
from pydantic import ValidationError

from mechanisms import Ballot, Profile, borda, lexicographic, particular
from mechanisms.combinators import equivalent


def test_ballot_to_preference():
    """A ballot ranks its first entry highest."""
    ballot = Ballot(voter="alice", ranking=["x", "y", "z"])
    p = ballot.to_preference()
    assert p.most_preferred(["z", "y", "x"]) == "x"
    assert p.rank(["x", "y", "z"]) == {"z": 0, "y": 1, "x": 2}


def test_single_entry_ballot_is_particular():
    ballot = Ballot(voter="bob", ranking=["y"])
    assert equivalent(ballot.to_preference(), particular("y"), ["x", "y", "z"])


def test_ballot_rejects_duplicates():
    with pytest.raises(ValidationError, match="ranked more than once"):
        Ballot(voter="carol", ranking=["x", "y", "x"])


def test_ballot_rejects_empty_ranking():
    with pytest.raises(ValidationError):
        Ballot(voter="dave", ranking=[])


def test_ballot_accepts_integer_alternatives():
    ballot = Ballot(voter="erin", ranking=[3, 1, 2])
    assert ballot.to_preference().most_preferred([1, 2, 3]) == 3


def test_profile_from_plain_data():
    """Profiles validate straight from dict data."""
    profile = Profile.model_validate(
        {
            "ballots": [
                {"voter": "alice", "ranking": ["a", "b", "c"]},
                {"voter": "bob", "ranking": ["c", "b"]},
            ]
        }
    )
    assert [b.voter for b in profile.ballots] == ["alice", "bob"]
    assert profile.alternatives() == ["a", "b", "c"]
    assert len(profile.preferences()) == 2


def test_profile_from_json():
    profile = Profile.model_validate_json(
        '{"ballots": [{"voter": "alice", "ranking": ["b", "a"]}]}'
    )
    assert profile.aggregate(lexicographic()).most_preferred(["a", "b"]) == "b"


def test_profile_rejects_no_ballots():
    with pytest.raises(ValidationError):
        Profile(ballots=[])


def test_profile_aggregate():
    profile = Profile(
        ballots=[
            Ballot(voter="alice", ranking=["a", "b", "c"]),
            Ballot(voter="bob", ranking=["b", "c", "a"]),
            Ballot(voter="carol", ranking=["b", "c", "a"]),
        ]
    )
    assert profile.aggregate(lexicographic()).most_preferred(profile.alternatives()) == "a"
    swf = borda(profile.alternatives())
    assert profile.aggregate(swf).most_preferred(profile.alternatives()) == "b"
