"""Structured ranked-ballot input, validated with pydantic."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mechanisms.combinators.ops import from_ranking
from mechanisms.kernel import Preference, Trace
from mechanisms.welfare import SocialWelfareFunction

Alternative = str | int


class Ballot(BaseModel):
    """One voter's strict ranking, best alternative first."""
    voter: str
    ranking: list[Alternative] = Field(min_length=1)

    @field_validator("ranking")
    @classmethod
    def _no_duplicates(cls, ranking: list[Alternative]) -> list[Alternative]:
        seen: set[Alternative] = set()
        for alternative in ranking:
            if alternative in seen:
                raise ValueError(f"Alternative {alternative!r} ranked more than once")
            seen.add(alternative)
        return ranking

    def to_preference(self) -> Preference[Alternative]:
        return from_ranking(self.ranking)


class Profile(BaseModel):
    """The ballots of every voter, in priority order."""
    ballots: list[Ballot] = Field(min_length=1)

    def preferences(self) -> list[Preference[Alternative]]:
        return [ballot.to_preference() for ballot in self.ballots]

    def alternatives(self) -> list[Alternative]:
        """Distinct alternatives in first-seen order."""
        seen: dict[Alternative, None] = {}
        for ballot in self.ballots:
            for alternative in ballot.ranking:
                seen.setdefault(alternative, None)
        return list(seen)

    def aggregate(
        self,
        swf: SocialWelfareFunction[Alternative],
        trace: Trace | None = None,
    ) -> Preference[Alternative]:
        return swf(self.preferences(), trace=trace)
