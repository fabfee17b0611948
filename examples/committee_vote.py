"""Committee vote: one profile, three ways of reading it.

Run with: python examples/committee_vote.py
"""

import logging

from mechanisms import Profile, Trace, borda, dictatorship, lexicographic

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

BALLOTS = {
    "ballots": [
        {"voter": "chair", "ranking": ["rail", "road", "bike"]},
        {"voter": "treasurer", "ranking": ["road", "bike", "rail"]},
        {"voter": "secretary", "ranking": ["road", "rail", "bike"]},
    ]
}


def main() -> None:
    profile = Profile.model_validate(BALLOTS)
    alternatives = profile.alternatives()

    for swf in (lexicographic(), dictatorship(1), borda(alternatives)):
        trace = Trace()
        collective = profile.aggregate(swf, trace=trace)
        winner = collective.most_preferred(alternatives)
        print(f"{swf.strategy:>13}: winner={winner} rank={collective.rank(alternatives)}")
        print(f"{'':>13}  {len(trace)} trace events")


if __name__ == "__main__":
    main()
