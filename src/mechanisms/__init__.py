from .combinators import from_key, from_ranking, indifferent, reverse, when_equal
from .kernel import (
    EmptyAlternativesError,
    EmptyProfileError,
    Evidence,
    PreconditionError,
    Preference,
    Sign,
    Trace,
    contramap,
    particular,
)
from .structured import Ballot, Profile
from .welfare import SocialWelfareFunction, borda, dictatorship, lexicographic, reduce

__all__ = [
    # Core
    "Preference",
    "Sign",
    "contramap",
    "particular",
    # Combinators
    "when_equal",
    "indifferent",
    "reverse",
    "from_key",
    "from_ranking",
    # Aggregation
    "SocialWelfareFunction",
    "lexicographic",
    "reduce",
    "dictatorship",
    "borda",
    # Structured
    "Ballot",
    "Profile",
    # Errors
    "PreconditionError",
    "EmptyAlternativesError",
    "EmptyProfileError",
    # Tracing
    "Evidence",
    "Trace",
]
