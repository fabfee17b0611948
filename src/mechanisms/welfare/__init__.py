"""Social welfare functions built on preference combinators."""

from .social_welfare import (
    SocialWelfareFunction,
    borda,
    dictatorship,
    lexicographic,
    reduce,
)

__all__ = [
    "SocialWelfareFunction",
    "lexicographic",
    "reduce",
    "dictatorship",
    "borda",
]
