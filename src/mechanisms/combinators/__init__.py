"""Combinators - higher-order preference composition primitives."""

from .laws import equivalent, is_associative, is_identity, is_total_preorder
from .ops import from_key, from_ranking, indifferent, reverse, when_equal

__all__ = [
    "when_equal",
    "indifferent",
    "reverse",
    "from_key",
    "from_ranking",
    # Laws
    "is_total_preorder",
    "equivalent",
    "is_associative",
    "is_identity",
]
