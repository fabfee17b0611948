"""Structured profiles: plain ranked-ballot data turned into preferences."""

from .ballot import Alternative, Ballot, Profile

__all__ = [
    "Alternative",
    "Ballot",
    "Profile",
]
