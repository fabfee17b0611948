"""Kernel layer - pure preference abstractions."""

from mechanisms.kernel.errors import (
    EmptyAlternativesError,
    EmptyProfileError,
    PreconditionError,
)
from mechanisms.kernel.preference import Preference, Sign, contramap, particular, sign
from mechanisms.kernel.trace import Evidence, Trace

__all__ = [
    "Preference",
    "Sign",
    "sign",
    "contramap",
    "particular",
    # Errors
    "PreconditionError",
    "EmptyAlternativesError",
    "EmptyProfileError",
    # Tracing
    "Evidence",
    "Trace",
]
