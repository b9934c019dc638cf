"""Results returned by invoice mutations.

Navigation is a value handed back to the caller, which decides how to act
on it (the HTTP layer turns it into a 303 redirect).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Mutated:
    """Store changed; caller stays on the current view."""


@dataclass(frozen=True)
class MutatedAndNavigate:
    """Store changed; caller should navigate to target."""

    target: str


MutationResult = Mutated | MutatedAndNavigate
