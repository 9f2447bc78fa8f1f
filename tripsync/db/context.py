"""Per-user store namespace."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserContext:
    """Identity of the authenticated user.

    Every store operation is scoped to ``user_id``; a user never sees
    another user's trips.
    """

    user_id: str
