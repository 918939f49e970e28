"""A single user and the list of users it follows."""

import logging
from typing import List, Tuple

from follownet.outcome import Outcome

logger = logging.getLogger(__name__)

DEFAULT_MAX_FOLLOWEES = 10


def name_key(name: str) -> str:
    """Identity key for a user name (names compare case-insensitively)."""
    return name.casefold()


class User:
    """A named user following up to ``max_followees`` other users.

    Followees are stored by name, not by object; a followed name is not
    required to resolve to a user in any network.
    """

    def __init__(self, name: str, max_followees: int = DEFAULT_MAX_FOLLOWEES):
        """Create a user with an empty follow list."""
        if not name:
            raise ValueError("User name must be a non-empty string")
        if max_followees <= 0:
            raise ValueError(f"max_followees must be positive, got {max_followees}")
        self._name = name
        self._key = name_key(name)
        self.max_followees = max_followees
        self._followees: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._key

    def get_name(self) -> str:
        return self._name

    @property
    def followees(self) -> Tuple[str, ...]:
        """Followed names in the order they were added."""
        return tuple(self._followees)

    @property
    def followee_count(self) -> int:
        return len(self._followees)

    def get_followee_count(self) -> int:
        return len(self._followees)

    def follows(self, name: str) -> bool:
        """Whether this user follows ``name`` (case-insensitive)."""
        key = name_key(name)
        return any(name_key(followee) == key for followee in self._followees)

    def add_followee(self, name: str) -> Outcome:
        """Start following ``name``.

        Fails with ``SELF_FOLLOW``, ``ALREADY_FOLLOWING`` or ``AT_CAPACITY``
        and leaves the follow list untouched in those cases.
        """
        if name_key(name) == self._key:
            outcome = Outcome.SELF_FOLLOW
        elif self.follows(name):
            outcome = Outcome.ALREADY_FOLLOWING
        elif len(self._followees) >= self.max_followees:
            outcome = Outcome.AT_CAPACITY
        else:
            self._followees.append(name)
            return Outcome.OK

        logger.debug("%s cannot follow %s: %s", self._name, name, outcome.message)
        return outcome

    def count_mutual(self, other: "User") -> int:
        """Number of names followed by both this user and ``other``."""
        mine = {name_key(followee) for followee in self._followees}
        theirs = {name_key(followee) for followee in other._followees}
        return len(mine & theirs)

    def __str__(self) -> str:
        return f"{self._name} -> {' '.join(self._followees)}".rstrip()

    def __repr__(self) -> str:
        return f"User({self._name!r}, followees={self._followees!r})"
