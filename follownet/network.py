"""Bounded social network of users and their follow relations."""

import logging
from typing import Dict, Iterator, List, Optional

import networkx as nx

from follownet.outcome import Outcome
from follownet.user import DEFAULT_MAX_FOLLOWEES, User, name_key

logger = logging.getLogger(__name__)

GETTING_STARTED_USERS = ("Foo", "Bar", "Baz")


class Network:
    """A network holding at most ``max_users`` users.

    Users are kept in insertion order, which is also the scan order used to
    break ties in the analytics. Names are unique ignoring case.

    Not thread-safe: callers sharing a network across threads must
    synchronise access themselves.
    """

    def __init__(self, max_users: int, max_followees: int = DEFAULT_MAX_FOLLOWEES):
        """Create an empty network."""
        if max_users <= 0:
            raise ValueError(f"max_users must be positive, got {max_users}")
        if max_followees <= 0:
            raise ValueError(f"max_followees must be positive, got {max_followees}")
        self.max_users = max_users
        self.max_followees = max_followees
        self._users: Dict[str, User] = {}

    @classmethod
    def getting_started(cls, max_users: int = 10,
                        max_followees: int = DEFAULT_MAX_FOLLOWEES) -> "Network":
        """Network pre-seeded with Foo, Bar and Baz, none following anyone."""
        if max_users < len(GETTING_STARTED_USERS):
            raise ValueError(
                f"max_users must be at least {len(GETTING_STARTED_USERS)}, got {max_users}"
            )
        network = cls(max_users, max_followees)
        for name in GETTING_STARTED_USERS:
            network.add_user(name)
        return network

    def get_user_count(self) -> int:
        return len(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users.values())

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name_key(name) in self._users

    def get_user(self, name: str) -> Optional[User]:
        """Find the user called ``name`` ignoring case, or None."""
        if not isinstance(name, str):
            return None
        return self._users.get(name_key(name))

    def add_user(self, name: str) -> Outcome:
        """Add a user with an empty follow list."""
        if not isinstance(name, str) or not name:
            outcome = Outcome.INVALID_NAME
        elif len(self._users) >= self.max_users:
            outcome = Outcome.AT_CAPACITY
        elif name_key(name) in self._users:
            outcome = Outcome.DUPLICATE_USER
        else:
            user = User(name, self.max_followees)
            self._users[user.key] = user
            return Outcome.OK

        logger.debug("Cannot add user %r: %s", name, outcome.message)
        return outcome

    def add_followee(self, name1: str, name2: str) -> Outcome:
        """Make the user ``name1`` follow the user ``name2``.

        Both names must belong to users of this network. The followee is
        stored under its display name.
        """
        follower = self.get_user(name1)
        followee = self.get_user(name2)
        if follower is None or followee is None:
            logger.debug("Cannot add %s -> %s: %s", name1, name2, Outcome.UNKNOWN_USER.message)
            return Outcome.UNKNOWN_USER
        return follower.add_followee(followee.name)

    def recommend_who_to_follow(self, name: str) -> Optional[str]:
        """Recommend the user sharing the most followees with ``name``.

        The subject and users it already follows are never recommended. Ties
        go to the user added first; a best score of zero yields None.
        """
        user = self.get_user(name)
        if user is None:
            return None

        max_mutuals = 0
        recommended = None
        for candidate in self._users.values():
            if candidate is user or user.follows(candidate.name):
                continue
            mutuals = user.count_mutual(candidate)
            if mutuals > max_mutuals:
                max_mutuals = mutuals
                recommended = candidate.name

        logger.debug("Recommendation for %s: %s (%d mutual)", user.name, recommended, max_mutuals)
        return recommended

    def most_popular_user(self) -> Optional[str]:
        """Name of the user followed by the most users, or None if nobody is followed."""
        max_count = 0
        popular = None
        for user in self._users.values():
            count = self._followee_count(user.name)
            if count > max_count:
                max_count = count
                popular = user.name
        return popular

    def _followee_count(self, name: str) -> int:
        """How many users in this network follow ``name``."""
        return sum(1 for user in self._users.values() if user.follows(name))

    def popularity(self, name: str) -> int:
        return self._followee_count(name)

    def followers_of(self, name: str) -> List[str]:
        """Names of the users following ``name``, in insertion order."""
        return [user.name for user in self._users.values() if user.follows(name)]

    def to_networkx(self) -> nx.DiGraph:
        """Directed graph with an edge from each follower to each followee.

        Followed names that do not belong to a user are left out.
        """
        graph = nx.DiGraph()
        for user in self._users.values():
            graph.add_node(user.name)

        for user in self._users.values():
            for followee_name in user.followees:
                followee = self.get_user(followee_name)
                if followee is not None:
                    graph.add_edge(user.name, followee.name)

        for node in graph.nodes:
            graph.nodes[node]['followees'] = graph.out_degree(node)
            graph.nodes[node]['followers'] = graph.in_degree(node)
        return graph

    def __str__(self) -> str:
        lines = ["Network:"]
        lines.extend(str(user) for user in self._users.values())
        return "\n".join(lines).strip()
