"""Build networks from JSON fixture data."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from follownet.network import Network
from follownet.outcome import Outcome
from follownet.user import DEFAULT_MAX_FOLLOWEES

logger = logging.getLogger(__name__)


class FixtureError(ValueError):
    """Raised when fixture data cannot be read or has the wrong shape."""


@dataclass
class Rejection:
    """A fixture mutation the network refused."""
    action: str
    args: Tuple[str, ...]
    outcome: Outcome

    def describe(self) -> str:
        if self.action == "follow":
            return f"{self.args[0]} -> {self.args[1]}: {self.outcome.message}"
        return f"{self.args[0]}: {self.outcome.message}"


@dataclass
class LoadReport:
    """The network built from a fixture plus every mutation it rejected."""
    network: Network
    rejections: List[Rejection] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejections


def _read_users(data: Dict) -> List[str]:
    users = data.get('users', [])
    if not isinstance(users, list) or not all(isinstance(u, str) and u for u in users):
        raise FixtureError("'users' must be a list of non-empty names")
    return users


def _read_follows(data: Dict) -> List[Tuple[str, str]]:
    follows = data.get('follows', [])
    if not isinstance(follows, list):
        raise FixtureError("'follows' must be a list of [follower, followee] pairs")

    pairs = []
    for entry in follows:
        if (not isinstance(entry, (list, tuple)) or len(entry) != 2
                or not all(isinstance(name, str) for name in entry)):
            raise FixtureError(f"Invalid follow entry: {entry!r}")
        pairs.append((entry[0], entry[1]))
    return pairs


def build_network(
    data: Dict,
    max_users: Optional[int] = None,
    max_followees: Optional[int] = None
) -> LoadReport:
    """Create a network from fixture data.

    Users are added first, then follows, both in fixture order. Mutations
    the network rejects are collected in the report instead of raising.
    """
    if not isinstance(data, dict):
        raise FixtureError("Fixture must be a JSON object")

    users = _read_users(data)
    follows = _read_follows(data)

    if max_users is None:
        max_users = data.get('max_users')
    if max_users is None:
        max_users = max(len(users), 1)
    if max_followees is None:
        max_followees = data.get('max_followees')
    if max_followees is None:
        max_followees = DEFAULT_MAX_FOLLOWEES

    for value in (max_users, max_followees):
        if isinstance(value, bool) or not isinstance(value, int):
            raise FixtureError("'max_users' and 'max_followees' must be integers")

    try:
        network = Network(max_users, max_followees)
    except ValueError as e:
        raise FixtureError(str(e)) from e

    report = LoadReport(network)
    for name in users:
        outcome = network.add_user(name)
        if not outcome:
            report.rejections.append(Rejection('user', (name,), outcome))

    for follower, followee in follows:
        outcome = network.add_followee(follower, followee)
        if not outcome:
            report.rejections.append(Rejection('follow', (follower, followee), outcome))

    logger.debug(
        "Built network with %d users (%d rejected mutations)",
        network.get_user_count(), len(report.rejections)
    )
    return report


def load_network(
    path,
    max_users: Optional[int] = None,
    max_followees: Optional[int] = None
) -> LoadReport:
    """Read a JSON fixture file and build a network from it."""
    fixture_path = Path(path)
    try:
        with open(fixture_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FixtureError(f"Cannot read fixture {fixture_path}: {e}") from e

    return build_network(data, max_users=max_users, max_followees=max_followees)
