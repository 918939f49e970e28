"""Result codes for graph mutations."""

from enum import Enum


class Outcome(Enum):
    """Outcome of a mutation on a network or user.

    Only ``OK`` is truthy, so callers that just need success/failure can
    treat an outcome as a bool.
    """
    OK = "ok"
    AT_CAPACITY = "at_capacity"
    DUPLICATE_USER = "duplicate_user"
    UNKNOWN_USER = "unknown_user"
    SELF_FOLLOW = "self_follow"
    ALREADY_FOLLOWING = "already_following"
    INVALID_NAME = "invalid_name"

    def __bool__(self):
        return self is Outcome.OK

    @property
    def message(self) -> str:
        """Short description for console output."""
        return _MESSAGES[self]


_MESSAGES = {
    Outcome.OK: "ok",
    Outcome.AT_CAPACITY: "capacity exceeded",
    Outcome.DUPLICATE_USER: "user already exists",
    Outcome.UNKNOWN_USER: "no such user",
    Outcome.SELF_FOLLOW: "users cannot follow themselves",
    Outcome.ALREADY_FOLLOWING: "already following",
    Outcome.INVALID_NAME: "user names must be non-empty strings",
}
