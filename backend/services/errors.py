"""Error taxonomy for the matching engine.

None of these are retried by the engine; resolution failures belong to
the caller.
"""


class MatchingError(Exception):
    """Base class for errors surfaced by the matching engine."""


class NotFoundError(MatchingError):
    """A candidate or job identifier did not resolve."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} not found with id: {identifier}")


class InvalidArgumentError(MatchingError, ValueError):
    """A caller passed an argument the engine refuses to work with."""
