from __future__ import annotations


class UnknownEntity(LookupError):
    """An identifier did not resolve to any loaded movie or user."""

    def __init__(self, kind: str, entity_id: int) -> None:
        super().__init__(f"unknown {kind}: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class InvalidPattern(ValueError):
    """A search pattern could not be compiled as a regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid search pattern {pattern!r}: {reason}")
        self.pattern = pattern
