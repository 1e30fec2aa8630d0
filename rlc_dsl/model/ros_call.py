"""
ROS calls observed in function bodies.

The registry only deduplicates (topic, kind) pairs for the code generators;
iteration order carries no meaning.
"""

from dataclasses import dataclass
from enum import Enum


class RosCallType(Enum):
    """Kind of communication call, named after the DSL keyword."""

    PUBLISH = "publish"
    SUBSCRIBE = "subscribe"
    SERVICE = "service"


@dataclass(frozen=True)
class RosCall:
    topic: str
    kind: RosCallType

    def __str__(self):
        return f"{self.kind.value} {self.topic}"


class CallRegistry:
    def __init__(self):
        self._calls = set()

    def register_call(self, topic: str, kind: RosCallType) -> None:
        """Record a call; registering the same pair again has no effect."""
        self._calls.add(RosCall(topic, kind))

    def __contains__(self, call):
        return call in self._calls

    def __iter__(self):
        return iter(self._calls)

    def __len__(self):
        return len(self._calls)

    def __repr__(self):
        return f"CallRegistry({sorted(str(c) for c in self._calls)})"
