from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class Participant:
    """A roster member. Identity is the id; the display name may change."""

    __slots__ = ("id", "name")

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<Participant(id={self.id}, name={self.name!r})>"


@dataclass(frozen=True)
class SendEvent:
    sender: Participant
    recipient: Participant

    def __str__(self) -> str:
        return f"{self.sender.name}→{self.recipient.name}"


Chain = List[SendEvent]


@dataclass
class Schedule:
    """One candidate: a chain per participant, in roster order."""

    participants: List[Participant]
    rounds: int
    chains: List[Chain] = field(default_factory=list)

    def events_in_round(self, round_index: int) -> List[SendEvent]:
        """Events of round ``round_index`` (0-based) across every chain that reaches it."""
        return [chain[round_index] for chain in self.chains if len(chain) > round_index]

    def all_events(self) -> List[SendEvent]:
        return [event for chain in self.chains for event in chain]
