from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Mapping, Union

from relay_planner.models import Participant

ParticipantRef = Union[Participant, int]


def _key(participant: ParticipantRef) -> int:
    if isinstance(participant, Participant):
        return participant.id
    return participant


class PairingHistory:
    """Who has already sent to whom within one schedule-generation pass.

    Values are never mutated in place: ``record`` hands back a new history,
    so the caller threads the result into the next chain explicitly.
    """

    __slots__ = ("_sent",)

    def __init__(self, sent: Mapping[int, FrozenSet[int]]) -> None:
        self._sent: Dict[int, FrozenSet[int]] = dict(sent)

    @classmethod
    def empty(cls, participants: Iterable[ParticipantRef]) -> "PairingHistory":
        return cls({_key(participant): frozenset() for participant in participants})

    def has_sent(self, sender: ParticipantRef, recipient: ParticipantRef) -> bool:
        return _key(recipient) in self._sent.get(_key(sender), frozenset())

    def record(self, sender: ParticipantRef, recipient: ParticipantRef) -> "PairingHistory":
        sender_id = _key(sender)
        updated = dict(self._sent)
        updated[sender_id] = self._sent.get(sender_id, frozenset()) | {_key(recipient)}
        return PairingHistory(updated)

    def sent_by(self, sender: ParticipantRef) -> FrozenSet[int]:
        return self._sent.get(_key(sender), frozenset())

    def pair_count(self) -> int:
        return sum(len(recipients) for recipients in self._sent.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairingHistory):
            return NotImplemented
        return self._sent == other._sent

    def __repr__(self) -> str:
        return f"<PairingHistory(pairs={self.pair_count()})>"
