from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from relay_planner.models import Participant, Schedule, SendEvent


class GroupKey(str, Enum):
    """Which side of a send event the per-round submission count is taken over."""

    SENDER = "sender"
    RECIPIENT = "recipient"

    def of(self, event: SendEvent) -> Participant:
        if self is GroupKey.SENDER:
            return event.sender
        return event.recipient


@dataclass(frozen=True)
class QualityScore:
    missing: int
    max_submissions: int

    @property
    def perfect(self) -> bool:
        return self.missing == 0


def missing_count(schedule: Schedule, rounds: Optional[int] = None) -> int:
    if rounds is None:
        rounds = schedule.rounds
    return sum(rounds - len(chain) for chain in schedule.chains)


def round_counts(
    schedule: Schedule,
    round_index: int,
    key: GroupKey = GroupKey.SENDER,
) -> Dict[int, int]:
    """Events per participant id in one round (0-based), grouped by ``key``."""
    counts = Counter(key.of(event).id for event in schedule.events_in_round(round_index))
    return dict(counts)


def max_submissions_per_round(schedule: Schedule, key: GroupKey = GroupKey.SENDER) -> int:
    longest = max((len(chain) for chain in schedule.chains), default=0)
    best = 0
    for round_index in range(longest):
        counts = round_counts(schedule, round_index, key)
        best = max(best, max(counts.values(), default=0))
    return best


def evaluate(schedule: Schedule, key: GroupKey = GroupKey.SENDER) -> QualityScore:
    return QualityScore(
        missing=missing_count(schedule),
        max_submissions=max_submissions_per_round(schedule, key),
    )
