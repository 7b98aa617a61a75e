from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from relay_planner.models import Participant, Schedule
from relay_planner.services.quality import GroupKey, round_counts

EMPTY_CELL = "-"
FLAG_MARK = "*"


@dataclass(frozen=True)
class GridCell:
    round: int
    sender: Participant
    recipient: Participant
    flagged: bool

    @property
    def label(self) -> str:
        text = f"{self.sender.name}→{self.recipient.name}"
        return text + FLAG_MARK if self.flagged else text


GridRow = List[Optional[GridCell]]


def build_grid(
    schedule: Schedule,
    key: GroupKey = GroupKey.SENDER,
    limit: int = 1,
) -> List[GridRow]:
    """Lay a schedule out as rows of chains and columns of rounds.

    Unfilled rounds are ``None``. A cell is flagged when the participant on
    its ``key`` side shows up in more than ``limit`` events of that round.
    """
    counts = [round_counts(schedule, index, key) for index in range(schedule.rounds)]
    grid: List[GridRow] = []
    for chain in schedule.chains:
        row: GridRow = []
        for index in range(schedule.rounds):
            if index >= len(chain):
                row.append(None)
                continue
            event = chain[index]
            row.append(
                GridCell(
                    round=index + 1,
                    sender=event.sender,
                    recipient=event.recipient,
                    flagged=counts[index][key.of(event).id] > limit,
                )
            )
        grid.append(row)
    return grid


def format_grid(
    schedule: Schedule,
    key: GroupKey = GroupKey.SENDER,
    limit: int = 1,
) -> str:
    header = [f"Week {number}" for number in range(1, schedule.rounds + 1)]
    rows = [
        [cell.label if cell else EMPTY_CELL for cell in row]
        for row in build_grid(schedule, key, limit)
    ]
    widths = [
        max([len(header[index])] + [len(row[index]) for row in rows])
        for index in range(schedule.rounds)
    ]
    lines = [
        "  ".join(text.ljust(width) for text, width in zip(line, widths)).rstrip()
        for line in [header, *rows]
    ]
    return "\n".join(lines)
