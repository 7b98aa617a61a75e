from typing import Iterable, List, Sequence

from relay_planner.models import Participant


class ScriptedRandom:
    """Hands out pre-chosen visiting orders (as participant ids) in call order."""

    def __init__(self, orders: Iterable[Sequence[int]]) -> None:
        self._orders = list(orders)
        self.calls = 0

    def sample(self, population: Sequence[Participant], k: int) -> List[Participant]:
        by_id = {participant.id: participant for participant in population}
        order = self._orders[self.calls]
        self.calls += 1
        assert len(order) == k
        return [by_id[participant_id] for participant_id in order]


def pairs(chain):
    return [(event.sender.id, event.recipient.id) for event in chain]
