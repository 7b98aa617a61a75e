from __future__ import annotations

import random
from typing import Optional, Sequence

from relay_planner.models import Participant, Schedule
from relay_planner.services.chain import build_chain
from relay_planner.services.history import PairingHistory


def generate_schedule(
    participants: Sequence[Participant],
    rounds: int,
    rng: Optional[random.Random] = None,
) -> Schedule:
    """Build one candidate schedule, one chain per participant in roster order.

    All chains share a single pairing history, so participants earlier in the
    roster pick their pairs before later ones are constrained by them.
    """
    if rng is None:
        rng = random.Random()
    roster = list(participants)
    rounds = max(rounds, 0)

    history = PairingHistory.empty(roster)
    chains = []
    for participant in roster:
        others = [other for other in roster if other != participant]
        order = rng.sample(others, len(others))
        chain, history = build_chain(participant, order, history, rounds)
        chains.append(chain)

    return Schedule(participants=roster, rounds=rounds, chains=chains)
