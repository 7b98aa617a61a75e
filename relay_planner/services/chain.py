from __future__ import annotations

from typing import Optional, Sequence, Tuple

from loguru import logger

from relay_planner.models import Chain, Participant, SendEvent
from relay_planner.services.history import PairingHistory


def _first_fit(
    start: Participant,
    candidates: Sequence[Participant],
    history: PairingHistory,
) -> Optional[Participant]:
    for candidate in candidates:
        if not history.has_sent(start, candidate):
            return candidate
    return None


def build_chain(
    start: Participant,
    candidates: Sequence[Participant],
    history: PairingHistory,
    rounds_remaining: int,
) -> Tuple[Chain, PairingHistory]:
    """Greedily walk a chain of sends starting at ``start``.

    Each step takes the first candidate, in the given order, that ``start``
    has not sent to yet; that candidate becomes the next sender and drops out
    of the candidate list. The walk stops when rounds or candidates run out,
    or at a dead end where every remaining candidate was already used by the
    current sender. Returns the chain and the history with its pairs recorded.
    """
    if not candidates or rounds_remaining <= 0:
        return [], history

    recipient = _first_fit(start, candidates, history)
    if recipient is None:
        logger.bind(sender=start.id, rounds_remaining=rounds_remaining).debug(
            "Dead end: no unused recipient among {count} candidates",
            count=len(candidates),
        )
        return [], history

    remaining = [candidate for candidate in candidates if candidate != recipient]
    tail, updated = build_chain(
        recipient,
        remaining,
        history.record(start, recipient),
        rounds_remaining - 1,
    )
    return [SendEvent(sender=start, recipient=recipient), *tail], updated
