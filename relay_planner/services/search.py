from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from relay_planner.models import Participant, Schedule
from relay_planner.services.quality import GroupKey, QualityScore, evaluate
from relay_planner.services.schedule import generate_schedule

MAX_TRIES = 2000


@dataclass
class SearchResult:
    schedule: Optional[Schedule]
    score: Optional[QualityScore]
    tries: int
    improvements: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.schedule is not None

    @property
    def perfect(self) -> bool:
        return self.score is not None and self.score.perfect


def search_schedule(
    participants: Sequence[Participant],
    rounds: int,
    submission_cap: int,
    max_tries: int = MAX_TRIES,
    rng: Optional[random.Random] = None,
    key: GroupKey = GroupKey.SENDER,
) -> SearchResult:
    """Generate candidates until one fills every round or the budget runs out.

    A candidate replaces the current best only when it is missing strictly
    fewer sends and no participant exceeds ``submission_cap`` in any round.
    When no candidate ever satisfies the cap the result has no schedule.
    """
    if rng is None:
        rng = random.Random()
    roster = list(participants)
    rounds = max(rounds, 0)

    best_missing = rounds * len(roster) + 1
    best: Optional[Schedule] = None
    best_score: Optional[QualityScore] = None
    improvements: List[Tuple[int, int]] = []
    tries = 0

    while tries < max_tries and best_missing > 0:
        tries += 1
        candidate = generate_schedule(roster, rounds, rng)
        score = evaluate(candidate, key)
        if score.missing < best_missing and score.max_submissions <= submission_cap:
            best_missing = score.missing
            best = candidate
            best_score = score
            improvements.append((tries, score.missing))
            logger.bind(attempt=tries, missing=score.missing).debug(
                "New best candidate (max submissions {max_submissions})",
                max_submissions=score.max_submissions,
            )

    log = logger.bind(
        participants=len(roster),
        rounds=rounds,
        submission_cap=submission_cap,
        tries=tries,
    )
    if best is None:
        log.warning("No candidate satisfied the submission cap")
    else:
        log.info("Search finished with {missing} missing sends", missing=best_missing)

    return SearchResult(schedule=best, score=best_score, tries=tries, improvements=improvements)
