from __future__ import annotations

import random
import sys

from loguru import logger

from relay_planner.core.config import Settings, load_settings
from relay_planner.core.logging import setup_logging
from relay_planner.services import (
    Roster,
    evaluate,
    format_grid,
    generate_schedule,
    search_schedule,
)


def log_settings(settings: Settings) -> None:
    logger.info("Participants   - {count}", count=settings.roster_size)
    logger.info("Rounds         - {rounds}", rounds=settings.rounds)
    logger.info("Submission cap - {cap} per {key}", cap=settings.submission_cap, key=settings.group_by.value)
    logger.info("Mode           - {mode}", mode=settings.mode)
    if settings.mode == "search":
        logger.info("Try budget     - {tries}", tries=settings.max_tries)
    logger.info("Seed           - {seed}", seed=settings.seed if settings.seed is not None else "random")


def run(settings: Settings) -> int:
    roster = Roster.create(settings.roster_size, settings.participant_names, seed=settings.seed)
    rng = random.Random(settings.seed)

    if settings.mode == "generate":
        schedule = generate_schedule(roster.participants, settings.rounds, rng)
        score = evaluate(schedule, settings.group_by)
    else:
        result = search_schedule(
            roster.participants,
            settings.rounds,
            settings.submission_cap,
            max_tries=settings.max_tries,
            rng=rng,
            key=settings.group_by,
        )
        if not result.found:
            logger.error(
                "No schedule within the submission cap after {tries} tries",
                tries=result.tries,
            )
            return 1
        schedule, score = result.schedule, result.score
        logger.info("Tries          - {tries}", tries=result.tries)

    print(format_grid(schedule, settings.group_by, settings.submission_cap))

    logger.info("Missing sends  - {missing}", missing=score.missing)
    logger.info("Max per round  - {value}", value=score.max_submissions)
    return 0


def main() -> int:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_path, settings.log_rotation)

    logger.info("planner starting...")
    log_settings(settings)
    status = run(settings)
    logger.info("planner finished")
    return status


if __name__ == "__main__":
    sys.exit(main())
