from relay_planner.services.chain import build_chain
from relay_planner.services.grid import GridCell, build_grid, format_grid
from relay_planner.services.history import PairingHistory
from relay_planner.services.quality import (
    GroupKey,
    QualityScore,
    evaluate,
    max_submissions_per_round,
    missing_count,
)
from relay_planner.services.roster import Roster, RosterError, build_roster
from relay_planner.services.schedule import generate_schedule
from relay_planner.services.search import MAX_TRIES, SearchResult, search_schedule

__all__ = [
    "build_chain",
    "GridCell",
    "build_grid",
    "format_grid",
    "PairingHistory",
    "GroupKey",
    "QualityScore",
    "evaluate",
    "max_submissions_per_round",
    "missing_count",
    "Roster",
    "RosterError",
    "build_roster",
    "generate_schedule",
    "MAX_TRIES",
    "SearchResult",
    "search_schedule",
]
