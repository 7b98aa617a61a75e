import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from relay_planner.services.quality import GroupKey

load_dotenv()

MODES = ("search", "generate")


@dataclass(frozen=True)
class Settings:
    roster_size: int
    rounds: int
    submission_cap: int
    max_tries: int
    seed: Optional[int]
    group_by: GroupKey
    participant_names: Tuple[str, ...]
    mode: str
    log_level: str
    log_path: str
    log_rotation: str


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


def _names_env(name: str) -> Tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_settings() -> Settings:
    group_by = os.getenv("GROUP_BY", GroupKey.SENDER.value).strip().lower()
    mode = os.getenv("PLANNER_MODE", "search").strip().lower()
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/relay_planner.log")
    log_rotation = os.getenv("LOG_ROTATION", "100 KB")

    if group_by not in {key.value for key in GroupKey}:
        raise ValueError("GROUP_BY must be 'sender' or 'recipient'.")
    if mode not in MODES:
        raise ValueError("PLANNER_MODE must be 'search' or 'generate'.")

    roster_size = _int_env("ROSTER_SIZE", 7)
    if roster_size < 0:
        raise ValueError("ROSTER_SIZE cannot be negative.")

    return Settings(
        roster_size=roster_size,
        rounds=_int_env("ROUNDS", 6),
        submission_cap=_int_env("SUBMISSION_CAP", 1),
        max_tries=_int_env("MAX_TRIES", 2000),
        seed=_int_env("SEED", None),
        group_by=GroupKey(group_by),
        participant_names=_names_env("PARTICIPANT_NAMES"),
        mode=mode,
        log_level=log_level,
        log_path=log_path,
        log_rotation=log_rotation,
    )
