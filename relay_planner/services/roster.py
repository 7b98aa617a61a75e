from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from faker import Faker

from relay_planner.models import Participant


class RosterError(LookupError, ValueError):
    pass


def make_name_source(seed: Optional[int] = None) -> Faker:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def build_roster(
    size: int,
    names: Optional[Sequence[str]] = None,
    name_source: Optional[Faker] = None,
) -> List[Participant]:
    """Participants with ids 1..size; names not supplied are generated first names."""
    if size < 0:
        raise RosterError("Roster size cannot be negative.")
    names = list(names or [])
    if len(names) < size and name_source is None:
        name_source = make_name_source()
    return [
        Participant(
            id=participant_id,
            name=names[participant_id - 1] if participant_id <= len(names) else name_source.first_name(),
        )
        for participant_id in range(1, size + 1)
    ]


class Roster:
    """The participants a schedule is built for.

    Renaming edits the participant object in place, so schedules that were
    already generated show the new name without being rebuilt.
    """

    def __init__(self, participants: Sequence[Participant], seed: Optional[int] = None) -> None:
        ids = [participant.id for participant in participants]
        if len(ids) != len(set(ids)):
            raise RosterError("Participant ids must be unique.")
        self._participants: List[Participant] = list(participants)
        self._name_source = make_name_source(seed)

    @classmethod
    def create(
        cls,
        size: int,
        names: Optional[Sequence[str]] = None,
        seed: Optional[int] = None,
    ) -> "Roster":
        roster = cls([], seed=seed)
        roster._participants = build_roster(size, names, roster._name_source)
        return roster

    @property
    def participants(self) -> List[Participant]:
        return list(self._participants)

    @property
    def names(self) -> List[str]:
        return [participant.name for participant in self._participants]

    def get(self, participant_id: int) -> Participant:
        for participant in self._participants:
            if participant.id == participant_id:
                return participant
        raise RosterError(f"Unknown participant id {participant_id}.")

    def rename(self, participant_id: int, name: str) -> Participant:
        participant = self.get(participant_id)
        participant.name = name
        return participant

    def resize(self, size: int) -> None:
        """Keep the first ``size`` participants and append new ones after the highest id."""
        if size < 0:
            raise RosterError("Roster size cannot be negative.")
        kept = self._participants[:size]
        next_id = max((participant.id for participant in kept), default=0) + 1
        added = size - len(kept)
        kept.extend(
            Participant(id=participant_id, name=self._name_source.first_name())
            for participant_id in range(next_id, next_id + added)
        )
        self._participants = kept

    def __len__(self) -> int:
        return len(self._participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._participants)
