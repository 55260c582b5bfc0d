"""Trainers and their parties."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Iterator, Union

from pbcl.battle.engine import run_battle, MatchResult
from pbcl.battle.models import Creature
from pbcl.core.logging import logger
from pbcl.inventory import Backpack

MAX_PARTY_SIZE = 6

TargetRef = Union[str, int]

class AddOutcome(str, Enum):
    ADDED = "added"
    PARTY_FULL = "party_full"

@dataclass
class Party:
    members: List[Creature] = field(default_factory=list)
    capacity: int = MAX_PARTY_SIZE

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self.members)

    def __getitem__(self, idx: int) -> Creature:
        return self.members[idx]

    def is_full(self) -> bool:
        return len(self.members) >= self.capacity

    def add(self, member: Creature) -> AddOutcome:
        if self.is_full():
            logger.warn("PartyFull", size=f"{len(self.members)}/{self.capacity}", rejected=member.name)
            return AddOutcome.PARTY_FULL
        self.members.append(member)
        logger.info("PartyMemberAdded", slot=len(self.members), name=member.name)
        return AddOutcome.ADDED

    def find(self, name: str) -> Optional[Creature]:
        return next((m for m in self.members if m.name == name), None)

    def contains(self, name: str) -> bool:
        return self.find(name) is not None

    def resolve(self, target: Optional[TargetRef]) -> Optional[Creature]:
        """Member named (str) or at position (int) ``target``; lead member when None."""
        if target is None:
            return self.members[0] if self.members else None
        if isinstance(target, int):
            return self.members[target] if 0 <= target < len(self.members) else None
        return self.find(target)

    def alive_count(self) -> int:
        return sum(1 for m in self.members if not m.is_fainted())

    def first_alive(self) -> Optional[int]:
        return next((i for i, m in enumerate(self.members) if not m.is_fainted()), None)

    def next_alive(self, after: int) -> Optional[int]:
        """Index of the next living member after ``after``, wrapping around."""
        n = len(self.members)
        for step in range(1, n + 1):
            idx = (after + step) % n
            if not self.members[idx].is_fainted():
                return idx
        return None

@dataclass
class TrainerCard:
    name: str
    badges: List[str] = field(default_factory=list)
    battles: int = 0
    encountered: int = 0

@dataclass
class Trainer:
    card: TrainerCard
    backpack: Backpack = field(default_factory=Backpack)
    party: Party = field(default_factory=Party)
    pokedex: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def inventory(self) -> Backpack:
        return self.backpack

    def add_party_member(self, member: Creature) -> AddOutcome:
        outcome = self.party.add(member)
        if outcome is AddOutcome.ADDED and member.name not in self.pokedex:
            self.pokedex.append(member.name)
            self.card.encountered += 1
        return outcome

    def use_item(self, item_name: str, target: Optional[TargetRef] = None):
        return self.backpack.consume(item_name, self.party, target=target)

    def battle(self, rival: "Trainer", **kwargs) -> MatchResult:
        result = run_battle(self.party, rival.party, **kwargs)
        self.card.battles += 1
        rival.card.battles += 1
        return result

def new_trainer(name: str) -> Trainer:
    return Trainer(card=TrainerCard(name=name))

__all__ = ["Party","Trainer","TrainerCard","AddOutcome","new_trainer","MAX_PARTY_SIZE","TargetRef"]
