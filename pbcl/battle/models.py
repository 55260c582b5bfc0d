"""Creature data model: combat statistics, moves and the four move slots."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Iterator, Tuple

from pbcl.core.types import validate_attack_type

MAX_MOVE_SLOTS = 4

class Status(str, Enum):
    NONE = "none"
    POISONED = "poisoned"
    CONFUSED = "confused"

@dataclass
class CombatStats:
    level: int = 1
    attack: int = 10
    defense: int = 20
    special_attack: int = 12
    special_defense: int = 20
    speed: int = 4
    evade: int = 5
    health: int = 100
    max_health: int = 100
    status: Status = Status.NONE

    def __post_init__(self):
        if self.max_health <= 0:
            raise ValueError(f"max_health must be positive, got {self.max_health}")

@dataclass
class Move:
    name: str
    attack_type: str
    damage: int = 0
    current_use: int = 0
    max_use: int = 0

    def has_uses(self) -> bool:
        return self.current_use > 0

    def spend(self):
        if self.current_use > 0:
            self.current_use -= 1

    def validate(self) -> "Move":
        validate_attack_type(self.attack_type, self.name)
        return self

@dataclass
class Creature:
    name: str
    moves: List[Optional[Move]] = field(default_factory=list)
    stats: CombatStats = field(default_factory=CombatStats)

    def __post_init__(self):
        if len(self.moves) > MAX_MOVE_SLOTS:
            raise ValueError(f"{self.name} can hold at most {MAX_MOVE_SLOTS} moves, got {len(self.moves)}")
        # Pad to four explicit slots so slot positions are stable
        self.moves = list(self.moves) + [None] * (MAX_MOVE_SLOTS - len(self.moves))
        for mv in self.moves:
            if mv is not None:
                mv.validate()

    def is_fainted(self) -> bool:
        return self.stats.health <= 0

    def known_moves(self) -> Iterator[Tuple[int, Move]]:
        for slot, mv in enumerate(self.moves):
            if mv is not None:
                yield slot, mv

    def usable_move(self, *, enforce_uses: bool = True) -> Optional[Move]:
        """First filled slot that can still be used."""
        for _, mv in self.known_moves():
            if not enforce_uses or mv.has_uses():
                return mv
        return None

__all__ = ["Status","CombatStats","Move","Creature","MAX_MOVE_SLOTS"]
