"""Automatic turn-based match between two parties.

Each round both active combatants use their first usable move; the faster one
acts first (ties go to ``speed_tie_winner``). Damage is the move's damage value.
A combatant dropping to 0 health faints, its side advances to the next living
member and the round ends on the spot.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from pbcl.core.logging import logger
from .models import Creature, CombatStats, Move

if TYPE_CHECKING:
    from pbcl.trainer import Party

DEFAULT_MAX_ROUNDS = 1000

class Side(str, Enum):
    A = "A"
    B = "B"

    @property
    def other(self) -> "Side":
        return Side.B if self is Side.A else Side.A

class MatchOutcome(str, Enum):
    SIDE_A_WIN = "side_a_win"
    SIDE_B_WIN = "side_b_win"
    EXHAUSTED = "exhausted"
    ONGOING = "ongoing"

@dataclass(frozen=True)
class BattleEvent:
    kind: str  # attack | faint | pass | exhausted
    side: Optional[Side]
    actor: str
    text: str
    target: Optional[str] = None
    move: Optional[str] = None
    damage: int = 0

@dataclass
class MatchResult:
    outcome: MatchOutcome
    rounds: int
    alive_a: int
    alive_b: int
    events: List[BattleEvent] = field(default_factory=list)

    @property
    def log(self) -> List[str]:
        return [e.text for e in self.events]

def calculate_damage(move: Move, attacker: CombatStats, defender: CombatStats) -> int:
    # No mitigation from stats or types yet
    return move.damage

class BattleSession:
    def __init__(self, party_a: "Party", party_b: "Party", *, speed_tie_winner: Side = Side.A,
                 enforce_uses: bool = True, max_rounds: int = DEFAULT_MAX_ROUNDS,
                 message_cb: Optional[Callable[[str], None]] = None):
        self.parties: Dict[Side, "Party"] = {Side.A: party_a, Side.B: party_b}
        self.speed_tie_winner = Side(speed_tie_winner)
        self.enforce_uses = enforce_uses
        self.max_rounds = max_rounds
        self.message_cb = message_cb
        self.events: List[BattleEvent] = []
        self.rounds = 0
        self.active: Dict[Side, Optional[int]] = {s: p.first_alive() for s, p in self.parties.items()}
        self.alive: Dict[Side, int] = {s: p.alive_count() for s, p in self.parties.items()}
        self._pending: List[Side] = []
        self._exhausted = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def combatant(self, side: Side) -> Optional[Creature]:
        idx = self.active[side]
        return None if idx is None else self.parties[side][idx]

    def is_over(self) -> bool:
        return self._exhausted or self.alive[Side.A] == 0 or self.alive[Side.B] == 0

    def in_round(self) -> bool:
        return bool(self._pending)

    def outcome(self) -> MatchOutcome:
        a, b = self.alive[Side.A], self.alive[Side.B]
        if self._exhausted or (a == 0 and b == 0):
            return MatchOutcome.EXHAUSTED
        if b == 0:
            return MatchOutcome.SIDE_A_WIN
        if a == 0:
            return MatchOutcome.SIDE_B_WIN
        return MatchOutcome.ONGOING

    def result(self) -> MatchResult:
        return MatchResult(self.outcome(), self.rounds, self.alive[Side.A], self.alive[Side.B], list(self.events))

    def turn_order(self) -> List[Side]:
        a, b = self.combatant(Side.A), self.combatant(Side.B)
        assert a is not None and b is not None
        if a.stats.speed > b.stats.speed:
            return [Side.A, Side.B]
        if b.stats.speed > a.stats.speed:
            return [Side.B, Side.A]
        return [self.speed_tie_winner, self.speed_tie_winner.other]

    # ------------------------------------------------------------------
    # Turn resolution
    # ------------------------------------------------------------------
    def _emit(self, event: BattleEvent):
        self.events.append(event)
        if self.message_cb:
            self.message_cb(event.text)
        if event.kind == "faint":
            logger.info("CreatureFainted", name=event.actor, side=event.side.value if event.side else "-")
        else:
            logger.debug("BattleEvent", kind=event.kind, text=event.text)

    def _start_round(self) -> bool:
        a, b = self.combatant(Side.A), self.combatant(Side.B)
        assert a is not None and b is not None
        can_a = a.usable_move(enforce_uses=self.enforce_uses) is not None
        can_b = b.usable_move(enforce_uses=self.enforce_uses) is not None
        if (not can_a and not can_b) or self.rounds >= self.max_rounds:
            self._exhausted = True
            self._emit(BattleEvent("exhausted", None, "-", f"{a.name} and {b.name} can no longer fight"))
            return False
        self.rounds += 1
        self._pending = self.turn_order()
        return True

    def _end_round(self):
        self._pending = []
        self.alive = {s: p.alive_count() for s, p in self.parties.items()}

    def _act(self, side: Side) -> bool:
        """Resolve one action for ``side``; True if the opponent fainted."""
        attacker = self.combatant(side)
        defender = self.combatant(side.other)
        assert attacker is not None and defender is not None
        move = attacker.usable_move(enforce_uses=self.enforce_uses)
        if move is None:
            self._emit(BattleEvent("pass", side, attacker.name, f"{attacker.name} has no moves left"))
            return False
        if self.enforce_uses:
            move.spend()
        damage = calculate_damage(move, attacker.stats, defender.stats)
        defender.stats.health -= damage
        self._emit(BattleEvent("attack", side, attacker.name,
                               f"{attacker.name} uses {move.name} against {defender.name}",
                               target=defender.name, move=move.name, damage=damage))
        if not defender.is_fainted():
            return False
        defender.stats.health = 0
        self._emit(BattleEvent("faint", side.other, defender.name,
                               f"{defender.name} was defeated by {attacker.name}", target=attacker.name))
        nxt = self.parties[side.other].next_alive(self.active[side.other] or 0)
        if nxt is not None:
            self.active[side.other] = nxt
        return True

    def step(self):
        """Resolve a single action, opening a new round when none is in progress."""
        if self.is_over():
            return
        if not self._pending and not self._start_round():
            return
        side = self._pending.pop(0)
        fainted = self._act(side)
        if fainted or not self._pending:
            self._end_round()

    def play_round(self):
        if self.is_over():
            return
        self.step()
        while self._pending:
            self.step()

    def run(self) -> MatchResult:
        a, b = self.parties[Side.A], self.parties[Side.B]
        logger.info("BattleStart", side_a=len(a), side_b=len(b))
        while not self.is_over():
            self.play_round()
        result = self.result()
        logger.info("BattleEnd", outcome=result.outcome.value, rounds=result.rounds)
        return result

def run_battle(party_a: "Party", party_b: "Party", **kwargs) -> MatchResult:
    return BattleSession(party_a, party_b, **kwargs).run()

__all__ = ["Side","MatchOutcome","BattleEvent","MatchResult","BattleSession","run_battle","calculate_damage"]
