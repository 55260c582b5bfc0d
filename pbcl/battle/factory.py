"""Factory helpers for constructing Creature instances.

Move sets are configuration: a Movepool maps creature names to their four
slot move names, and anything not listed falls back to DEFAULT_MOVESET.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Dict, Mapping, Optional, Sequence, List

from .models import Creature, CombatStats, Move
from pbcl.core.logging import logger

MOVE_CATALOG: Dict[str, Move] = {
    "Ember": Move(name="Ember", attack_type="Fire", damage=10, current_use=20, max_use=20),
    "Water Gun": Move(name="Water Gun", attack_type="Water", damage=30, current_use=20, max_use=20),
    "Tackle": Move(name="Tackle", attack_type="Normal", damage=20, current_use=50, max_use=50),
    "Burba Blast": Move(name="Burba Blast", attack_type="Psyche", damage=120, current_use=1, max_use=1),
}

MoveSlots = Sequence[Optional[str]]
Movepool = Mapping[str, MoveSlots]

DEFAULT_MOVESET: MoveSlots = ("Ember", None, "Burba Blast", None)

def get_move(name: str) -> Move:
    """Fresh copy of a catalog move (use counters are per creature)."""
    if name not in MOVE_CATALOG:
        raise KeyError(f"Move not found: {name}")
    return replace(MOVE_CATALOG[name])

def validate_move_catalog(catalog: Mapping[str, Move] = MOVE_CATALOG) -> List[Move]:
    return [mv.validate() for mv in catalog.values()]

def default_stats(**overrides: int) -> CombatStats:
    return CombatStats(**overrides)

def moves_for(name: str, movepool: Optional[Movepool] = None) -> List[Optional[Move]]:
    slots = (movepool or {}).get(name, DEFAULT_MOVESET)
    return [get_move(s) if s else None for s in slots]

def new_creature(name: str, *, movepool: Optional[Movepool] = None, stats: Optional[CombatStats] = None) -> Creature:
    creature = Creature(name=name, moves=moves_for(name, movepool), stats=stats or default_stats())
    logger.debug("CreatureCreated", name=name, moves=[m.name for _, m in creature.known_moves()])
    return creature

__all__ = ["MOVE_CATALOG","DEFAULT_MOVESET","Movepool","MoveSlots","get_move","validate_move_catalog","default_stats","moves_for","new_creature"]
