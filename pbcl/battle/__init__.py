"""
Battle package.
- models.py (Creature, Move, CombatStats, Status)
- factory.py (move catalog, movepools, creature construction)
- engine.py (match resolution)
"""
from .engine import run_battle, BattleSession, MatchOutcome, MatchResult, Side
__all__ = ["run_battle","BattleSession","MatchOutcome","MatchResult","Side"]
