"""Attack type metadata: whitelist, abbreviations and display colors.

Provides:
  VALID_ATTACK_TYPES: the case-insensitive whitelist moves are checked against
  TYPE_COLORS_HEX: mapping type -> hex color string (#RRGGBB)
  TYPE_ABBREVIATIONS: mapping type -> 3-letter abbreviation (upper)
"""
from __future__ import annotations
from typing import Dict, FrozenSet

from pbcl.core.errors import InvalidAttackType

VALID_ATTACK_TYPES: FrozenSet[str] = frozenset({"fire", "water", "psyche", "normal", "darkness"})

TYPE_COLORS_HEX: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "psyche": "#F95587",
    "darkness": "#705746",
}

TYPE_ABBREVIATIONS: Dict[str, str] = {
    "normal": "NRM",
    "fire": "FIR",
    "water": "WTR",
    "psyche": "PSY",
    "darkness": "DRK",
}

def is_valid_attack_type(attack_type: str) -> bool:
    return attack_type.lower() in VALID_ATTACK_TYPES

def validate_attack_type(attack_type: str, move: str) -> str:
    """Return the lower-cased type or raise InvalidAttackType."""
    if not is_valid_attack_type(attack_type):
        raise InvalidAttackType(attack_type, move)
    return attack_type.lower()

def type_abbreviation(type_name: str) -> str:
    return TYPE_ABBREVIATIONS.get(type_name.lower(), type_name[:3].upper())

def type_color(type_name: str) -> str:
    return TYPE_COLORS_HEX.get(type_name.lower(), "#FFFFFF")

__all__ = [
    'VALID_ATTACK_TYPES','TYPE_COLORS_HEX','TYPE_ABBREVIATIONS',
    'is_valid_attack_type','validate_attack_type','type_abbreviation','type_color'
]
