"""Parsing of free-text item ability descriptions.

An ability description is a comma separated list of ``Name: value`` pairs,
e.g. ``"Heal: 999, Status: None"``. Numeric values are decoded with a strict
base-10 reader that accepts nothing but the digits 0-9.
"""
from __future__ import annotations
from typing import List, NamedTuple

from pbcl.core.errors import InvalidDigit, MissingValue

SEGMENT_SEPARATOR = ","
PAIR_SEPARATOR = ":"
# Segments this short cannot hold "X:Y" and are dropped (the trailing one always is).
_MIN_SEGMENT_LEN = 2

class EffectPair(NamedTuple):
    effect_name: str
    effect_value: str

def digit_value(char: str, text: str = "") -> int:
    if len(char) != 1 or not ("0" <= char <= "9"):
        raise InvalidDigit(char, text or char)
    return ord(char) - ord("0")

def parse_number(text: str) -> int:
    """Decode a run of decimal digits into a non-negative integer.

    No sign, whitespace or separators are accepted; an empty string is 0.
    """
    value = 0
    for char in text:
        value = value * 10 + digit_value(char, text)
    return value

def parse_pair(segment: str) -> EffectPair:
    # Tokens alternate name/value; extra colons keep alternating and the last pair wins.
    name, value = "", ""
    expecting_value = False
    for token in segment.split(PAIR_SEPARATOR):
        if expecting_value:
            value = token.strip()
        else:
            name = token.strip()
        expecting_value = not expecting_value
    if expecting_value:
        raise MissingValue(name)
    return EffectPair(name, value)

def parse_effects(ability_text: str) -> List[EffectPair]:
    """Split an ability description into ordered (name, value) pairs."""
    text = ability_text.strip() + SEGMENT_SEPARATOR
    effects: List[EffectPair] = []
    for segment in text.split(SEGMENT_SEPARATOR):
        if len(segment.strip()) <= _MIN_SEGMENT_LEN:
            continue
        effects.append(parse_pair(segment))
    return effects

__all__ = ["EffectPair","parse_number","parse_effects","parse_pair","digit_value"]
