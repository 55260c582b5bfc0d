"""
Error classes for clearer exception sources.

Only unrecoverable construction-time failures are exceptions; inventory and
party lookups report their failures through outcome enums instead.
"""
from __future__ import annotations

class PbclError(Exception):
    pass

class InvalidDigit(PbclError, ValueError):
    def __init__(self, char: str, text: str):
        super().__init__(f"'{char}' in '{text}' cannot be represented as a decimal digit")
        self.char = char
        self.text = text

class MissingValue(PbclError, ValueError):
    def __init__(self, key: str):
        super().__init__(f"'{key}' is missing a value")
        self.key = key

class UnknownItem(PbclError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"'{self.name}' is not a supported item"

class InvalidAttackType(PbclError, ValueError):
    def __init__(self, attack_type: str, move: str):
        super().__init__(f"Move '{move}' has unsupported attack type '{attack_type}'")
        self.attack_type = attack_type
        self.move = move
