"""Item catalog, ability text parsing and effect application."""
from .catalog import ITEM_CATALOG, ItemDescriptor, ability_for, get_item
from .parser import EffectPair, parse_number, parse_effects
from .effects import EffectOutcome, EffectResult, apply_effects

__all__ = [
    "ITEM_CATALOG","ItemDescriptor","ability_for","get_item",
    "EffectPair","parse_number","parse_effects",
    "EffectOutcome","EffectResult","apply_effects",
]
