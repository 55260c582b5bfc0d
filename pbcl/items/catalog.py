"""Static item catalog.

The catalog is the only source of valid item names; an ItemDescriptor can
only be built for a name found here.
"""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from pbcl.core.errors import UnknownItem
from pbcl.core.logging import logger

ITEM_CATALOG: Mapping[str, str] = MappingProxyType({
    "Potion": "Heal: 20",
    "Super Potion": "Heal: 60",
    "Hyper Potion": "Heal: 120",
    "Full Recover": "Heal: 999, Status: None",
})

def ability_for(name: str) -> str:
    try:
        return ITEM_CATALOG[name]
    except KeyError:
        raise UnknownItem(name) from None

def is_known_item(name: str) -> bool:
    return name in ITEM_CATALOG

@dataclass(frozen=True)
class ItemDescriptor:
    name: str
    ability_text: str

    def __post_init__(self):
        if self.name not in ITEM_CATALOG:
            raise UnknownItem(self.name)

    @classmethod
    def from_name(cls, name: str) -> "ItemDescriptor":
        ability = ability_for(name)
        logger.debug("ItemAccepted", item=name, ability=ability)
        return cls(name, ability)

def get_item(name: str) -> ItemDescriptor:
    return ItemDescriptor.from_name(name)

__all__ = ["ITEM_CATALOG","ItemDescriptor","ability_for","is_known_item","get_item"]
