"""The trainer's backpack: ordered item stacks with quantity tracking."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple, Union

from pbcl.core.logging import logger
from pbcl.items.catalog import ItemDescriptor
from pbcl.items.effects import EffectResult, apply_effects

if TYPE_CHECKING:
    from pbcl.trainer import Party

@dataclass
class OwnedItemStack:
    item: ItemDescriptor
    quantity: int = 1

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def ability_text(self) -> str:
        return self.item.ability_text

class ConsumeOutcome(str, Enum):
    USED = "used"
    NOT_OWNED = "not_owned"
    TARGET_NOT_IN_PARTY = "target_not_in_party"

@dataclass
class ConsumeResult:
    item: str
    outcome: ConsumeOutcome
    effects: List[EffectResult] = field(default_factory=list)
    remaining: int = 0

class Backpack:
    def __init__(self):
        self._stacks: List[OwnedItemStack] = []

    def __len__(self) -> int:
        return len(self._stacks)

    def __iter__(self) -> Iterator[OwnedItemStack]:
        return iter(self._stacks)

    def _find(self, name: str) -> Optional[Tuple[int, OwnedItemStack]]:
        return next(((i, s) for i, s in enumerate(self._stacks) if s.name == name), None)

    def acquire(self, name: str) -> OwnedItemStack:
        """Add one ``name``; raises UnknownItem for names outside the catalog."""
        found = self._find(name)
        if found:
            stack = found[1]
            stack.quantity += 1
        else:
            stack = OwnedItemStack(ItemDescriptor.from_name(name))
            self._stacks.append(stack)
        logger.info("ItemAcquired", item=name, quantity=stack.quantity)
        return stack

    def lookup(self, name: str) -> bool:
        return self._find(name) is not None

    def quantity(self, name: str) -> int:
        found = self._find(name)
        return found[1].quantity if found else 0

    def consume(self, name: str, party: "Party", target: Union[str, int, None] = None) -> ConsumeResult:
        """Use one ``name`` on ``target`` (name or index; lead member if None).

        Missing items and missing targets are reported in the result and leave
        both backpack and party untouched.
        """
        found = self._find(name)
        if found is None:
            logger.warn("ItemNotOwned", item=name)
            return ConsumeResult(name, ConsumeOutcome.NOT_OWNED)
        idx, stack = found
        if party.resolve(target) is None:
            logger.warn("TargetNotInParty", item=name, target=target)
            return ConsumeResult(name, ConsumeOutcome.TARGET_NOT_IN_PARTY, remaining=stack.quantity)

        stack.quantity -= 1
        effects = apply_effects(stack.ability_text, party, target)
        if stack.quantity == 0:
            del self._stacks[idx]
        logger.info("ItemUsed", item=name, remaining=stack.quantity,
                    outcomes=",".join(e.outcome.value for e in effects))
        return ConsumeResult(name, ConsumeOutcome.USED, effects, stack.quantity)

    def stacks(self) -> List[Tuple[str, int]]:
        return [(s.name, s.quantity) for s in self._stacks]

    def list(self) -> List[str]:
        return [f"{s.name}: {s.ability_text}" for s in self._stacks]

__all__ = ["Backpack","OwnedItemStack","ConsumeOutcome","ConsumeResult"]
