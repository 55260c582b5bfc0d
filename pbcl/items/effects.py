"""Applying an item's parsed effects to a member of a party.

Each effect yields an EffectResult so callers can tell a heal from a wasted
item without reading the log.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Union

from pbcl.battle.models import Creature, Status
from pbcl.core.logging import logger
from .parser import EffectPair, parse_effects, parse_number

if TYPE_CHECKING:
    from pbcl.trainer import Party

class EffectOutcome(str, Enum):
    HEALED = "healed"
    CURED = "cured"
    NO_EFFECT = "no_effect"
    UNIMPLEMENTED = "unimplemented"
    TARGET_NOT_IN_PARTY = "target_not_in_party"

@dataclass(frozen=True)
class EffectResult:
    target: str
    effect: str
    value: str
    outcome: EffectOutcome
    amount: int = 0

def _heal(member: Creature, pair: EffectPair) -> EffectResult:
    stats = member.stats
    if stats.health >= stats.max_health:
        logger.info("ItemNoEffect", target=member.name, effect=pair.effect_name, reason="full_health")
        return EffectResult(member.name, pair.effect_name, pair.effect_value, EffectOutcome.NO_EFFECT)
    before = stats.health
    stats.health = min(stats.max_health, before + parse_number(pair.effect_value))
    healed = stats.health - before
    logger.info("CreatureHealed", target=member.name, amount=healed, hp=f"{stats.health}/{stats.max_health}")
    return EffectResult(member.name, pair.effect_name, pair.effect_value, EffectOutcome.HEALED, healed)

def _cure(member: Creature, pair: EffectPair) -> EffectResult:
    stats = member.stats
    if stats.status is Status.NONE:
        logger.info("ItemNoEffect", target=member.name, effect=pair.effect_name, reason="no_status")
        return EffectResult(member.name, pair.effect_name, pair.effect_value, EffectOutcome.NO_EFFECT)
    cured = stats.status
    stats.status = Status.NONE
    logger.info("CreatureCured", target=member.name, status=cured.value)
    return EffectResult(member.name, pair.effect_name, pair.effect_value, EffectOutcome.CURED)

EFFECT_HANDLERS: Dict[str, Callable[[Creature, EffectPair], EffectResult]] = {
    "Heal": _heal,
    "Status": _cure,
}

def resolve_target(party: "Party", target: Union[str, int, None]) -> Optional[Creature]:
    return party.resolve(target)

def apply_effects(ability_text: str, party: "Party", target: Union[str, int, None] = None) -> List[EffectResult]:
    """Parse ``ability_text`` and apply every effect to the targeted member.

    ``target`` is a member name or party index; the lead member is used when
    omitted. Every member sharing the target's name receives the effects.
    """
    member = resolve_target(party, target)
    if member is None:
        label = str(target) if target is not None else "<lead>"
        logger.warn("TargetNotInParty", target=label)
        return [EffectResult(label, "", "", EffectOutcome.TARGET_NOT_IN_PARTY)]

    pairs = parse_effects(ability_text)
    results: List[EffectResult] = []
    for pair in pairs:
        handler = EFFECT_HANDLERS.get(pair.effect_name)
        for m in party:
            if m.name != member.name:
                continue
            if handler is None:
                logger.debug("EffectUnimplemented", target=m.name, effect=pair.effect_name)
                results.append(EffectResult(m.name, pair.effect_name, pair.effect_value, EffectOutcome.UNIMPLEMENTED))
                continue
            results.append(handler(m, pair))
    return results

__all__ = ["EffectOutcome","EffectResult","EFFECT_HANDLERS","apply_effects","resolve_target"]
