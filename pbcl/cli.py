"""Scripted tutorial: use an item, then battle the rival.

Nothing here reads input; every choice is fixed.
"""
from __future__ import annotations
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from pbcl.battle.engine import MatchResult
from pbcl.battle.factory import Movepool, new_creature
from pbcl.inventory import ConsumeOutcome
from pbcl.system.settings import Settings
from pbcl.trainer import Trainer, new_trainer
from pbcl.ui.render import backpack_table, battle_panel, party_table

PREFERRED_ITEMS = ("Potion", "Super Potion")

def default_player(movepool: Optional[Movepool] = None) -> Trainer:
    trainer = new_trainer("John")
    trainer.backpack.acquire("Potion")
    for name in ("John", "John2", "John3", "John4", "John5", "John6"):
        trainer.add_party_member(new_creature(name, movepool=movepool))
    return trainer

def rival_npc(movepool: Optional[Movepool] = None) -> Trainer:
    rival = new_trainer("Mew")
    for _ in range(10):
        rival.backpack.acquire("Full Recover")
    for name in ("Smith", "Smith2", "Smith3", "Smith4", "Smith5", "Smith6"):
        rival.add_party_member(new_creature(name, movepool=movepool))
    return rival

def choose_item(trainer: Trainer) -> Optional[str]:
    return next((name for name in PREFERRED_ITEMS if trainer.backpack.lookup(name)), None)

def tutorial(player: Trainer, rival: Trainer, settings: Settings, console: Optional[Console] = None) -> MatchResult:
    console = console or Console()
    console.print(Panel("Hey there, welcome to PBCL. Here we'll introduce you to the gameplay.\n"
                        "Please choose an item within your backpack.", title="Tutorial"))
    console.print(backpack_table(player.backpack))

    item = choose_item(player)
    if item is None:
        console.print("[yellow]Your backpack has nothing to use.[/yellow]")
    else:
        res = player.use_item(item)
        if res.outcome is ConsumeOutcome.USED:
            outcomes = ", ".join(e.outcome.value for e in res.effects) or "nothing"
            console.print(f"You've used {item}! ({outcomes})")
        else:
            console.print(f"[yellow]{item} could not be used: {res.outcome.value}[/yellow]")

    console.print("Now, let's move on to battle!")
    console.print(party_table(player.party, title=f"{player.name}'s party"))
    console.print(party_table(rival.party, title=f"{rival.name}'s party"))
    result = player.battle(rival, **settings.battle_options())
    console.print(battle_panel(result, full_log=settings.data.debug))
    return result

def run(settings: Optional[Settings] = None) -> MatchResult:
    settings = settings or Settings.load()
    settings.apply()
    return tutorial(default_player(), rival_npc(), settings)

__all__ = ["run","tutorial","default_player","rival_npc","choose_item"]
