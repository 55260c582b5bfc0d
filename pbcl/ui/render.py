"""Rich renderables for the backpack, a party and a finished match."""
from __future__ import annotations
from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED

from pbcl.battle.engine import BattleEvent, MatchOutcome, MatchResult
from pbcl.battle.models import Creature
from pbcl.core.types import type_abbreviation, type_color
from pbcl.inventory import Backpack

_OUTCOME_TEXT = {
    MatchOutcome.SIDE_A_WIN: ("You won the match!", "bold green"),
    MatchOutcome.SIDE_B_WIN: ("You lost the match...", "bold red"),
    MatchOutcome.EXHAUSTED: ("Both sides are exhausted. It's a draw.", "bold yellow"),
    MatchOutcome.ONGOING: ("The match is still going.", "dim"),
}

def hp_bar(current: int, max_hp: int, width: int = 20) -> str:
    if max_hp <= 0 or current <= 0:
        return "[red]FAINTED[/red]"
    percent = min(1.0, current / max_hp)
    filled = int(percent * width)
    if percent > 0.5:
        color = "green"
    elif percent > 0.25:
        color = "yellow"
    else:
        color = "red"
    return f"[{color}]{'█' * filled}{'░' * (width - filled)}[/{color}]"

def backpack_table(backpack: Backpack) -> Table:
    table = Table(title="Backpack", box=ROUNDED)
    table.add_column("Item", style="bold")
    table.add_column("Qty", justify="right")
    table.add_column("Ability")
    for stack in backpack:
        table.add_row(stack.name, str(stack.quantity), stack.ability_text)
    return table

def _moves_text(member: Creature) -> Text:
    text = Text()
    for _, mv in member.known_moves():
        if text.plain:
            text.append(" ")
        text.append(type_abbreviation(mv.attack_type), style=f"bold {type_color(mv.attack_type)}")
        text.append(f" {mv.name} {mv.current_use}/{mv.max_use}")
    return text

def party_table(members: Iterable[Creature], title: str = "Party") -> Table:
    table = Table(title=title, box=ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("HP")
    table.add_column("Status")
    table.add_column("Moves")
    for i, m in enumerate(members, start=1):
        hp = f"{hp_bar(m.stats.health, m.stats.max_health)} {max(0, m.stats.health)}/{m.stats.max_health}"
        table.add_row(str(i), m.name, hp, m.stats.status.value, _moves_text(m))
    return table

def _event_style(event: BattleEvent) -> str:
    return {"attack": "", "faint": "bold red", "pass": "dim", "exhausted": "yellow"}.get(event.kind, "")

def battle_panel(result: MatchResult, *, full_log: bool = True) -> Panel:
    body = Text()
    events = result.events if full_log else [e for e in result.events if e.kind != "attack"]
    for event in events:
        body.append(event.text + "\n", style=_event_style(event))
    msg, style = _OUTCOME_TEXT[result.outcome]
    body.append(msg, style=style)
    return Panel(body, title=f"Battle ({result.rounds} rounds)", box=ROUNDED)

__all__ = ["hp_bar","backpack_table","party_table","battle_panel"]
