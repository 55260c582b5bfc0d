import random
import pytest
from pbcl.battle.engine import BattleSession, MatchOutcome, Side, run_battle
from pbcl.battle.models import Creature, CombatStats, Move
from pbcl.battle.factory import new_creature
from pbcl.trainer import Party


def tackler(name, speed=4, health=100, uses=50, damage=20):
    return Creature(name, moves=[Move("Tackle", "Normal", damage, uses, uses)],
                    stats=CombatStats(speed=speed, health=health, max_health=max(health, 1)))


def test_faster_side_acts_first():
    a, b = tackler("Slow", speed=4), tackler("Fast", speed=10)
    session = BattleSession(Party([a]), Party([b]))
    session.step()
    assert a.stats.health == 80
    assert b.stats.health == 100
    assert session.events[0].actor == "Fast"
    session.step()
    assert b.stats.health == 80
    assert session.rounds == 1 and not session.in_round()


def test_full_round_both_act():
    a, b = tackler("Slow", speed=4), tackler("Fast", speed=10)
    session = BattleSession(Party([a]), Party([b]))
    session.play_round()
    assert a.stats.health == 80 and b.stats.health == 80
    assert [e.actor for e in session.events] == ["Fast", "Slow"]


@pytest.mark.parametrize("winner,first", [(Side.A, "Left"), (Side.B, "Right"), ("B", "Right")])
def test_speed_tie_policy(winner, first):
    a, b = tackler("Left", speed=7), tackler("Right", speed=7)
    session = BattleSession(Party([a]), Party([b]), speed_tie_winner=winner)
    session.step()
    assert session.events[0].actor == first


def test_faint_ends_round_and_advances():
    frail = tackler("Frail", speed=1, health=20)
    backup = tackler("Backup", speed=1)
    foe = tackler("Foe", speed=9)
    session = BattleSession(Party([frail, backup]), Party([foe]))
    session.play_round()
    assert frail.stats.health == 0
    assert foe.stats.health == 100  # fainted side never acted
    assert [e.kind for e in session.events] == ["attack", "faint"]
    assert session.events[1].text == "Frail was defeated by Foe"
    assert session.active[Side.A] == 1
    assert session.alive[Side.A] == 1


def test_starts_at_first_living_member_and_skips_fainted():
    down = tackler("Down", health=0)
    lead = tackler("Lead")
    b0, b1, b2 = tackler("B0", health=20), tackler("B1", health=0), tackler("B2")
    session = BattleSession(Party([down, lead]), Party([b0, b1, b2]))
    assert session.combatant(Side.A).name == "Lead"
    session.play_round()
    assert session.combatant(Side.B).name == "B2"


def test_move_uses_are_spent():
    a, b = tackler("A", speed=5, uses=3), tackler("B", speed=1, uses=3)
    session = BattleSession(Party([a]), Party([b]))
    session.play_round()
    assert a.moves[0].current_use == 2
    assert b.moves[0].current_use == 2


def test_exhausted_when_nobody_can_act():
    a, b = tackler("A", uses=1, damage=10), tackler("B", uses=1, damage=10)
    result = run_battle(Party([a]), Party([b]))
    assert result.outcome is MatchOutcome.EXHAUSTED
    assert result.rounds == 1
    assert result.events[-1].kind == "exhausted"
    assert a.stats.health == 90 and b.stats.health == 90


def test_combatant_without_moves_passes():
    idle = Creature("Idle", stats=CombatStats(speed=50))
    result = run_battle(Party([idle]), Party([tackler("Hitter")]))
    assert result.outcome is MatchOutcome.SIDE_B_WIN
    assert any(e.kind == "pass" for e in result.events)


def test_unenforced_uses_never_run_out():
    a = tackler("A", speed=5, uses=1, damage=10)
    b = tackler("B", speed=1, uses=1, damage=5)
    result = run_battle(Party([a]), Party([b]), enforce_uses=False)
    assert result.outcome is MatchOutcome.SIDE_A_WIN
    assert a.moves[0].current_use == 1


def test_max_rounds_bounds_the_match():
    a, b = tackler("A", damage=0), tackler("B", damage=0)
    result = run_battle(Party([a]), Party([b]), enforce_uses=False, max_rounds=5)
    assert result.outcome is MatchOutcome.EXHAUSTED
    assert result.rounds == 5


def test_empty_side_loses_immediately():
    result = run_battle(Party([tackler("A")]), Party())
    assert result.outcome is MatchOutcome.SIDE_A_WIN
    assert result.rounds == 0
    assert run_battle(Party(), Party()).outcome is MatchOutcome.EXHAUSTED


def test_default_rosters_run_to_completion():
    left = Party([new_creature(f"John{i}") for i in range(6)])
    right = Party([new_creature(f"Smith{i}") for i in range(6)])
    result = run_battle(left, right)
    assert result.outcome in {MatchOutcome.SIDE_A_WIN, MatchOutcome.SIDE_B_WIN, MatchOutcome.EXHAUSTED}
    assert any("uses Ember against" in line for line in result.log)
    if result.outcome is MatchOutcome.SIDE_A_WIN:
        assert result.alive_b == 0 and result.alive_a > 0


def test_random_parties_terminate_with_one_outcome():
    rng = random.Random(1234)
    for _ in range(25):
        def roster(prefix):
            return Party([tackler(f"{prefix}{i}", speed=rng.randint(1, 10), health=rng.randint(1, 150),
                                  uses=rng.randint(1, 10), damage=rng.randint(1, 40))
                          for i in range(rng.randint(1, 6))])
        result = run_battle(roster("a"), roster("b"))
        assert result.outcome is not MatchOutcome.ONGOING
        if result.outcome is MatchOutcome.SIDE_A_WIN:
            assert result.alive_b == 0 and result.alive_a > 0
        elif result.outcome is MatchOutcome.SIDE_B_WIN:
            assert result.alive_a == 0 and result.alive_b > 0


def test_message_callback_receives_narration():
    lines = []
    run_battle(Party([tackler("A", speed=5)]), Party([tackler("B", health=20)]), message_cb=lines.append)
    assert lines == ["A uses Tackle against B", "B was defeated by A"]
