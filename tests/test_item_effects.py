import pytest
from pbcl.battle.factory import new_creature
from pbcl.battle.models import Status
from pbcl.items.effects import apply_effects, EffectOutcome
from pbcl.trainer import Party
from pbcl.core.errors import MissingValue


def make_party(*names):
    return Party([new_creature(n) for n in names])


def test_heal_at_full_health_has_no_effect():
    party = make_party("John")
    res = apply_effects("Heal: 20", party, "John")
    assert [r.outcome for r in res] == [EffectOutcome.NO_EFFECT]
    assert party[0].stats.health == party[0].stats.max_health


def test_heal_is_clamped_to_max():
    party = make_party("John")
    mon = party[0]
    mon.stats.health = mon.stats.max_health - 5
    res = apply_effects("Heal: 20", party, "John")
    assert res[0].outcome is EffectOutcome.HEALED
    assert res[0].amount == 5
    assert mon.stats.health == mon.stats.max_health


def test_heal_below_cap_adds_value():
    party = make_party("John")
    party[0].stats.health = 30
    apply_effects("Heal: 60", party, "John")
    assert party[0].stats.health == 90


@pytest.mark.parametrize("status", [Status.POISONED, Status.CONFUSED])
def test_status_cure_resets(status):
    party = make_party("John")
    party[0].stats.status = status
    res = apply_effects("Heal: 999, Status: None", party, "John")
    assert [r.outcome for r in res] == [EffectOutcome.NO_EFFECT, EffectOutcome.CURED]
    assert party[0].stats.status is Status.NONE


def test_status_cure_noop_when_healthy():
    party = make_party("John")
    res = apply_effects("Status: None", party, "John")
    assert res[0].outcome is EffectOutcome.NO_EFFECT
    assert party[0].stats.status is Status.NONE


def test_target_by_index_and_default_lead():
    party = make_party("John", "John2")
    party[1].stats.health = 10
    apply_effects("Heal: 20", party, 1)
    assert party[1].stats.health == 30
    party[0].stats.health = 50
    apply_effects("Heal: 20", party)
    assert party[0].stats.health == 70


def test_missing_target_applies_nothing():
    party = make_party("John")
    party[0].stats.health = 10
    res = apply_effects("Heal: 20", party, "Ghost")
    assert [r.outcome for r in res] == [EffectOutcome.TARGET_NOT_IN_PARTY]
    assert party[0].stats.health == 10
    assert apply_effects("Heal: 20", party, 5)[0].outcome is EffectOutcome.TARGET_NOT_IN_PARTY
    assert apply_effects("Heal: 20", Party())[0].outcome is EffectOutcome.TARGET_NOT_IN_PARTY


def test_unknown_effect_is_reported_unimplemented():
    party = make_party("John")
    res = apply_effects("Revive: 1", party, "John")
    assert res[0].outcome is EffectOutcome.UNIMPLEMENTED
    assert res[0].effect == "Revive"


def test_effects_reach_every_member_with_the_name():
    party = make_party("Twin", "Twin")
    for m in party:
        m.stats.health = 1
    res = apply_effects("Heal: 20", party, "Twin")
    assert len(res) == 2
    assert all(m.stats.health == 21 for m in party)


def test_malformed_text_raises():
    party = make_party("John")
    with pytest.raises(MissingValue):
        apply_effects("Heal", party, "John")
