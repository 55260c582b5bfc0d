from pbcl.battle.factory import new_creature
from pbcl.trainer import new_trainer, AddOutcome, MAX_PARTY_SIZE


def test_party_rejects_seventh_member():
    trainer = new_trainer("John")
    for i in range(MAX_PARTY_SIZE):
        assert trainer.add_party_member(new_creature(f"John{i}")) is AddOutcome.ADDED
    assert len(trainer.party) == 6
    outcome = trainer.add_party_member(new_creature("John7"))
    assert outcome is AddOutcome.PARTY_FULL
    assert len(trainer.party) == 6
    assert not trainer.party.contains("John7")
    assert "John7" not in trainer.pokedex


def test_new_trainer_is_empty():
    trainer = new_trainer("Mew")
    assert trainer.name == "Mew"
    assert trainer.card.battles == 0 and trainer.card.badges == []
    assert len(trainer.party) == 0
    assert len(trainer.inventory) == 0


def test_party_navigation():
    trainer = new_trainer("John")
    for n in ("A", "B", "C"):
        trainer.add_party_member(new_creature(n))
    party = trainer.party
    party[0].stats.health = 0
    assert party.alive_count() == 2
    assert party.first_alive() == 1
    assert party.next_alive(2) == 1
    party[1].stats.health = 0
    party[2].stats.health = 0
    assert party.next_alive(0) is None
    assert party.first_alive() is None


def test_trainer_item_use_targets_party():
    trainer = new_trainer("John")
    trainer.add_party_member(new_creature("John"))
    trainer.party[0].stats.health = 40
    trainer.inventory.acquire("Hyper Potion")
    trainer.use_item("Hyper Potion", "John")
    assert trainer.party[0].stats.health == 100
    assert not trainer.inventory.lookup("Hyper Potion")
