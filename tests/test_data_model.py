"""
Item catalog and player record tests
"""
import random

from duelsim.models import Item, Mood, Player, describe, random_item, weapon_damage


class TestItemCatalog:

    def test_describe_every_item(self):
        assert describe(Item.POTION) == ("Potion", "Round")
        assert describe(Item.STAFF) == ("Staff", "Staffy")

    def test_random_item_draws_from_catalog(self):
        rng = random.Random(7)
        drawn = {random_item(rng) for _ in range(50)}
        assert drawn == set(Item)

    def test_random_item_uses_injected_source(self, scripted):
        assert random_item(scripted([1])) is Item.STAFF
        assert random_item(scripted([0])) is Item.POTION


class TestPlayer:

    def test_create_defaults(self):
        player = Player.create("Rasmus", 43)
        assert player.name == "Rasmus"
        assert player.health == 43
        assert player.mood is Mood.HAPPY
        assert player.inventory == []

    def test_create_accepts_non_positive_health(self):
        player = Player.create("Ghost", 0)
        assert player.health == 0
        assert not player.is_alive()
        assert not Player.create("Wraith", -3).is_alive()

    def test_take_appends_in_order(self):
        player = Player.create("Rasmus", 43)
        player.take(Item.STAFF)
        player.take(Item.POTION)
        assert player.inventory == [Item.STAFF, Item.POTION]

    def test_weapon_priority(self):
        player = Player.create("Rasmus", 43)
        assert player.weapon is None
        player.take(Item.POTION)
        assert player.weapon is Item.POTION
        player.take(Item.STAFF)
        assert player.weapon is Item.STAFF

    def test_weapon_damage_ordering(self):
        assert weapon_damage(Item.STAFF) == 5
        assert weapon_damage(Item.POTION) == 4
        assert weapon_damage(None) == 2

    def test_str(self):
        assert str(Player.create("Rasmus", 43)) == "<Player Rasmus with 43 hp>"
