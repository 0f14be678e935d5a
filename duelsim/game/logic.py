import logging
from enum import Enum
from typing import Optional, assert_never
from rich.text import Text
from ..models import Item, LaughReason, Mood, Player, RandomSource, random_item, weapon_damage

logger = logging.getLogger(__name__)

MOCK_HEALTH_GAP = 5


class Action(Enum):
    ATTACK = "attack"
    MOCK = "mock"


def weapon_phrase(weapon: Optional[Item]) -> str:
    if weapon is None:
        return "their hands"
    elif weapon is Item.STAFF:
        return "their staff"
    elif weapon is Item.POTION:
        return "a potion"
    else:
        assert_never(weapon)


class GameLogic:
    def __init__(self, rng: RandomSource, console):
        self.rng = rng
        self.console = console

    def acquire_random_item(self, player: Player) -> Item:
        item = random_item(self.rng)
        player.take(item)
        return item

    def receive_compliment(self, player: Player, compliment: str):
        logger.debug("%s was complimented: %s", player.name, compliment)
        self.console.print(Text(f"{player.name} liked the compliment!"))

    def attack(self, attacker: Player, defender: Player) -> int:
        weapon = attacker.weapon
        damage = weapon_damage(weapon)
        defender.health -= damage
        logger.debug("%s dealt %d to %s", attacker.name, damage, defender.name)
        self.console.print(Text(f"{attacker.name} attacked {defender.name} with {weapon_phrase(weapon)} for {damage} damage"))
        self.console.print(Text(f"{defender.name} now has {defender.health} hp left!"))
        return damage

    def mock(self, actor: Player, target: Player, reason: LaughReason):
        if reason is LaughReason.TARGET_IS_WEAK:
            self.console.print(Text(f"{actor.name} laughed at {target.name}, because {target.name} is so weak..."))
        else:
            assert_never(reason)
        self.receive_mockery(target, reason)

    def receive_mockery(self, player: Player, reason: LaughReason):
        if reason is LaughReason.TARGET_IS_WEAK:
            self.set_mood(player, Mood.SAD)
        else:
            assert_never(reason)

    def set_mood(self, player: Player, mood: Mood):
        player.mood = mood
        if mood is Mood.HAPPY:
            self.console.print(Text(f"{player.name} is happy now!", style="green"))
        elif mood is Mood.SAD:
            self.console.print(Text(f"{player.name} is sad now... :(", style="blue"))
        elif mood is Mood.ANGRY:
            self.console.print(Text(f"{player.name} is ANGRY now!", style="bold red"))
        else:
            assert_never(mood)

    def interact(self, actor: Player, target: Player) -> Action:
        if actor.health - target.health > MOCK_HEALTH_GAP:
            self.mock(actor, target, LaughReason.TARGET_IS_WEAK)
            return Action.MOCK
        self.attack(actor, target)
        return Action.ATTACK
