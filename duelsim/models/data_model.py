from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple, TypeVar, assert_never

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can draw uniformly from a non-empty sequence (``random.Random`` does)."""

    def choice(self, seq: Sequence[T]) -> T: ...


class Item(Enum):
    POTION = "Potion"
    STAFF = "Staff"


class Mood(Enum):
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"


class LaughReason(Enum):
    TARGET_IS_WEAK = "target_is_weak"


def describe(item: Item) -> Tuple[str, str]:
    if item is Item.POTION:
        return item.value, "Round"
    elif item is Item.STAFF:
        return item.value, "Staffy"
    else:
        assert_never(item)


def random_item(rng: RandomSource) -> Item:
    return rng.choice(list(Item))


def weapon_damage(weapon: Optional[Item]) -> int:
    if weapon is None:
        return 2
    elif weapon is Item.STAFF:
        return 5
    elif weapon is Item.POTION:
        return 4
    else:
        assert_never(weapon)


@dataclass
class Player:
    name: str
    health: int
    mood: Mood = Mood.HAPPY
    inventory: List[Item] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, health: int) -> "Player":
        return cls(name=name, health=health)

    @property
    def weapon(self) -> Optional[Item]:
        # Staff > Potion > bare hands
        if Item.STAFF in self.inventory:
            return Item.STAFF
        if Item.POTION in self.inventory:
            return Item.POTION
        return None

    def take(self, item: Item) -> None:
        self.inventory.append(item)

    def is_alive(self) -> bool:
        return self.health > 0

    def __str__(self) -> str:
        return f"<Player {self.name} with {self.health} hp>"


@dataclass
class GameResult:
    rounds: int
    players: List[Player]
    truncated: bool = False
