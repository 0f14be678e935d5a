from .data_model import (
    GameResult,
    Item,
    LaughReason,
    Mood,
    Player,
    RandomSource,
    describe,
    random_item,
    weapon_damage,
)
from .config import Config
from .errors import ConfigurationError

__all__ = [
    'Config', 'ConfigurationError', 'GameResult', 'Item', 'LaughReason', 'Mood', 'Player',
    'RandomSource', 'describe', 'random_item', 'weapon_damage',
]
