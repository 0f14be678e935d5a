from .core import Game
from .logic import Action, GameLogic
from .state import GameState

__all__ = ['Action', 'Game', 'GameLogic', 'GameState']
