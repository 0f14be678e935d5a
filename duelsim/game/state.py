import logging
from typing import List, Tuple
from ..models import ConfigurationError, Player, RandomSource

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, config, players: List[Player] = None):
        self.config = config
        self.players: List[Player] = players if players is not None else config.build_players()
        self.round = 0

    def increment_round(self):
        self.round += 1

    def check_player_status(self) -> bool:
        return any(player.is_alive() for player in self.players)

    def validate_roster(self):
        if len(self.players) < 2:
            raise ConfigurationError(f"Roster too small: need at least 2 players, got {len(self.players)}")

    def pick_two_players(self, rng: RandomSource) -> Tuple[int, int]:
        """Draw actor and target indices independently, retrying until they differ."""
        self.validate_roster()
        indices = range(len(self.players))
        while True:
            actor = rng.choice(indices)
            target = rng.choice(indices)
            if actor != target:
                logger.debug("Round %d pairs %s against %s", self.round, self.players[actor].name, self.players[target].name)
                return actor, target

    def round_cap_reached(self) -> bool:
        return self.config.max_rounds is not None and self.round >= self.config.max_rounds
