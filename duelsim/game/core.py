import logging
import random
from rich.console import Console

from ..models import Config, GameResult, Player, RandomSource, describe
from ..ui import Panels
from .state import GameState
from .logic import GameLogic

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, settings_path: str = None, seed: int = None, max_rounds: int = None, config: Config = None, rng: RandomSource = None, console: Console = None) -> None:
        """A prebuilt ``config`` takes precedence: settings_path, seed and max_rounds are then ignored."""
        self.config = config or Config(settings_path, seed=seed, max_rounds=max_rounds)

        self.console = console or Console()
        self.panels = Panels(self.config)

        self.rng = rng or random.Random(self.config.seed)
        logger.debug("Random seed: %s", self.config.seed)

        self.state = GameState(self.config)
        self.logic = GameLogic(self.rng, self.console)

    def render_inventory(self, player: Player) -> str:
        lines = []
        for item in player.inventory:
            name, info = describe(item)
            lines.append(f"  * {name} ({info})")
        return "\n".join(lines) if lines else "  (nothing)"

    def setup(self):
        for player in self.state.players:
            for _ in range(self.config.starting_items):
                self.logic.acquire_random_item(player)
            self.console.print(self.panels.render_inventory_panel(f"{player.name} holds:", self.render_inventory(player)))

    def play_round(self):
        actor_index, target_index = self.state.pick_two_players(self.rng)
        actor = self.state.players[actor_index]
        target = self.state.players[target_index]

        self.console.print(self.panels.render_round_header(self.state.round))
        return self.logic.interact(actor, target)

    def run(self) -> GameResult:
        self.state.validate_roster()

        truncated = False
        while self.state.check_player_status():
            if self.state.round_cap_reached():
                truncated = True
                break
            self.state.increment_round()
            self.play_round()

        logger.debug("Game ended after %d rounds (truncated=%s)", self.state.round, truncated)
        return GameResult(rounds=self.state.round, players=self.state.players, truncated=truncated)

    def start(self) -> GameResult:
        self.state.validate_roster()
        self.setup()
        result = self.run()

        standings = " | ".join(f"{player.name}: {player.health} HP" for player in result.players)
        if result.truncated:
            self.console.print(self.panels.render_info_panel("STALEMATE", f"Stopped after {result.rounds} rounds\n{standings}"))
        else:
            self.console.print(self.panels.render_end_panel("GAME OVER", f"Everyone has fallen after {result.rounds} rounds\n{standings}"))
        return result
