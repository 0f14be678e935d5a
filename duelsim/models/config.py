import logging
import yaml
from typing import List
from .data_model import Player
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = [
    {"name": "Rasmus", "health": 43},
    {"name": "Resmus", "health": 43},
]


class Config:
    def __init__(self, settings_path: str = None, seed: int = None, max_rounds: int = None) -> None:
        self.settings_path = settings_path

        if settings_path:
            try:
                with open(settings_path) as settings_file:
                    game_parameters = yaml.safe_load(settings_file) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Could not read settings file {settings_path}: {e}") from e
            logger.debug("Loaded settings from %s", settings_path)
        else:
            game_parameters = {}

        if not isinstance(game_parameters, dict):
            raise ConfigurationError(f"Settings file {settings_path} must contain a mapping")

        self.player_entries = game_parameters.get("players")
        if self.player_entries is None:
            self.player_entries = DEFAULT_PLAYERS
        if not isinstance(self.player_entries, list):
            raise ConfigurationError(f"players must be a list, got {self.player_entries!r}")

        game_settings = game_parameters.get("game_settings")
        if game_settings is None:
            game_settings = {}
        if not isinstance(game_settings, dict):
            raise ConfigurationError(f"game_settings must be a mapping, got {game_settings!r}")
        self.starting_items = game_settings.get("starting_items", 2)
        self.max_rounds = max_rounds if max_rounds is not None else game_settings.get("max_rounds")
        self.seed = seed if seed is not None else game_settings.get("seed")
        self.round_header_color = game_settings.get("round_header_color", "bright_black")
        self.inventory_panel_color = game_settings.get("inventory_panel_color", "white")

        if not isinstance(self.starting_items, int) or isinstance(self.starting_items, bool) or self.starting_items < 0:
            raise ConfigurationError(f"starting_items must be a non-negative integer, got {self.starting_items!r}")
        if self.max_rounds is not None and (not isinstance(self.max_rounds, int) or isinstance(self.max_rounds, bool) or self.max_rounds < 1):
            raise ConfigurationError(f"max_rounds must be a positive integer, got {self.max_rounds!r}")

    def build_players(self) -> List[Player]:
        players = []
        for entry in self.player_entries:
            if not isinstance(entry, dict):
                raise ConfigurationError(f"Player entry must be a mapping, got {entry!r}")
            name = entry.get("name")
            health = entry.get("health")
            if not name:
                raise ConfigurationError(f"Player entry is missing a name: {entry!r}")
            if not isinstance(health, int) or isinstance(health, bool):
                raise ConfigurationError(f"Player {name} needs an integer health, got {health!r}")
            players.append(Player.create(str(name), health))
        return players
