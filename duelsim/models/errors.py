class ConfigurationError(Exception):
    """Raised when the settings or the roster cannot produce a playable game."""
