import argparse
import logging
import sys
from rich.console import Console
from rich.logging import RichHandler

from duelsim.game import Game
from duelsim.models import ConfigurationError
from duelsim.ui import Panels


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Watch two players squabble until nobody is left standing.")
    parser.add_argument("--settings", help="Path to game settings YAML file")
    parser.add_argument("--seed", type=int, help="Seed for the random source, makes a run reproducible")
    parser.add_argument("--max-rounds", type=int, help="Stop the game after this many rounds")
    parser.add_argument("--verbose", action="store_true", help="Print debug logging to stderr")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    console = Console()
    try:
        Game(settings_path=args.settings, seed=args.seed, max_rounds=args.max_rounds, console=console).start()
    except ConfigurationError as e:
        console.print(Panels.render_error_panel("CONFIGURATION ERROR", str(e)))
        return 1
    except KeyboardInterrupt:
        console.print("\nFarewell, the squabble is called off!")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
