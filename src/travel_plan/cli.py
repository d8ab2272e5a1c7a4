"""
Travel Plan Manager - record train rides and keep a running fare total.

This is the main entry point for the interactive command-line tool.
"""

import sys

from dotenv import find_dotenv, load_dotenv

from travel_plan.config import get_config
from travel_plan.logging import get_logger, initialize_logging
from travel_plan.menu import MenuController
from travel_plan.prompts import ConsolePrompt
from travel_plan.store import TripStore

logger = get_logger(__name__)


def build_controller() -> MenuController:
    """Wire the store, console prompt and configuration together."""
    config = get_config()

    _, warnings = config.validate_config()
    for warning in warnings:
        logger.warning(warning)

    store = TripStore(config.data_file, strict=config.strict_load)
    return MenuController(store, ConsolePrompt(), config)


def main() -> int:
    """Run the interactive menu and return the exit status."""
    load_dotenv(find_dotenv(usecwd=True))
    initialize_logging()

    controller = build_controller()
    logger.info(f"Using trip file {controller.store.path}")
    return controller.run()


if __name__ == "__main__":
    sys.exit(main())
