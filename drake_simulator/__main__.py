"""Entry point: ``python -m drake_simulator`` or ``drake-simulator``."""

from __future__ import annotations

from .game import Game
from .logger_setup import setup_logging
from .ui.text import FontLoadError


def main() -> None:
    logger = setup_logging()
    logger.info("Application starting...")
    try:
        game = Game()
    except FontLoadError:
        logger.exception("Startup failed: font assets could not be loaded")
        raise
    game.run()


if __name__ == "__main__":
    main()
